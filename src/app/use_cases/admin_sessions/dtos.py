"""
Admin Session Use Case DTOs (Data Transfer Objects)

Command, Response and Error values for the admin session domain.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import ErrorKind
from src.libs.result import Error

# Wrong password, unknown username and disabled account all produce this
# exact value so a caller cannot tell them apart.
INVALID_CREDENTIALS = Error(ErrorKind.unauthorized.value, "Invalid credentials")
MISSING_SESSION = Error(ErrorKind.unauthorized.value, "Missing admin session")
INVALID_SESSION = Error(ErrorKind.unauthorized.value, "Invalid or revoked session")


# ============================================================================
# Command DTOs
# ============================================================================


class ClientContext(BaseModel):
    """Where a login came from, recorded on the session for auditing"""

    client_ip: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for admin login use case

    session_token is the raw bearer token. It goes into the cookie and
    nowhere else.
    """

    session_token: str
    session_id: UUID
    account_id: UUID


class AdminContext(BaseModel):
    """Identity attached to a request that passed the admin session gate"""

    account_id: UUID
    session_id: UUID


class LogoutResponse(BaseModel):
    """Response for admin logout use case"""

    revoked: bool


class IntrospectionResponse(BaseModel):
    """Response for session introspection use case"""

    authenticated: bool
