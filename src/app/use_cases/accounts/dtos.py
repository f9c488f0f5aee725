"""
Account Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class ProvisionAdminResponse(BaseModel):
    """Response for admin provisioning use case"""

    account_id: UUID
    username: str
    created: bool


class AccountStatusResponse(BaseModel):
    """Response for enable/disable use case"""

    username: str
    disabled: bool


class SessionSummary(BaseModel):
    """One row of an account's session history"""

    session_id: UUID
    active: bool
    label: Optional[str]
    client_ip: Optional[str]
    user_agent: Optional[str]
    created_at: datetime
    last_seen_at: datetime
    revoked_at: Optional[datetime]


class AccountSessionsResponse(BaseModel):
    """Response for listing an account's sessions"""

    username: str
    sessions: List[SessionSummary]
