from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Request, Response, status
from pydantic import BaseModel, ValidationError

from src.api.error import ClientError, ServerError
from src.api.utils.session_cookie import (
    SESSION_COOKIE_NAME,
    clear_session_cookie,
    set_session_cookie,
)
from src.app.services.password_hasher import Argon2PasswordHasher
from src.app.services.session_tokens import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin_sessions import (
    AdminContext,
    ClientContext,
    IntrospectionResponse,
    IntrospectSessionUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from src.depends import (
    get_password_hasher,
    get_session_token_service,
    get_unit_of_work,
    require_admin_session,
)
from src.domain.entities import ErrorKind
from src.libs.result import Error

router = APIRouter(prefix="/admin", tags=["Admin"])

MISSING_CREDENTIALS = Error(ErrorKind.bad_request.value, "Missing username or password")


class LoginRequest(BaseModel):
    """
    Admin login HTTP payload

    Every field is optional at the schema level so that an incomplete body
    produces the same 400 as a missing one.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    label: Optional[str] = None


class OkResponse(BaseModel):
    ok: bool = True


def _client_context(request: Request) -> ClientContext:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
    else:
        client_ip = request.client.host if request.client else None
    return ClientContext(
        client_ip=client_ip or None,
        user_agent=request.headers.get("user-agent"),
    )


async def _parse_login_request(request: Request) -> LoginRequest:
    raw_body = await request.body()
    try:
        payload = LoginRequest.model_validate_json(raw_body) if raw_body else None
    except ValidationError:
        payload = None
    if payload is None or not payload.username or not payload.password:
        raise ClientError(MISSING_CREDENTIALS, status_code=status.HTTP_400_BAD_REQUEST)
    return payload


@router.post("/login", status_code=status.HTTP_200_OK, response_model=OkResponse)
async def login(
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: SessionTokenService = Depends(get_session_token_service),
    password_hasher: Argon2PasswordHasher = Depends(get_password_hasher),
):
    """
    Admin Login

    Verifies username and password and opens a new session. The raw token is
    returned only as the admin_session cookie.

    Raises:
        - 400 Bad Request: Missing or unparseable body, empty username or password
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    payload = await _parse_login_request(request)

    use_case = LoginUseCase(uow, token_service, password_hasher)
    result = await use_case.execute(
        payload.username,
        payload.password,
        label=payload.label,
        client=_client_context(request),
    )

    if result.is_err():
        error = result.error
        if error.kind == ErrorKind.unauthorized.value:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    set_session_cookie(response, result.value.session_token)
    return OkResponse()


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=OkResponse)
async def logout(
    response: Response,
    admin_session: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
    admin: AdminContext = Depends(require_admin_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: SessionTokenService = Depends(get_session_token_service),
):
    """
    Admin Logout

    Revokes the session behind the cookie and clears the cookie. A second
    logout with the same cookie fails the session gate with 401.
    """
    use_case = LogoutUseCase(uow, token_service)
    result = await use_case.execute(admin_session)

    if result.is_err():
        raise ServerError(result.error)

    clear_session_cookie(response)
    return OkResponse()


@router.get("/me", status_code=status.HTTP_200_OK, response_model=IntrospectionResponse)
async def me(
    admin_session: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: SessionTokenService = Depends(get_session_token_service),
):
    """Whether the admin_session cookie belongs to an active session. Never fails."""
    result = await IntrospectSessionUseCase(uow, token_service).execute(admin_session)
    return result.value
