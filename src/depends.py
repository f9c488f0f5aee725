from typing import Optional

from fastapi import Cookie, Depends, Request, status

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.app.services.password_hasher import Argon2PasswordHasher, default_password_hasher
from src.app.services.session_toucher import ISessionToucher
from src.app.services.session_tokens import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin_sessions import AdminContext, AuthenticateSessionUseCase
from src.api.utils.session_cookie import SESSION_COOKIE_NAME


async def get_unit_of_work(request: Request):
    async with request.app.state.database.session() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_token_service() -> SessionTokenService:
    return SessionTokenService(ApplicationConfig.SESSION_PEPPER)


def get_password_hasher() -> Argon2PasswordHasher:
    return default_password_hasher


def get_session_toucher(request: Request) -> ISessionToucher:
    return request.app.state.session_toucher


async def require_admin_session(
    request: Request,
    admin_session: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: SessionTokenService = Depends(get_session_token_service),
    session_toucher: ISessionToucher = Depends(get_session_toucher),
) -> AdminContext:
    """
    Gate for every state-mutating admin endpoint.

    Resolves the admin_session cookie to an active session and attaches
    {account_id, session_id} to request.state.admin.

    Raises:
        ClientError: 401 when the cookie is missing, unknown or revoked
    """
    use_case = AuthenticateSessionUseCase(uow, token_service, session_toucher)
    result = await use_case.execute(admin_session)

    if result.is_err():
        error = result.error
        if error.kind == "unauthorized":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    request.state.admin = result.value
    return result.value
