"""
Authenticate Session Use Case

Resolves a raw session token from the cookie to an active session.
"""

from typing import Optional

from src.app.services.session_tokens import SessionTokenService
from src.app.services.session_toucher import ISessionToucher
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import INVALID_SESSION, MISSING_SESSION, AdminContext


class AuthenticateSessionUseCase:
    """
    Use case behind the admin session gate.

    Business Rules:
    - Missing token -> unauthorized
    - Token is re-digested and looked up among non-revoked sessions only
    - last_seen_at is updated best-effort through the toucher; the request
      neither waits for nor fails because of that update
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: SessionTokenService,
        session_toucher: ISessionToucher,
    ):
        self.uow = uow
        self.token_service = token_service
        self.session_toucher = session_toucher

    async def execute(self, raw_token: Optional[str]) -> Result[AdminContext]:
        if not raw_token:
            return Return.err(MISSING_SESSION)

        token_hash = self.token_service.digest(raw_token)

        async with self.uow:
            session = await self.uow.sessions.get_active_by_token_hash(token_hash)
            if session is None:
                return Return.err(INVALID_SESSION)
            context = AdminContext(account_id=session.account_id, session_id=session.id)

        self.session_toucher.dispatch(context.session_id)

        return Return.ok(context)
