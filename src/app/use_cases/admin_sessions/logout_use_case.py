"""
Admin Logout Use Case

Revokes the session behind a raw token.
"""

import logging

from src.app.services.session_tokens import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for admin logout.

    Business Rules:
    - Caller must already have passed the admin session gate
    - The session is matched by a freshly computed digest of the token,
      never by an id carried over from the gate
    - Revocation is one-way; revoking an already revoked session changes nothing
    """

    def __init__(self, uow: UnitOfWork, token_service: SessionTokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, raw_token: str) -> Result[LogoutResponse]:
        token_hash = self.token_service.digest(raw_token)

        async with self.uow:
            revoked = await self.uow.sessions.revoke_by_token_hash(token_hash, utcnow())
            await self.uow.commit()

        if not revoked:
            logger.info("Logout matched no active session (already revoked)")

        return Return.ok(LogoutResponse(revoked=revoked))
