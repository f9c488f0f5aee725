"""
Introspect Session Use Case

Answers "is this cookie a live admin session?" without ever failing.
"""

import logging
from typing import Optional

from src.app.services.session_tokens import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import IntrospectionResponse

logger = logging.getLogger(__name__)


class IntrospectSessionUseCase:
    """
    Use case for session introspection.

    Business Rules:
    - Always succeeds; every failure collapses to authenticated=False
    - Store errors are logged here and never reach the caller
    - Does not touch last_seen_at
    """

    def __init__(self, uow: UnitOfWork, token_service: SessionTokenService):
        self.uow = uow
        self.token_service = token_service

    async def execute(self, raw_token: Optional[str]) -> Result[IntrospectionResponse]:
        if not raw_token:
            return Return.ok(IntrospectionResponse(authenticated=False))

        try:
            token_hash = self.token_service.digest(raw_token)
            async with self.uow:
                session = await self.uow.sessions.get_active_by_token_hash(token_hash)
        except Exception as exc:
            logger.warning(f"Session introspection failed closed: {exc!r}")
            return Return.ok(IntrospectionResponse(authenticated=False))

        return Return.ok(IntrospectionResponse(authenticated=session is not None))
