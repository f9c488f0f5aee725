import asyncio
import logging
from typing import Callable, Set
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.session_repository import SessionRepository
from src.app.services.session_toucher import ISessionToucher
from src.domain.base import utcnow

logger = logging.getLogger(__name__)


class BackgroundSessionToucher(ISessionToucher):
    """
    Fire-and-forget ``last_seen_at`` updates on the running event loop.

    Each update opens its own AsyncSession from ``session_factory`` so it never
    shares a transaction with the request that dispatched it.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, session_id: UUID) -> None:
        task = asyncio.get_running_loop().create_task(self._touch(session_id))
        # The loop only keeps weak references to tasks
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _touch(self, session_id: UUID) -> None:
        try:
            async with self.session_factory() as session:
                await SessionRepository(session).touch(session_id, utcnow())
                await session.commit()
        except Exception as exc:
            logger.debug(f"last_seen_at update failed for session {session_id}: {exc}")

    async def drain(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
