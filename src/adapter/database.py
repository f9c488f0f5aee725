"""
Process-scoped store handle.

Lifecycle: ``connect`` (lazy, idempotent) -> ``ensure_indexes`` once before
serving -> ``session()`` per unit of work -> ``dispose`` on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[sessionmaker] = None

    def connect(self) -> AsyncEngine:
        if self.engine is None:
            self.engine = create_async_engine(self.url, echo=self.echo, future=True)
            self.session_factory = sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
            )
        return self.engine

    async def ensure_indexes(self) -> None:
        """
        Create missing tables together with their unique indexes.

        Must complete before the first request: duplicate usernames, duplicate
        token digests and duplicate (list, key) entities are only rejected by
        these constraints.
        """
        # Registers every table on SQLModel.metadata
        import src.domain.entities  # noqa: F401

        engine = self.connect()
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database schema and indexes ensured")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        self.connect()
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
