from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateKeyError
from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """
        Create a new session.

        The unique index on session_token_hash is the only collision check;
        there is no lookup before the insert.
        """
        self.session.add(session_obj)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateKeyError("sessions", ("session_token_hash",)) from exc
        await self.session.refresh(session_obj)
        return session_obj

    async def get_active_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get the active session for a token digest"""
        stmt = select(Session).where(
            Session.session_token_hash == token_hash,
            Session.revoked_at.is_(None),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_account_id(self, account_id: UUID) -> List[Session]:
        """Get all sessions for an account, newest first"""
        stmt = (
            select(Session)
            .where(Session.account_id == account_id)
            .order_by(Session.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def revoke_by_token_hash(self, token_hash: str, revoked_at: datetime) -> bool:
        """Revoke the active session for a token digest"""
        stmt = (
            update(Session)
            .where(
                Session.session_token_hash == token_hash,
                Session.revoked_at.is_(None),
            )
            .values(revoked_at=revoked_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def touch(self, session_id: UUID, seen_at: datetime) -> bool:
        """Set last_seen_at on a session"""
        stmt = (
            update(Session)
            .where(Session.id == session_id)
            .values(last_seen_at=seen_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
