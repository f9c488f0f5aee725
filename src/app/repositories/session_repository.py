from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session. Raises DuplicateKeyError on token digest clash."""
        pass

    @abstractmethod
    async def get_active_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get the non-revoked session stored under this token digest"""
        pass

    @abstractmethod
    async def get_by_account_id(self, account_id: UUID) -> List[Session]:
        """Get all sessions (active and revoked) for an account"""
        pass

    @abstractmethod
    async def revoke_by_token_hash(self, token_hash: str, revoked_at: datetime) -> bool:
        """Revoke the active session under this digest. Returns True if one was revoked."""
        pass

    @abstractmethod
    async def touch(self, session_id: UUID, seen_at: datetime) -> bool:
        """Record activity on a session. Returns True if the session exists."""
        pass
