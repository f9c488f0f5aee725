"""
Session Entity

Server-side record of an issued admin session cookie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - one row per successful login.

    Business Rules:
    - Only the HMAC digest of the raw token is stored, never the token
    - session_token_hash is unique across all sessions, revoked ones included
    - Active iff revoked_at is null; revocation is one-way
    - Rows are never deleted (audit trail)
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)
    session_token_hash: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_seen_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Client context captured at login
    label: Optional[str] = Field(default=None, max_length=255)
    client_ip: Optional[str] = Field(default=None, max_length=255)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    __table_args__ = (Index("idx_session_revoked_at", "revoked_at"),)

    @property
    def is_active(self) -> bool:
        return self.revoked_at is None
