"""
Account Entity

An administrator who can open sessions against the write API.
"""

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import AccountRole


class Account(SQLModel, table=True):
    """
    Account entity - credentials for the administrative write path.

    Business Rules:
    - Username must be unique across all accounts
    - Password stored as an Argon2id hash (m=64 MiB, t=2, p=1)
    - Disabled accounts cannot log in
    - Provisioned out-of-band; never created or deleted through the API
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=255)

    roles: List[str] = Field(
        default_factory=lambda: [AccountRole.admin.value], sa_column=Column(JSON)
    )
    disabled: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_disabled", "disabled"),)
