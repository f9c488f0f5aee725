from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.errors import DuplicateKeyError
from src.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username"""
        stmt = select(Account).where(Account.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_username(self, username: str) -> Optional[Account]:
        """Get account by username, skipping disabled accounts"""
        stmt = select(Account).where(
            Account.username == username, Account.disabled == False  # noqa: E712
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateKeyError("accounts", ("username",)) from exc
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
