from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get account by username, disabled or not"""
        pass

    @abstractmethod
    async def get_active_by_username(self, username: str) -> Optional[Account]:
        """Get account by username only if it is not disabled"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account. Raises DuplicateKeyError on username clash."""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
