from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.entity_repository import IEntityRepository
from src.app.repositories.page_repository import IPageRepository
from src.app.repositories.session_repository import ISessionRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    sessions: ISessionRepository
    pages: IPageRepository
    entities: IEntityRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
