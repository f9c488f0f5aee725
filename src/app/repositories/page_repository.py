from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Page


class IPageRepository(ABC):
    """Page repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Page]:
        """Get all pages sorted by name, then key"""
        pass

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[Page]:
        """Get page by key"""
        pass
