from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Entity


class IEntityRepository(ABC):
    """Entity repository interface - application layer

    Every list-returning method sorts by name, then key.
    """

    @abstractmethod
    async def get(self, list_name: str, key: str) -> Optional[Entity]:
        """Get one entity by its (list, key) identity"""
        pass

    @abstractmethod
    async def list_by_list_name(self, list_name: str) -> List[Entity]:
        """Get all entities belonging to a page"""
        pass

    @abstractmethod
    async def find_by_country(self, code: str) -> List[Entity]:
        """Get entities whose country, or one of whose countries, equals code"""
        pass

    @abstractmethod
    async def find_by_city(self, city: str) -> List[Entity]:
        """Get entities located in the named city"""
        pass

    @abstractmethod
    async def create(self, entity: Entity) -> Entity:
        """Insert a new entity. Raises DuplicateKeyError if (list, key) exists."""
        pass

    @abstractmethod
    async def update(self, entity: Entity) -> Entity:
        """Update existing entity"""
        pass
