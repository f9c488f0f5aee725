from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.entity_repository import IEntityRepository
from src.app.repositories.errors import DuplicateKeyError
from src.domain.entities import Entity


class EntityRepository(IEntityRepository):
    """Entity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _sorted(self, *criteria):
        return select(Entity).where(*criteria).order_by(Entity.name, Entity.key)

    async def get(self, list_name: str, key: str) -> Optional[Entity]:
        stmt = select(Entity).where(Entity.list_name == list_name, Entity.key == key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_list_name(self, list_name: str) -> List[Entity]:
        result = await self.session.exec(self._sorted(Entity.list_name == list_name))
        return list(result.all())

    async def find_by_country(self, code: str) -> List[Entity]:
        """
        Match on the country column, or membership in the countries array.

        JSON array membership has no portable SQL form, so rows carrying any
        countries array are narrowed in Python; the SQL ordering is kept.
        """
        stmt = self._sorted(
            or_(Entity.country == code, Entity.countries.is_not(None))
        )
        result = await self.session.exec(stmt)
        return [
            entity
            for entity in result.all()
            if entity.country == code or code in (entity.countries or [])
        ]

    async def find_by_city(self, city: str) -> List[Entity]:
        result = await self.session.exec(self._sorted(Entity.city == city))
        return list(result.all())

    async def create(self, entity: Entity) -> Entity:
        """Insert; the (list, key) unique constraint rejects duplicates"""
        self.session.add(entity)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateKeyError("entities", ("list", "key")) from exc
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: Entity) -> Entity:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity
