from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.page_repository import IPageRepository
from src.domain.entities import Page


class PageRepository(IPageRepository):
    """Page repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Page]:
        stmt = select(Page).order_by(Page.name, Page.key)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_key(self, key: str) -> Optional[Page]:
        stmt = select(Page).where(Page.key == key)
        result = await self.session.exec(stmt)
        return result.one_or_none()
