from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return


class ListPagesUseCase:
    """All pages, sorted by name then key"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[dict]:
        async with self.uow:
            pages = await self.uow.pages.list_all()
            documents = [page.to_document() for page in pages]

        return Return.ok({"pages": documents})
