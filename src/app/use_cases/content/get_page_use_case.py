from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return


class GetPageUseCase:
    """
    A page's metadata together with its entities.

    Response shape: {"--info--": page, "entities": [...]}, entities sorted by
    name then key.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, key: str) -> Result[dict]:
        async with self.uow:
            page = await self.uow.pages.get_by_key(key)
            if page is None:
                return Return.err(
                    Error(ErrorKind.page_not_found.value, f"No page found for key='{key}'")
                )
            entities = await self.uow.entities.list_by_list_name(key)

            return Return.ok(
                {
                    "--info--": page.to_document(),
                    "entities": [entity.to_document() for entity in entities],
                }
            )
