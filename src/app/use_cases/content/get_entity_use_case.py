from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return

ENTITY_NOT_FOUND = Error(ErrorKind.not_found.value, "Entity not found")
MISSING_IDENTIFIERS = Error(ErrorKind.bad_request.value, "Missing list or key")


class GetEntityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, list_name: str, key: str) -> Result[dict]:
        if not list_name or not key:
            return Return.err(MISSING_IDENTIFIERS)

        async with self.uow:
            entity = await self.uow.entities.get(list_name, key)
            if entity is None:
                return Return.err(ENTITY_NOT_FOUND)
            return Return.ok(entity.to_document())
