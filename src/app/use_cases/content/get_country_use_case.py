from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return
from .hoisting import hoist_canonical

COUNTRIES_LIST = "countries"


class GetCountryUseCase:
    """
    Entities located in a country.

    The code is upper-cased. The entity from the "countries" list, if any, is
    returned separately as the country itself.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, code: str) -> Result[dict]:
        code = (code or "").upper()
        if not code:
            return Return.err(Error(ErrorKind.bad_request.value, "Missing country code"))

        async with self.uow:
            entities = await self.uow.entities.find_by_country(code)
            country, rest = hoist_canonical(entities, COUNTRIES_LIST)

        return Return.ok({"country": country, "entities": rest})
