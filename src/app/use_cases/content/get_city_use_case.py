from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return
from .hoisting import hoist_canonical

CITIES_LIST = "cities"


def _title_case_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def city_key_to_display_name(key: str) -> str:
    """
    Turn a dashed city key into the display name entities are stored under.

    ``den-haag`` -> ``Den Haag``. A trailing two-letter token is read as a
    state or province code: ``portland-or`` -> ``Portland, OR``.
    """
    parts = [part for part in str(key or "").split("-") if part]
    if not parts:
        return ""

    *rest, last = parts
    if len(last) == 2 and rest:
        return f"{' '.join(_title_case_word(p) for p in rest)}, {last.upper()}"

    return " ".join(_title_case_word(p) for p in parts)


class GetCityUseCase:
    """Entities located in a city, with the "cities" entity hoisted out"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, key: str) -> Result[dict]:
        city_name = city_key_to_display_name(key)
        if not city_name:
            return Return.err(Error(ErrorKind.bad_request.value, "Missing city key"))

        async with self.uow:
            entities = await self.uow.entities.find_by_city(city_name)
            city, rest = hoist_canonical(entities, CITIES_LIST)

        return Return.ok({"city": city, "entities": rest})
