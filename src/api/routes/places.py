from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import GetCityUseCase, GetCountryUseCase
from src.depends import get_unit_of_work
from src.domain.entities import ErrorKind

router = APIRouter(tags=["Places"])


@router.get("/countries/{code}", status_code=status.HTTP_200_OK)
async def get_country(code: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Entities located in a country (by country field or countries array).

    The entity from the "countries" list is returned as "country".
    """
    result = await GetCountryUseCase(uow).execute(code)
    if result.is_err():
        error = result.error
        if error.kind == ErrorKind.bad_request.value:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)
    return result.value


@router.get("/cities/{city_key}", status_code=status.HTTP_200_OK)
async def get_city(city_key: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Entities located in a city. The dashed key is turned into the stored
    display name first: "portland-or" -> "Portland, OR".

    Raises:
        - 400 Bad Request: Key has no usable name
    """
    result = await GetCityUseCase(uow).execute(city_key)
    if result.is_err():
        error = result.error
        if error.kind == ErrorKind.bad_request.value:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)
    return result.value
