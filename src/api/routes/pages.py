from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import GetPageUseCase, ListPagesUseCase
from src.depends import get_unit_of_work
from src.domain.entities import ErrorKind

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_pages(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All pages, sorted by name then key"""
    result = await ListPagesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{page_id}", status_code=status.HTTP_200_OK)
async def get_page(page_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Page metadata under "--info--" plus every entity whose list is the page key.

    Raises:
        - 404 Not Found: No page with this key
    """
    result = await GetPageUseCase(uow).execute(page_id)

    if result.is_err():
        error = result.error
        if error.kind == ErrorKind.page_not_found.value:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
