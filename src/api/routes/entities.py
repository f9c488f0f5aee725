from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin_sessions import AdminContext
from src.app.use_cases.content import (
    CreateEntityUseCase,
    GetEntityUseCase,
    UpdateEntityUseCase,
)
from src.depends import get_unit_of_work, require_admin_session
from src.domain.entities import ErrorKind
from src.libs.result import Error

router = APIRouter(prefix="/entities", tags=["Entities"])

_STATUS_BY_KIND = {
    ErrorKind.bad_request.value: status.HTTP_400_BAD_REQUEST,
    ErrorKind.not_found.value: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict.value: status.HTTP_409_CONFLICT,
}


def _raise_for(error: Error):
    status_code = _STATUS_BY_KIND.get(error.kind)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


@router.get("/{list_name}/{key}", status_code=status.HTTP_200_OK)
async def get_entity(
    list_name: str, key: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Single entity by list and key.

    Raises:
        - 404 Not Found: Entity not found
    """
    result = await GetEntityUseCase(uow).execute(list_name, key)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/{list_name}/{key}", status_code=status.HTTP_201_CREATED)
async def create_entity(
    list_name: str,
    key: str,
    document: Dict[str, Any] = Body(...),
    admin: AdminContext = Depends(require_admin_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Entity (admin session required)

    The path list and key override any in the body.

    Raises:
        - 400 Bad Request: Body is not a JSON object, or has invalid fields
        - 401 Unauthorized: No active admin session
        - 409 Conflict: Entity already exists
    """
    result = await CreateEntityUseCase(uow).execute(list_name, key, document)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put("/{list_name}/{key}", status_code=status.HTTP_200_OK)
async def update_entity(
    list_name: str,
    key: str,
    patch: Dict[str, Any] = Body(...),
    admin: AdminContext = Depends(require_admin_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Entity (admin session required)

    Fields in the body are merged over the stored document.

    Raises:
        - 401 Unauthorized: No active admin session
        - 404 Not Found: Entity not found
    """
    result = await UpdateEntityUseCase(uow).execute(list_name, key, patch)
    if result.is_err():
        _raise_for(result.error)
    return result.value
