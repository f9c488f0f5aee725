"""
Update Entity Use Case
"""

import logging
from typing import Any, Dict

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return
from .get_entity_use_case import ENTITY_NOT_FOUND, MISSING_IDENTIFIERS

logger = logging.getLogger(__name__)


class UpdateEntityUseCase:
    """
    Merge a patch into an existing entity document.

    Business Rules:
    - _id, list and key in the patch are ignored
    - updatedAt is always set to now
    - Unknown entity -> not_found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, list_name: str, key: str, patch: Dict[str, Any]) -> Result[dict]:
        if not list_name or not key:
            return Return.err(MISSING_IDENTIFIERS)

        async with self.uow:
            entity = await self.uow.entities.get(list_name, key)
            if entity is None:
                return Return.err(ENTITY_NOT_FOUND)

            try:
                entity.apply_patch(patch or {}, utcnow())
            except ValueError as exc:
                return Return.err(Error(ErrorKind.bad_request.value, str(exc)))

            entity = await self.uow.entities.update(entity)
            document = entity.to_document()
            await self.uow.commit()

        logger.info(f"Updated entity {list_name}/{key}")
        return Return.ok(document)
