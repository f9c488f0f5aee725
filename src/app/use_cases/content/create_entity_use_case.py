"""
Create Entity Use Case
"""

import logging
from typing import Any, Dict

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Entity, ErrorKind
from src.libs.result import Error, Result, Return
from .get_entity_use_case import MISSING_IDENTIFIERS

logger = logging.getLogger(__name__)

ENTITY_EXISTS = Error(ErrorKind.conflict.value, "Entity already exists")


class CreateEntityUseCase:
    """
    Insert a new entity document.

    Business Rules:
    - list and key come from the path and override the body
    - createdAt is kept when supplied, updatedAt is always now
    - One insert, no existence check first: the (list, key) unique constraint
      decides, and its violation is reported as a conflict
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, list_name: str, key: str, document: Dict[str, Any]
    ) -> Result[dict]:
        if not list_name or not key:
            return Return.err(MISSING_IDENTIFIERS)

        try:
            entity = Entity.from_document(list_name, key, document or {}, utcnow())
        except ValueError as exc:
            return Return.err(Error(ErrorKind.bad_request.value, str(exc)))

        async with self.uow:
            try:
                entity = await self.uow.entities.create(entity)
            except DuplicateKeyError:
                return Return.err(ENTITY_EXISTS)
            document = entity.to_document()
            await self.uow.commit()

        logger.info(f"Created entity {list_name}/{key}")
        return Return.ok(document)
