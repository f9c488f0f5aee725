"""
Provision Admin Use Case

Creates the admin account, or rotates its password if it already exists.
"""

import logging

from starlette.concurrency import run_in_threadpool

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.password_hasher import Argon2PasswordHasher, default_password_hasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Account, AccountRole, ErrorKind
from src.libs.result import Error, Result, Return
from .dtos import ProvisionAdminResponse

logger = logging.getLogger(__name__)


class ProvisionAdminUseCase:
    """
    Use case for out-of-band admin provisioning.

    Business Rules:
    - New account: roles=["admin"], disabled=False
    - Existing account: password hash rotated, re-enabled, roles reset to ["admin"]
    - Existing sessions are left alone
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: Argon2PasswordHasher = default_password_hasher,
    ):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, username: str, password: str) -> Result[ProvisionAdminResponse]:
        username = (username or "").strip()
        if not username or not password:
            return Return.err(
                Error(ErrorKind.bad_request.value, "Missing username or password")
            )

        password_hash = await run_in_threadpool(self.password_hasher.hash, password)
        now = utcnow()

        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)
            created = account is None

            if created:
                account = Account(
                    username=username,
                    password_hash=password_hash,
                    roles=[AccountRole.admin.value],
                    disabled=False,
                    created_at=now,
                    updated_at=now,
                )
                try:
                    account = await self.uow.accounts.create(account)
                except DuplicateKeyError:
                    return Return.err(
                        Error(ErrorKind.conflict.value, "Account was created concurrently")
                    )
            else:
                account.password_hash = password_hash
                account.roles = [AccountRole.admin.value]
                account.disabled = False
                account.updated_at = now
                account = await self.uow.accounts.update(account)

            response = ProvisionAdminResponse(
                account_id=account.id, username=username, created=created
            )
            await self.uow.commit()

        if created:
            logger.info(f"Created admin account '{username}'")
        else:
            logger.info(f"Admin account '{username}' already exists; password hash updated")

        return Return.ok(response)
