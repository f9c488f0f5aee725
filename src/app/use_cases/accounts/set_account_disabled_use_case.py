"""
Set Account Disabled Use Case
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return
from .dtos import AccountStatusResponse


class SetAccountDisabledUseCase:
    """
    Toggle an account's disabled flag.

    Disabling blocks new logins only; sessions already issued stay valid
    until they are logged out.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, disabled: bool) -> Result[AccountStatusResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)
            if account is None:
                return Return.err(Error(ErrorKind.not_found.value, "Account not found"))

            if account.disabled != disabled:
                account.disabled = disabled
                account.updated_at = utcnow()
                await self.uow.accounts.update(account)
                await self.uow.commit()

            return Return.ok(AccountStatusResponse(username=username, disabled=disabled))
