"""
List Account Sessions Use Case
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorKind
from src.libs.result import Error, Result, Return
from .dtos import AccountSessionsResponse, SessionSummary


class ListAccountSessionsUseCase:
    """Session history for one account, revoked sessions included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> Result[AccountSessionsResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_username(username)
            if account is None:
                return Return.err(Error(ErrorKind.not_found.value, "Account not found"))

            sessions = await self.uow.sessions.get_by_account_id(account.id)

            return Return.ok(
                AccountSessionsResponse(
                    username=username,
                    sessions=[
                        SessionSummary(
                            session_id=s.id,
                            active=s.is_active,
                            label=s.label,
                            client_ip=s.client_ip,
                            user_agent=s.user_agent,
                            created_at=s.created_at,
                            last_seen_at=s.last_seen_at,
                            revoked_at=s.revoked_at,
                        )
                        for s in sessions
                    ],
                )
            )
