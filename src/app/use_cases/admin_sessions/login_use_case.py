"""
Admin Login Use Case

Verifies credentials and opens a new server-side session.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.password_hasher import Argon2PasswordHasher, default_password_hasher
from src.app.services.session_tokens import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ErrorKind, Session
from src.libs.result import Error, Result, Return
from .dtos import INVALID_CREDENTIALS, ClientContext, LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for admin login and session issuance.

    Business Rules:
    - Only accounts with disabled=False can log in
    - Unknown username, disabled account and wrong password return the same
      error, and all three pay for one Argon2 verification
    - Each login creates a new session; existing sessions stay valid
    - Only the HMAC digest of the token is stored
    - A digest collision on insert is a randomness failure, not a retry case
    - A hash made with weaker Argon2 parameters is re-hashed on successful login
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: SessionTokenService,
        password_hasher: Argon2PasswordHasher = default_password_hasher,
    ):
        self.uow = uow
        self.token_service = token_service
        self.password_hasher = password_hasher

    async def execute(
        self,
        username: str,
        password: str,
        label: Optional[str] = None,
        client: Optional[ClientContext] = None,
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Account username
            password: Plain text password
            label: Optional human label for the session (e.g. "laptop")
            client: IP and user agent of the caller

        Returns:
            Result with LoginResponse carrying the raw session token, or Error
        """
        client = client or ClientContext()

        async with self.uow:
            account = await self.uow.accounts.get_active_by_username(username)

            if account is None:
                await run_in_threadpool(self.password_hasher.verify_dummy, password)
                logger.info(f"Admin login rejected for username={username!r}")
                return Return.err(INVALID_CREDENTIALS)

            password_valid = await run_in_threadpool(
                self.password_hasher.verify, account.password_hash, password
            )
            if not password_valid:
                logger.info(f"Admin login rejected for username={username!r}")
                return Return.err(INVALID_CREDENTIALS)

            if self.password_hasher.needs_rehash(account.password_hash):
                account.password_hash = await run_in_threadpool(
                    self.password_hasher.hash, password
                )
                account.updated_at = utcnow()
                account = await self.uow.accounts.update(account)
                logger.info(f"Upgraded password hash parameters for account {account.id}")

            session_token = self.token_service.generate()
            now = utcnow()
            session = Session(
                account_id=account.id,
                session_token_hash=self.token_service.digest(session_token),
                created_at=now,
                last_seen_at=now,
                revoked_at=None,
                label=label or None,
                client_ip=client.client_ip,
                user_agent=client.user_agent[:512] if client.user_agent else None,
            )

            try:
                session = await self.uow.sessions.create(session)
            except DuplicateKeyError:
                logger.critical(
                    f"Session token digest collision for account {account.id}; "
                    "the random source is not trustworthy"
                )
                return Return.err(
                    Error(ErrorKind.internal_error.value, "Could not create session")
                )

            response = LoginResponse(
                session_token=session_token,
                session_id=session.id,
                account_id=account.id,
            )
            await self.uow.commit()

        logger.info(f"Admin session {response.session_id} opened for account {response.account_id}")

        return Return.ok(response)
