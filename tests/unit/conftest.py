import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import Argon2PasswordHasher
from src.app.services.session_tokens import SessionTokenService


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_username = AsyncMock()
    uow.accounts.get_active_by_username = AsyncMock()
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_active_by_token_hash = AsyncMock()
    uow.sessions.get_by_account_id = AsyncMock(return_value=[])
    uow.sessions.revoke_by_token_hash = AsyncMock(return_value=True)
    uow.sessions.touch = AsyncMock(return_value=True)

    uow.pages = MagicMock()
    uow.pages.list_all = AsyncMock(return_value=[])
    uow.pages.get_by_key = AsyncMock()

    uow.entities = MagicMock()
    uow.entities.get = AsyncMock()
    uow.entities.list_by_list_name = AsyncMock(return_value=[])
    uow.entities.find_by_country = AsyncMock(return_value=[])
    uow.entities.find_by_city = AsyncMock(return_value=[])
    uow.entities.create = AsyncMock(side_effect=lambda entity: entity)
    uow.entities.update = AsyncMock(side_effect=lambda entity: entity)
    return uow


@pytest.fixture
def token_service():
    return SessionTokenService("unit-test-pepper")


@pytest.fixture
def fast_hasher():
    """Argon2id with the cheapest parameters the library accepts"""
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def session_toucher():
    toucher = MagicMock()
    toucher.dispatch = MagicMock()
    toucher.drain = AsyncMock()
    return toucher
