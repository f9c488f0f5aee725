from uuid import uuid4

import pytest

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.password_hasher import Argon2PasswordHasher
from src.app.use_cases.admin_sessions import (
    INVALID_CREDENTIALS,
    ClientContext,
    LoginUseCase,
)
from src.domain.entities import Account, Session


@pytest.fixture
def admin_account(fast_hasher):
    return Account(
        id=uuid4(),
        username="admin",
        password_hash=fast_hasher.hash("correct horse"),
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, token_service, fast_hasher, admin_account):
    """Valid credentials open a new active session keyed by the token digest"""
    # Arrange
    mock_uow.accounts.get_active_by_username.return_value = admin_account
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    # Act
    result = await use_case.execute(
        "admin",
        "correct horse",
        label="laptop",
        client=ClientContext(client_ip="203.0.113.7", user_agent="pytest"),
    )

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.account_id == admin_account.id
    assert len(data.session_token) == 43

    mock_uow.sessions.create.assert_awaited_once()
    stored: Session = mock_uow.sessions.create.await_args.args[0]
    assert stored.session_token_hash == token_service.digest(data.session_token)
    assert stored.session_token_hash != data.session_token
    assert stored.account_id == admin_account.id
    assert stored.revoked_at is None
    assert stored.created_at == stored.last_seen_at
    assert stored.label == "laptop"
    assert stored.client_ip == "203.0.113.7"
    assert stored.user_agent == "pytest"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_wrong_password(mock_uow, token_service, fast_hasher, admin_account):
    mock_uow.accounts.get_active_by_username.return_value = admin_account
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    result = await use_case.execute("admin", "wrong")

    assert result.is_err()
    assert result.error == INVALID_CREDENTIALS
    mock_uow.sessions.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_or_disabled_account_gives_same_error(mock_uow, token_service, fast_hasher):
    """Unknown and disabled accounts both miss the active-account lookup"""
    mock_uow.accounts.get_active_by_username.return_value = None
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    result = await use_case.execute("nobody", "correct horse")

    assert result.is_err()
    assert result.error == INVALID_CREDENTIALS
    mock_uow.sessions.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_account_still_runs_a_verification(mock_uow, token_service, fast_hasher, monkeypatch):
    calls = []
    original = fast_hasher.verify_dummy
    monkeypatch.setattr(
        fast_hasher, "verify_dummy", lambda candidate: calls.append(candidate) or original(candidate)
    )
    mock_uow.accounts.get_active_by_username.return_value = None

    await LoginUseCase(mock_uow, token_service, fast_hasher).execute("nobody", "pw")

    assert calls == ["pw"]


@pytest.mark.asyncio
async def test_two_logins_issue_distinct_tokens(mock_uow, token_service, fast_hasher, admin_account):
    mock_uow.accounts.get_active_by_username.return_value = admin_account
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    first = await use_case.execute("admin", "correct horse")
    second = await use_case.execute("admin", "correct horse")

    assert first.value.session_token != second.value.session_token
    assert first.value.session_id != second.value.session_id


@pytest.mark.asyncio
async def test_digest_collision_is_internal_error(mock_uow, token_service, fast_hasher, admin_account):
    mock_uow.accounts.get_active_by_username.return_value = admin_account
    mock_uow.sessions.create.side_effect = DuplicateKeyError("sessions", ("session_token_hash",))
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    result = await use_case.execute("admin", "correct horse")

    assert result.is_err()
    assert result.error.kind == "internal_error"
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_long_user_agent_is_truncated(mock_uow, token_service, fast_hasher, admin_account):
    mock_uow.accounts.get_active_by_username.return_value = admin_account
    use_case = LoginUseCase(mock_uow, token_service, fast_hasher)

    await use_case.execute(
        "admin", "correct horse", client=ClientContext(user_agent="x" * 2000)
    )

    stored = mock_uow.sessions.create.await_args.args[0]
    assert len(stored.user_agent) == 512


@pytest.mark.asyncio
async def test_weaker_hash_is_upgraded_on_login(mock_uow, token_service, fast_hasher, admin_account):
    """A hash made with cheaper parameters is replaced after a successful login"""
    # Arrange
    stronger = Argon2PasswordHasher(time_cost=2, memory_cost=16, parallelism=1)
    old_hash = admin_account.password_hash
    mock_uow.accounts.get_active_by_username.return_value = admin_account

    # Act
    result = await LoginUseCase(mock_uow, token_service, stronger).execute("admin", "correct horse")

    # Assert
    assert result.is_ok()
    mock_uow.accounts.update.assert_awaited_once_with(admin_account)
    assert admin_account.password_hash != old_hash
    assert stronger.needs_rehash(admin_account.password_hash) is False
    assert stronger.verify(admin_account.password_hash, "correct horse")


@pytest.mark.asyncio
async def test_current_hash_is_left_alone(mock_uow, token_service, fast_hasher, admin_account):
    mock_uow.accounts.get_active_by_username.return_value = admin_account

    await LoginUseCase(mock_uow, token_service, fast_hasher).execute("admin", "correct horse")

    mock_uow.accounts.update.assert_not_awaited()
