import pytest

from src.app.use_cases.admin_sessions import LogoutUseCase


@pytest.mark.asyncio
async def test_logout_revokes_by_fresh_digest(mock_uow, token_service):
    raw_token = token_service.generate()
    use_case = LogoutUseCase(mock_uow, token_service)

    result = await use_case.execute(raw_token)

    assert result.is_ok()
    assert result.value.revoked is True
    mock_uow.sessions.revoke_by_token_hash.assert_awaited_once()
    token_hash, revoked_at = mock_uow.sessions.revoke_by_token_hash.await_args.args
    assert token_hash == token_service.digest(raw_token)
    assert revoked_at is not None
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_logout_of_already_revoked_session(mock_uow, token_service):
    mock_uow.sessions.revoke_by_token_hash.return_value = False

    result = await LogoutUseCase(mock_uow, token_service).execute("stale")

    assert result.is_ok()
    assert result.value.revoked is False
