from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.use_cases.admin_sessions import IntrospectSessionUseCase
from src.domain.entities import Session


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_token", [None, ""])
async def test_missing_cookie_is_not_authenticated(mock_uow, token_service, raw_token):
    result = await IntrospectSessionUseCase(mock_uow, token_service).execute(raw_token)

    assert result.is_ok()
    assert result.value.authenticated is False


@pytest.mark.asyncio
async def test_unknown_cookie_is_not_authenticated(mock_uow, token_service):
    mock_uow.sessions.get_active_by_token_hash.return_value = None

    result = await IntrospectSessionUseCase(mock_uow, token_service).execute("%%%garbage")

    assert result.value.authenticated is False


@pytest.mark.asyncio
async def test_active_session_is_authenticated(mock_uow, token_service):
    mock_uow.sessions.get_active_by_token_hash.return_value = Session(
        id=uuid4(), account_id=uuid4(), session_token_hash="h"
    )

    result = await IntrospectSessionUseCase(mock_uow, token_service).execute("token")

    assert result.value.authenticated is True


@pytest.mark.asyncio
async def test_store_failure_fails_closed(mock_uow, token_service):
    mock_uow.sessions.get_active_by_token_hash = AsyncMock(
        side_effect=ConnectionError("store unreachable")
    )

    result = await IntrospectSessionUseCase(mock_uow, token_service).execute("token")

    assert result.is_ok()
    assert result.value.authenticated is False
