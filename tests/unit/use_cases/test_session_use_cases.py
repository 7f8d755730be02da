from unittest.mock import MagicMock

import pytest

from src.app.use_cases.sessions import (
    AccountSessionUseCase,
    CompareSessionsUseCase,
    CustomSessionUseCase,
)
from src.domain.entities import SessionScope

DEFAULTS = {"system-config": {"theme": "dark", "language": "zh-CN"}}


@pytest.mark.asyncio
async def test_custom_session_seeds_defaults_on_first_read(mock_uow):
    mock_uow.sessions.get_attributes.return_value = {}

    result = await CustomSessionUseCase(mock_uow, DEFAULTS).get("system-config")

    assert result.is_ok()
    assert result.value.data == {"theme": "dark", "language": "zh-CN"}
    assert result.value.session_type == "Custom-Session"
    assert mock_uow.sessions.upsert_attribute.call_count == 2
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_custom_session_existing_data_not_reseeded(mock_uow):
    mock_uow.sessions.get_attributes.return_value = {"theme": "light"}

    result = await CustomSessionUseCase(mock_uow, DEFAULTS).get("system-config")

    assert result.value.data == {"theme": "light"}
    mock_uow.sessions.upsert_attribute.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_custom_session_without_defaults_is_empty(mock_uow):
    result = await CustomSessionUseCase(mock_uow, DEFAULTS).get("unknown")

    assert result.value.data == {}
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_custom_session_set(mock_uow):
    mock_uow.sessions.get_attributes.return_value = {"theme": "light"}

    result = await CustomSessionUseCase(mock_uow).set("system-config", "theme", "light")

    assert result.is_ok()
    mock_uow.sessions.upsert_attribute.assert_called_once_with(
        SessionScope.custom, "system-config", "theme", "light"
    )
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_custom_session_remove_missing_attribute(mock_uow):
    mock_uow.sessions.delete_attribute.return_value = False

    result = await CustomSessionUseCase(mock_uow).remove("system-config", "missing")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_nickname_keeps_rest_of_profile(mock_uow):
    mock_uow.sessions.get_attribute.return_value = MagicMock(
        attr_value={"username": "admin", "nickname": "admin", "email": "admin@example.com"}
    )

    result = await AccountSessionUseCase(mock_uow).update_nickname("admin", "boss")

    assert result.value.data == {
        "username": "admin",
        "nickname": "boss",
        "email": "admin@example.com",
    }
    mock_uow.sessions.upsert_attribute.assert_called_once_with(
        SessionScope.account, "admin", "profile", result.value.data
    )


@pytest.mark.asyncio
async def test_compare_for_anonymous_shows_custom_only(mock_uow):
    mock_uow.sessions.get_attributes.return_value = {"theme": "dark"}

    result = await CompareSessionsUseCase(mock_uow).execute()

    assert result.value.account_session is None
    assert result.value.token_session is None
    assert result.value.custom_session == {"theme": "dark"}
    assert result.value.custom_session_id == "custom:system-config"
