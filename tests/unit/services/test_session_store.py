from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.session_store import (
    AccountKey,
    CustomKey,
    SessionStore,
    TokenKey,
    hash_token,
)
from src.domain.entities import SessionAttribute, SessionScope


@pytest.fixture
def repository():
    repository = MagicMock()
    repository.get_attribute = AsyncMock(return_value=None)
    repository.upsert_attribute = AsyncMock()
    repository.delete_attribute = AsyncMock(return_value=True)
    repository.get_attributes = AsyncMock(return_value={})
    repository.delete_session = AsyncMock(return_value=0)
    return repository


def test_token_key_stores_hash_not_token():
    key = TokenKey.from_token("secret-token")

    assert key.storage_key == hash_token("secret-token")
    assert "secret-token" not in key.storage_key


def test_keys_of_different_scopes_do_not_collide():
    account = AccountKey(login_id="admin")
    custom = CustomKey(name="admin")

    assert account.storage_key == custom.storage_key
    assert account.scope != custom.scope


def test_session_ids_carry_scope(repository):
    store = SessionStore(repository)

    assert store.for_account("admin").session_id == "account:admin"
    assert store.for_custom_key("system-config").session_id == "custom:system-config"
    assert store.for_token("t").session_id == f"token:{hash_token('t')}"


@pytest.mark.asyncio
async def test_get_returns_default_for_absent_attribute(repository):
    session = SessionStore(repository).for_account("admin")

    assert await session.get("nickname", "n/a") == "n/a"
    repository.get_attribute.assert_called_once_with(SessionScope.account, "admin", "nickname")


@pytest.mark.asyncio
async def test_get_returns_stored_value(repository):
    repository.get_attribute.return_value = SessionAttribute(
        scope=SessionScope.custom,
        session_key="system-config",
        attr_name="theme",
        attr_value="dark",
    )

    session = SessionStore(repository).for_custom_key("system-config")

    assert await session.get("theme") == "dark"


@pytest.mark.asyncio
async def test_set_upserts_single_attribute(repository):
    session = SessionStore(repository).for_token("token-value")

    await session.set("device", {"deviceType": "PC"})

    repository.upsert_attribute.assert_called_once_with(
        SessionScope.token, hash_token("token-value"), "device", {"deviceType": "PC"}
    )


@pytest.mark.asyncio
async def test_keys_are_sorted(repository):
    repository.get_attributes.return_value = {"role": "admin", "permissions": [], "profile": {}}

    keys = await SessionStore(repository).for_account("admin").keys()

    assert keys == ["permissions", "profile", "role"]


@pytest.mark.asyncio
async def test_destroy_deletes_whole_session(repository):
    repository.delete_session.return_value = 3

    removed = await SessionStore(repository).for_account("admin").destroy()

    assert removed == 3
    repository.delete_session.assert_called_once_with(SessionScope.account, "admin")
