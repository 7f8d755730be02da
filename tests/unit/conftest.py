import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.credentials = MagicMock()
    uow.credentials.get_by_username = AsyncMock(return_value=None)
    uow.credentials.create = AsyncMock()
    uow.credentials.list_all = AsyncMock(return_value=[])

    uow.tokens = MagicMock()
    uow.tokens.create = AsyncMock()
    uow.tokens.get_by_hash = AsyncMock(return_value=None)
    uow.tokens.get_active_by_login_id = AsyncMock(return_value=[])
    uow.tokens.end = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.get_attribute = AsyncMock(return_value=None)
    uow.sessions.upsert_attribute = AsyncMock()
    uow.sessions.delete_attribute = AsyncMock(return_value=True)
    uow.sessions.get_attributes = AsyncMock(return_value={})
    uow.sessions.delete_session = AsyncMock(return_value=0)
    return uow
