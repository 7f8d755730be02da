from datetime import datetime, timedelta

import pytest

from src.app.services.session_store import hash_token
from src.app.use_cases.users import KickoutUseCase
from src.domain.entities import Credential, LoginToken, TokenStatus


def make_record(token: str, device_type: str = "PC", status=TokenStatus.active):
    return LoginToken(
        token_hash=hash_token(token),
        login_id="user",
        device_type=device_type,
        status=status,
        expires_at=datetime.utcnow() + timedelta(hours=1),
    )


@pytest.fixture
def credential():
    return Credential(username="user", password_hash="x", role="user", permissions=["user"])


@pytest.mark.asyncio
async def test_kickout_ends_every_token(mock_uow, credential):
    tokens = [make_record("a", "PC"), make_record("b", "APP")]
    mock_uow.credentials.get_by_username.return_value = credential
    mock_uow.tokens.get_active_by_login_id.side_effect = [tokens, []]

    result = await KickoutUseCase(mock_uow).kickout("user", operator="admin")

    assert result.is_ok()
    assert result.value.revoked_count == 2
    assert result.value.login_id == "user"
    assert mock_uow.tokens.end.call_count == 2
    for record in tokens:
        mock_uow.tokens.end.assert_any_call(record, TokenStatus.kicked_out)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_kickout_filters_by_device(mock_uow, credential):
    mock_uow.credentials.get_by_username.return_value = credential
    mock_uow.tokens.get_active_by_login_id.side_effect = [[make_record("a", "PC")], []]

    result = await KickoutUseCase(mock_uow).kickout("user", operator="admin", device_type="PC")

    assert result.value.device_type == "PC"
    assert mock_uow.tokens.get_active_by_login_id.call_args_list[0].args == ("user", "PC")


@pytest.mark.asyncio
async def test_forced_logout_marks_logged_out(mock_uow, credential):
    record = make_record("a")
    mock_uow.credentials.get_by_username.return_value = credential
    mock_uow.tokens.get_active_by_login_id.side_effect = [[record], []]

    result = await KickoutUseCase(mock_uow).logout_by_login_id("user", operator="admin")

    assert result.is_ok()
    mock_uow.tokens.end.assert_called_once_with(record, TokenStatus.logged_out)


@pytest.mark.asyncio
async def test_kickout_unknown_account(mock_uow):
    mock_uow.credentials.get_by_username.return_value = None

    result = await KickoutUseCase(mock_uow).kickout("ghost", operator="admin")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_kickout_by_token(mock_uow):
    record = make_record("a")
    mock_uow.tokens.get_by_hash.return_value = record

    result = await KickoutUseCase(mock_uow).kickout_by_token("a", operator="admin")

    assert result.is_ok()
    assert result.value.revoked_count == 1
    mock_uow.tokens.end.assert_called_once_with(record, TokenStatus.kicked_out)


@pytest.mark.asyncio
async def test_kickout_by_ended_token(mock_uow):
    mock_uow.tokens.get_by_hash.return_value = make_record("a", status=TokenStatus.replaced)

    result = await KickoutUseCase(mock_uow).kickout_by_token("a", operator="admin")

    assert result.error.code == "NOT_FOUND"
    mock_uow.tokens.end.assert_not_called()


@pytest.mark.asyncio
async def test_replace_marks_replaced(mock_uow, credential):
    record = make_record("a")
    mock_uow.credentials.get_by_username.return_value = credential
    mock_uow.tokens.get_active_by_login_id.side_effect = [[record], []]

    result = await KickoutUseCase(mock_uow).replace("user", operator="admin", device_type="PC")

    assert result.is_ok()
    assert result.value.message == "Replaced"
    mock_uow.tokens.end.assert_called_once_with(record, TokenStatus.replaced)


@pytest.mark.parametrize(
    "method,status",
    [
        ("logout_by_token", TokenStatus.logged_out),
        ("kickout_by_token", TokenStatus.kicked_out),
        ("replace_by_token", TokenStatus.replaced),
    ],
)
@pytest.mark.asyncio
async def test_end_single_token_with_status(mock_uow, method, status):
    record = make_record("a")
    mock_uow.tokens.get_by_hash.return_value = record

    result = await getattr(KickoutUseCase(mock_uow), method)("a", operator="admin")

    assert result.is_ok()
    assert result.value.login_id == "user"
    mock_uow.tokens.get_by_hash.assert_called_once_with(hash_token("a"))
    mock_uow.tokens.end.assert_called_once_with(record, status)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_by_unknown_token(mock_uow):
    result = await KickoutUseCase(mock_uow).logout_by_token("missing", operator="admin")

    assert result.error.code == "NOT_FOUND"
    mock_uow.commit.assert_not_called()
