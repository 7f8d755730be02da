import pytest

from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_kicked_out_token_reports_reason(client, login):
    admin = await login("admin")
    user = await login("user")

    response = await client.post("/admin/sessions/user/kickout", headers=bearer(admin))

    assert response.status_code == 200
    assert response.json()["revokedCount"] == 1

    after = await client.get("/auth/userInfo", headers=bearer(user))
    assert after.status_code == 401
    assert after.json()["error"] == "TOKEN_KICKED_OUT"

    # The admin's own token is untouched
    assert (await client.get("/auth/userInfo", headers=bearer(admin))).status_code == 200


@pytest.mark.asyncio
async def test_forced_logout(client, login):
    admin = await login("admin")
    user = await login("user")

    response = await client.post("/admin/sessions/user/logout", headers=bearer(admin))
    assert response.status_code == 200

    after = await client.get("/auth/userInfo", headers=bearer(user))
    assert after.status_code == 401
    assert after.json()["error"] == "NOT_AUTHENTICATED"


@pytest.mark.asyncio
async def test_kickout_by_device(client, login):
    admin = await login("admin")
    pc = await login("user", device_type="PC")
    app = await login("user", device_type="APP")

    response = await client.post(
        "/admin/sessions/user/kickout", params={"device": "PC"}, headers=bearer(admin)
    )
    assert response.json()["revokedCount"] == 1
    assert response.json()["deviceType"] == "PC"

    assert (await client.get("/auth/userInfo", headers=bearer(pc))).status_code == 401
    assert (await client.get("/auth/userInfo", headers=bearer(app))).status_code == 200

    # Account-Session stays while a token is live
    info = await client.get("/session/account/info", headers=bearer(app))
    assert info.json()["data"]["role"] == "user"


@pytest.mark.asyncio
async def test_kickout_single_token(client, login):
    admin = await login("admin")
    first = await login("user", device_type="PC")
    second = await login("user", device_type="PC")

    response = await client.post(
        "/admin/tokens/kickout", json={"token": first}, headers=bearer(admin)
    )
    assert response.status_code == 200

    assert (await client.get("/auth/userInfo", headers=bearer(first))).json()["error"] == (
        "TOKEN_KICKED_OUT"
    )
    assert (await client.get("/auth/userInfo", headers=bearer(second))).status_code == 200

    repeat = await client.post(
        "/admin/tokens/kickout", json={"token": first}, headers=bearer(admin)
    )
    assert repeat.status_code == 404


@pytest.mark.asyncio
async def test_kickout_unknown_account(client, login):
    admin = await login("admin")

    response = await client.post("/admin/sessions/ghost/kickout", headers=bearer(admin))

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_kickout_requires_admin(client, login):
    user = await login("user")

    response = await client.post("/admin/sessions/admin/kickout", headers=bearer(user))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_list_accounts(client, login):
    admin = await login("admin")

    response = await client.get("/admin/users", headers=bearer(admin))

    assert response.status_code == 200
    accounts = {entry["username"]: entry for entry in response.json()["data"]}
    assert set(accounts) == {"user", "admin", "super-admin", "goods-admin"}
    assert accounts["admin"]["activeTokens"] == 1
    assert accounts["admin"]["online"] is True
    assert accounts["user"]["online"] is False
    assert "password_hash" not in accounts["admin"]


@pytest.mark.asyncio
async def test_forced_logout_single_token(client, login):
    admin = await login("admin")
    first = await login("user", device_type="PC")
    second = await login("user", device_type="APP")

    response = await client.post(
        "/admin/tokens/logout", json={"token": first}, headers=bearer(admin)
    )
    assert response.status_code == 200
    assert response.json()["revokedCount"] == 1

    after = await client.get("/auth/userInfo", headers=bearer(first))
    assert after.status_code == 401
    assert after.json()["error"] == "NOT_AUTHENTICATED"
    assert (await client.get("/auth/userInfo", headers=bearer(second))).status_code == 200


@pytest.mark.asyncio
async def test_replace_by_device(client, login):
    admin = await login("admin")
    pc = await login("user", device_type="PC")
    app = await login("user", device_type="APP")

    response = await client.post(
        "/admin/sessions/user/replaced", params={"device": "PC"}, headers=bearer(admin)
    )
    assert response.status_code == 200
    assert response.json()["revokedCount"] == 1

    after = await client.get("/auth/userInfo", headers=bearer(pc))
    assert after.status_code == 401
    assert after.json()["error"] == "TOKEN_REPLACED"
    assert (await client.get("/auth/userInfo", headers=bearer(app))).status_code == 200


@pytest.mark.asyncio
async def test_replace_single_token(client, login):
    admin = await login("admin")
    user = await login("user")

    response = await client.post(
        "/admin/tokens/replaced", json={"token": user}, headers=bearer(admin)
    )
    assert response.status_code == 200

    after = await client.get("/auth/userInfo", headers=bearer(user))
    assert after.json()["error"] == "TOKEN_REPLACED"

    repeat = await client.post(
        "/admin/tokens/replaced", json={"token": user}, headers=bearer(admin)
    )
    assert repeat.status_code == 404
