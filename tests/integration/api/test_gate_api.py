import pytest

from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_admin_user_scenario(client, login):
    admin = await login("admin")
    user = await login("user")

    first = await client.get("/admin/dashboard", headers=bearer(admin))
    denied = await client.get("/admin/dashboard", headers=bearer(user))
    again = await client.get("/admin/dashboard", headers=bearer(admin))

    assert first.status_code == 200
    assert first.json()["operator"] == "admin"
    assert denied.status_code == 403
    assert denied.json()["error"] == "FORBIDDEN"
    assert again.status_code == 200


@pytest.mark.asyncio
async def test_anonymous_on_protected_resource(client):
    response = await client.get("/goods/list")

    assert response.status_code == 401
    assert response.json() == {
        "code": 401,
        "message": "Authentication required",
        "error": "NOT_AUTHENTICATED",
    }


@pytest.mark.asyncio
async def test_invalid_token_on_protected_resource(client):
    response = await client.get("/goods/list", headers=bearer("garbage"))

    assert response.status_code == 401
    assert response.json()["error"] == "NOT_AUTHENTICATED"


@pytest.mark.asyncio
async def test_role_without_permission_is_forbidden(client, login):
    token = await login("goods-admin")

    goods = await client.get("/goods/list", headers=bearer(token))
    admin = await client.get("/admin/dashboard", headers=bearer(token))

    assert goods.status_code == 200
    assert admin.status_code == 403
    assert "Permission required" in admin.json()["message"]


@pytest.mark.parametrize(
    "username,path,expected",
    [
        ("user", "/user/list", 200),
        ("goods-admin", "/user/list", 403),
        ("admin", "/orders/list", 200),
        ("admin", "/notice/list", 403),
        ("super-admin", "/notice/list", 200),
        ("super-admin", "/comment/list", 200),
        ("user", "/goods/info/42", 403),
        ("admin", "/goods/info/42", 200),
    ],
)
@pytest.mark.asyncio
async def test_route_table_permissions(client, login, username, path, expected):
    token = await login(username)

    response = await client.get(path, headers=bearer(token))

    assert response.status_code == expected


@pytest.mark.asyncio
async def test_route_table_applies_to_writes(client, login):
    token = await login("user")

    response = await client.post("/goods/add", headers=bearer(token))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_per_route_predicates_match_table(client, login):
    """/advanced/both binds the same checks /admin/** gets from the route table"""
    for username in ["user", "admin", "super-admin", "goods-admin"]:
        token = await login(username)

        by_table = await client.get("/admin/dashboard", headers=bearer(token))
        by_route = await client.get("/advanced/both", headers=bearer(token))

        assert by_table.status_code == by_route.status_code, username

    assert (await client.get("/admin/dashboard")).status_code == 401
    assert (await client.get("/advanced/both")).status_code == 401


@pytest.mark.parametrize(
    "username,path,expected",
    [
        ("user", "/basic/info", 200),
        ("super-admin", "/basic/add", 200),
        ("admin", "/basic/add", 403),
        ("user", "/basic/userAdd", 200),
        ("goods-admin", "/basic/userAdd", 403),
        ("super-admin", "/advanced/anyOf", 200),
        ("admin", "/advanced/anyOf", 403),
        ("admin", "/advanced/allOf", 200),
        ("goods-admin", "/advanced/allOf", 403),
        ("goods-admin", "/advanced/orRole", 200),
        ("user", "/advanced/orRole", 403),
    ],
)
@pytest.mark.asyncio
async def test_per_route_predicates(client, login, username, path, expected):
    token = await login(username)

    response = await client.get(path, headers=bearer(token))

    assert response.status_code == expected


@pytest.mark.asyncio
async def test_per_route_login_check_rejects_anonymous(client):
    response = await client.get("/basic/info")

    assert response.status_code == 401
    assert response.json()["error"] == "NOT_AUTHENTICATED"


@pytest.mark.asyncio
async def test_public_paths_stay_open(client):
    assert (await client.get("/health")).status_code == 200
    assert (await client.get("/session/compare")).status_code == 200
    assert (await client.get("/auth/isLogin")).status_code == 200
