import pytest

from tests.utils.auth_headers import bearer


@pytest.mark.asyncio
async def test_ignored_endpoint_is_open(client, login):
    anonymous = await client.get("/combined/health")
    assert anonymous.status_code == 200
    assert anonymous.json()["message"] == "Open to anonymous"

    invalid = await client.get("/combined/health", headers=bearer("garbage"))
    assert invalid.status_code == 200

    token = await login("user")
    known = await client.get("/combined/health", headers=bearer(token))
    assert known.json()["message"] == "Open to user"


@pytest.mark.asyncio
async def test_router_login_check_applies_to_the_rest(client):
    response = await client.get("/combined/normal")

    assert response.status_code == 401
    assert response.json()["error"] == "NOT_AUTHENTICATED"


@pytest.mark.parametrize(
    "username,path,expected",
    [
        ("user", "/combined/normal", 200),
        ("super-admin", "/combined/anyOf", 200),
        ("goods-admin", "/combined/anyOf", 200),
        ("admin", "/combined/anyOf", 200),
        ("user", "/combined/anyOf", 403),
        ("admin", "/combined/adminOnly", 200),
        ("goods-admin", "/combined/adminOnly", 200),
        ("super-admin", "/combined/adminOnly", 403),
        ("user", "/combined/adminOnly", 403),
    ],
)
@pytest.mark.asyncio
async def test_combined_predicates(client, login, username, path, expected):
    token = await login(username)

    response = await client.get(path, headers=bearer(token))

    assert response.status_code == expected
    if expected == 403:
        assert response.json()["error"] == "FORBIDDEN"
