import pytest
from httpx import AsyncClient

from tests.utils.session_cookies import COOKIE_NAME, auth_headers, register, sign_in


@pytest.mark.asyncio
async def test_register_login_logout_flow(client: AsyncClient):
    """
    Register alice, fail with a wrong password, sign in, resolve the session
    through /auth/me, log out, and check the session no longer resolves.
    """
    response = await client.post(
        "/auth/register", json={"username": "alice", "password": "secret1", "name": "Alice"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["user"]["username"] == "alice"
    assert data["user"]["role"] == "user"
    assert "password_hash" not in data["user"]
    assert "token" not in data
    client.cookies.clear()

    response = await client.post("/auth/login", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert COOKIE_NAME not in response.cookies

    token = await sign_in(client, "alice", "secret1")
    assert len(token) == 64

    response = await client.get("/auth/me", headers=auth_headers(token))
    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert response.json()["last_signed_in"] is not None

    response = await client.post("/auth/logout", headers=auth_headers(token))
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert f"{COOKIE_NAME}=" in response.headers["set-cookie"]
    assert "Max-Age=0" in response.headers["set-cookie"]
    client.cookies.clear()

    response = await client.get("/auth/me", headers=auth_headers(token))
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient):
    await register(client, "alice")

    response = await client.post("/auth/register", json={"username": "alice", "password": "other1"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_USER"


@pytest.mark.asyncio
async def test_register_ignores_role_field(client: AsyncClient):
    response = await client.post(
        "/auth/register", json={"username": "mallory", "password": "secret1", "role": "admin"}
    )

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "user"


@pytest.mark.asyncio
async def test_register_validation(client: AsyncClient):
    response = await client.post("/auth/register", json={"username": "al", "password": "secret1"})
    assert response.status_code == 422

    response = await client.post("/auth/register", json={"username": "alice", "password": "123"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_user_and_wrong_password_share_one_response(client: AsyncClient):
    await register(client, "alice")

    unknown = await client.post("/auth/login", json={"username": "ghost", "password": "secret1"})
    wrong = await client.post("/auth/login", json={"username": "alice", "password": "nope-nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


@pytest.mark.asyncio
async def test_session_cookie_attributes(client: AsyncClient):
    response = await client.post(
        "/auth/register", json={"username": "alice", "password": "secret1"}
    )
    set_cookie = response.headers["set-cookie"].lower()

    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert "max-age=604800" in set_cookie
    assert "path=/" in set_cookie
    assert "secure" not in set_cookie


@pytest.mark.asyncio
async def test_session_cookie_is_secure_behind_https_proxy(client: AsyncClient):
    await register(client, "alice")

    response = await client.post(
        "/auth/login",
        json={"username": "alice", "password": "secret1"},
        headers={"X-Forwarded-Proto": "https"},
    )

    assert response.status_code == 200
    assert "secure" in response.headers["set-cookie"].lower()


@pytest.mark.asyncio
async def test_sessions_are_independent(client: AsyncClient):
    """A user may hold several sessions; logging one out leaves the others valid"""
    first, _ = await register(client, "alice")
    second = await sign_in(client, "alice", "secret1")
    assert first != second

    await client.post("/auth/logout", headers=auth_headers(first))
    client.cookies.clear()

    response = await client.get("/auth/me", headers=auth_headers(second))
    assert response.json()["username"] == "alice"


@pytest.mark.asyncio
async def test_garbage_cookie_is_anonymous(client: AsyncClient):
    response = await client.get("/auth/me", headers=auth_headers("not-a-token"))
    assert response.json() is None

    response = await client.get("/tasks", headers=auth_headers("not-a-token"))
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_logout_without_session(client: AsyncClient):
    response = await client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
