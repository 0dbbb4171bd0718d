import pytest
from httpx import AsyncClient

from memopyk.server.core import constant
from memopyk.server.core.config import settings
from memopyk.server.services.auth import login_rate_limiter, session_store

pytestmark = pytest.mark.asyncio


async def test_login_sets_session_cookie(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"password": settings.admin.password})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["id"] == constant.ADMIN_USER_ID

    session_id = response.cookies.get(settings.admin.session_cookie)
    assert session_id is not None
    assert len(session_id) == 64
    assert session_store.validate(session_id) == constant.ADMIN_USER_ID

    set_cookie = response.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie


async def test_login_wrong_password(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"password": "not-the-password"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid password"
    assert len(session_store) == 0


async def test_login_empty_password_is_a_validation_error(client: AsyncClient):
    response = await client.post("/api/auth/login", json={"password": ""})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


async def test_login_rate_limited_after_max_attempts(client: AsyncClient):
    """After the limit even the right password is refused until the window resets."""
    for _ in range(settings.admin.login_max_attempts):
        response = await client.post("/api/auth/login", json={"password": "wrong"})
        assert response.status_code == 401

    response = await client.post("/api/auth/login", json={"password": settings.admin.password})
    assert response.status_code == 429
    detail = response.json()["detail"]
    assert "Too many login attempts" in detail["message"]
    assert "resetAt" in detail


async def test_successful_login_resets_failure_count(client: AsyncClient):
    for _ in range(settings.admin.login_max_attempts - 1):
        await client.post("/api/auth/login", json={"password": "wrong"})

    response = await client.post("/api/auth/login", json={"password": settings.admin.password})
    assert response.status_code == 200
    assert login_rate_limiter.blocked_until("127.0.0.1") is None


async def test_verify_without_cookie(client: AsyncClient):
    response = await client.get("/api/auth/verify")
    assert response.status_code == 401
    assert response.json()["detail"] == "Authentication required"


async def test_verify_with_unknown_session(client: AsyncClient):
    client.cookies.set(settings.admin.session_cookie, "0" * 64)
    response = await client.get("/api/auth/verify")
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired session"


async def test_verify_with_session(admin_client: AsyncClient):
    response = await admin_client.get("/api/auth/verify")
    assert response.status_code == 200
    assert response.json()["user"]["id"] == constant.ADMIN_USER_ID


async def test_logout_destroys_session(admin_client: AsyncClient):
    response = await admin_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logged out successfully"}
    assert len(session_store) == 0

    admin_client.cookies.clear()
    response = await admin_client.get("/api/auth/verify")
    assert response.status_code == 401


async def test_logout_without_session_is_fine(client: AsyncClient):
    response = await client.post("/api/auth/logout")
    assert response.status_code == 200
