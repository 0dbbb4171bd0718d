from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from memopyk.core.database import get_session
from memopyk.server.core import constant

pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == constant.API_VERSION
    assert "timestamp" in data


async def test_api_health_check_reports_database(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


async def test_api_health_check_database_down(client: AsyncClient):
    """A failing ``SELECT 1`` answers 503 instead of raising."""
    from memopyk.server.main import app

    broken_session = AsyncMock()
    broken_session.execute.side_effect = ConnectionError("connection refused")

    async def broken_session_override():
        yield broken_session

    app.dependency_overrides[get_session] = broken_session_override

    response = await client.get("/api/health")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["database"] == "disconnected"
    assert "connection refused" in data["error"]


async def test_responses_carry_process_time_header(client: AsyncClient):
    response = await client.get("/health")
    assert float(response.headers["X-Process-Time"]) >= 0
