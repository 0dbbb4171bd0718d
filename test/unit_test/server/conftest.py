from pathlib import Path
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

from memopyk.core.database import create_all, get_session
from memopyk.media.temp_files import GalleryTempStore
from memopyk.server.core import constant
from memopyk.server.core.config import settings
from memopyk.server.services.auth import login_rate_limiter, session_store
from memopyk.server.services.deps import get_temp_store
from memopyk.server.services.legal_content import LegalContentStore, get_legal_content_store
from memopyk.server.services.sitemap_cache import sitemap_cache

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session_maker")
async def session_maker_fixture(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """A session for arranging and checking rows directly."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="temp_store")
async def temp_store_fixture(tmp_path: Path) -> GalleryTempStore:
    return GalleryTempStore(tmp_path / "gallery")


@pytest_asyncio.fixture(name="legal_store")
async def legal_store_fixture(tmp_path: Path) -> LegalContentStore:
    return LegalContentStore(tmp_path / "content" / "legal-content.json")


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session_maker, temp_store: GalleryTempStore, legal_store: LegalContentStore
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies and clean in-memory state."""
    from memopyk.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_temp_store] = lambda: temp_store
    app.dependency_overrides[get_legal_content_store] = lambda: legal_store

    session_store.clear()
    login_rate_limiter.clear()
    sitemap_cache.invalidate()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
    session_store.clear()
    login_rate_limiter.clear()
    sitemap_cache.invalidate()


@pytest_asyncio.fixture(name="admin_client")
async def admin_client_fixture(client: AsyncClient) -> AsyncClient:
    """The same client carrying a live admin session cookie."""
    session_id = session_store.create(constant.ADMIN_USER_ID)
    client.cookies.set(settings.admin.session_cookie, session_id)
    return client
