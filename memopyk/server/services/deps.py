"""
FastAPI dependencies.

Provides the admin guard, per-request repositories and the process-wide
services used by the API routers.
"""

from typing import Annotated, AsyncGenerator

import httpx
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from memopyk.core.database import get_session
from memopyk.core.database.repositories import (
    ContactRepository,
    DeploymentRepository,
    FaqRepository,
    GalleryItemRepository,
    HeroVideoRepository,
    SeoSettingRepository,
)
from memopyk.media.temp_files import GalleryTempStore
from memopyk.seo.sitemap import SitemapCache
from memopyk.server.core.config import settings
from memopyk.server.services.auth import (
    LoginRateLimiter,
    SessionStore,
    get_login_rate_limiter,
    get_session_store,
)
from memopyk.server.services.legal_content import LegalContentStore, get_legal_content_store
from memopyk.server.services.sitemap_cache import get_sitemap_cache

SessionDep = Annotated[AsyncSession, Depends(get_session)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
RateLimiterDep = Annotated[LoginRateLimiter, Depends(get_login_rate_limiter)]
SitemapCacheDep = Annotated[SitemapCache, Depends(get_sitemap_cache)]
LegalContentDep = Annotated[LegalContentStore, Depends(get_legal_content_store)]


def require_admin(request: Request, store: SessionStoreDep) -> str:
    """
    Guard for admin-only endpoints.

    Returns:
        The id of the logged-in admin user

    Raises:
        HTTPException: 401 when the session cookie is missing, unknown or expired
    """
    session_id = request.cookies.get(settings.admin.session_cookie)
    if not session_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    user_id = store.validate(session_id)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired session")
    return user_id


AdminDep = Annotated[str, Depends(require_admin)]


def get_temp_store() -> GalleryTempStore:
    return GalleryTempStore(settings.media.temp_dir)


TempStoreDep = Annotated[GalleryTempStore, Depends(get_temp_store)]


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Outbound HTTP client for checks against external URLs."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        yield client


HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]


def get_contact_repository(session: SessionDep) -> ContactRepository:
    return ContactRepository(session)


def get_hero_video_repository(session: SessionDep) -> HeroVideoRepository:
    return HeroVideoRepository(session)


def get_gallery_repository(session: SessionDep) -> GalleryItemRepository:
    return GalleryItemRepository(session)


def get_faq_repository(session: SessionDep) -> FaqRepository:
    return FaqRepository(session)


def get_seo_repository(session: SessionDep) -> SeoSettingRepository:
    return SeoSettingRepository(session)


def get_deployment_repository(session: SessionDep) -> DeploymentRepository:
    return DeploymentRepository(session)


ContactRepoDep = Annotated[ContactRepository, Depends(get_contact_repository)]
HeroVideoRepoDep = Annotated[HeroVideoRepository, Depends(get_hero_video_repository)]
GalleryRepoDep = Annotated[GalleryItemRepository, Depends(get_gallery_repository)]
FaqRepoDep = Annotated[FaqRepository, Depends(get_faq_repository)]
SeoRepoDep = Annotated[SeoSettingRepository, Depends(get_seo_repository)]
DeploymentRepoDep = Annotated[DeploymentRepository, Depends(get_deployment_repository)]
