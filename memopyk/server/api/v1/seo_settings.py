"""
SEO Settings Endpoints.

Per-page meta tags, social cards and structured data. Every change drops the
cached sitemap so new or renamed pages show up on the next crawl.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

import httpx
from fastapi import APIRouter, HTTPException, status

from memopyk.core.database.entities.seo_settings import SeoSetting
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import (
    FetchAsGoogleResult,
    MessageResponse,
    SeoExport,
    SeoImportRequest,
    SeoImportResult,
    SeoSettingCreate,
    SeoSettingRead,
    SeoSettingResponse,
    SeoSettingUpdate,
)
from memopyk.seo.json_ld import build_auto_json_ld
from memopyk.server.core.config import settings
from memopyk.server.services.deps import (
    AdminDep,
    FaqRepoDep,
    GalleryRepoDep,
    HttpClientDep,
    SeoRepoDep,
    SitemapCacheDep,
)

logger = get_logger(__name__)

router = APIRouter(tags=["seo-settings"])

GOOGLEBOT_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 6.0.1; Nexus 5X Build/MMB29P) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/W.X.Y.Z Mobile Safari/537.36 "
    "(compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
)
NON_NULLABLE_FIELDS = {"page", "url_slug", "robots_directives", "auto_generate_faq", "auto_generate_videos"}


async def _get_setting_or_404(seo: SeoRepoDep, setting_id: str) -> SeoSetting:
    setting = await seo.get_by_id(setting_id)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SEO setting not found")
    return setting


@router.get(
    "",
    response_model=List[SeoSettingRead],
    summary="List SEO Settings",
    description="SEO settings of every page, ordered by page key.",
)
async def list_seo_settings(seo: SeoRepoDep) -> List[SeoSettingRead]:
    return [SeoSettingRead.model_validate(s) for s in await seo.list()]


@router.get(
    "/export",
    response_model=SeoExport,
    summary="Export SEO Settings",
    description="All SEO settings in a form the import endpoint accepts.",
)
async def export_seo_settings(_: AdminDep, seo: SeoRepoDep) -> SeoExport:
    return SeoExport(
        exported_at=datetime.now(timezone.utc),
        settings=[SeoSettingRead.model_validate(s) for s in await seo.list()],
    )


@router.post(
    "/import",
    response_model=SeoImportResult,
    summary="Import SEO Settings",
    description="Create or update SEO settings, matching existing rows by page key.",
)
async def import_seo_settings(
    payload: SeoImportRequest, _: AdminDep, seo: SeoRepoDep, cache: SitemapCacheDep
) -> SeoImportResult:
    """
    Import SEO settings.

    Each entry updates the setting with the same ``page`` or creates a new one.

    - **settings**: List of SEO settings.
    """
    created = updated = 0
    for entry in payload.settings:
        _, was_created = await seo.upsert_by_page(entry.model_dump())
        if was_created:
            created += 1
        else:
            updated += 1
    cache.invalidate()
    logger.info(f"Imported SEO settings: {created} created, {updated} updated")
    return SeoImportResult(created=created, updated=updated)


@router.get(
    "/page/{page}",
    response_model=SeoSettingRead,
    summary="Get SEO Settings by Page",
    responses={404: {"description": "No settings for this page"}},
)
async def get_seo_setting_by_page(page: str, seo: SeoRepoDep) -> SeoSettingRead:
    setting = await seo.get_by_page(page)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"SEO settings for page '{page}' not found")
    return SeoSettingRead.model_validate(setting)


@router.get(
    "/{setting_id}",
    response_model=SeoSettingRead,
    summary="Get SEO Setting",
    responses={404: {"description": "SEO setting not found"}},
)
async def get_seo_setting(setting_id: str, seo: SeoRepoDep) -> SeoSettingRead:
    return SeoSettingRead.model_validate(await _get_setting_or_404(seo, setting_id))


@router.post(
    "",
    response_model=SeoSettingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create SEO Setting",
)
async def create_seo_setting(
    payload: SeoSettingCreate, _: AdminDep, seo: SeoRepoDep, cache: SitemapCacheDep
) -> SeoSettingResponse:
    setting = await seo.create(SeoSetting(**payload.model_dump()))
    cache.invalidate()
    logger.info(f"Created SEO setting {setting.id} for page {setting.page}")
    return SeoSettingResponse(setting=SeoSettingRead.model_validate(setting))


@router.put(
    "/{setting_id}",
    response_model=SeoSettingResponse,
    summary="Update SEO Setting",
    description="Partially update an SEO setting.",
    responses={404: {"description": "SEO setting not found"}},
)
async def update_seo_setting(
    setting_id: str, payload: SeoSettingUpdate, _: AdminDep, seo: SeoRepoDep, cache: SitemapCacheDep
) -> SeoSettingResponse:
    setting = await _get_setting_or_404(seo, setting_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        if value is None and key in NON_NULLABLE_FIELDS:
            continue
        setattr(setting, key, value)
    setting = await seo.update(setting)
    cache.invalidate()
    return SeoSettingResponse(setting=SeoSettingRead.model_validate(setting))


@router.delete(
    "/{setting_id}",
    response_model=MessageResponse,
    summary="Delete SEO Setting",
    responses={404: {"description": "SEO setting not found"}},
)
async def delete_seo_setting(
    setting_id: str, _: AdminDep, seo: SeoRepoDep, cache: SitemapCacheDep
) -> MessageResponse:
    if not await seo.delete(setting_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SEO setting not found")
    cache.invalidate()
    return MessageResponse(message="SEO setting deleted successfully")


@router.get(
    "/{setting_id}/auto-json-ld",
    summary="Generated Structured Data",
    description="JSON-LD generated from FAQs and gallery videos, merged with the page's manual JSON-LD.",
    responses={404: {"description": "SEO setting not found"}},
)
async def auto_json_ld(
    setting_id: str, seo: SeoRepoDep, faqs: FaqRepoDep, gallery: GalleryRepoDep
) -> Dict[str, Any]:
    """
    Build the page's structured data.

    - FAQPage from active FAQs when ``autoGenerateFaq`` is on.
    - VideoObjects from active gallery items with a video when ``autoGenerateVideos`` is on.
    - Keys of the manual ``jsonLd`` object override generated ones.
    """
    setting = await _get_setting_or_404(seo, setting_id)
    return build_auto_json_ld(
        include_faq=setting.auto_generate_faq,
        include_videos=setting.auto_generate_videos,
        faqs=await faqs.list(filters={"is_active": True}) if setting.auto_generate_faq else (),
        gallery_items=await gallery.list(filters={"is_active": True}) if setting.auto_generate_videos else (),
        manual=setting.json_ld,
    )


@router.post(
    "/{setting_id}/fetch-as-google",
    response_model=FetchAsGoogleResult,
    summary="Fetch as Google",
    description="HEAD the page with a Googlebot user agent and report the answer.",
    responses={404: {"description": "SEO setting not found"}},
)
async def fetch_as_google(
    setting_id: str, _: AdminDep, seo: SeoRepoDep, client: HttpClientDep
) -> FetchAsGoogleResult:
    setting = await _get_setting_or_404(seo, setting_id)
    url = setting.canonical_url or f"{settings.site.base_url.rstrip('/')}{setting.url_slug}"

    try:
        response = await client.head(url, headers={"User-Agent": GOOGLEBOT_USER_AGENT}, timeout=10.0)
    except httpx.HTTPError as e:
        logger.warning(f"Fetch as Google failed for {url}: {e}")
        return FetchAsGoogleResult(
            success=False, url=url, error=str(e) or type(e).__name__, timestamp=datetime.now(timezone.utc)
        )

    return FetchAsGoogleResult(
        success=True,
        url=url,
        status_code=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers),
        timestamp=datetime.now(timezone.utc),
    )
