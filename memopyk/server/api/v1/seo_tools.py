"""
Search Engine Endpoints.

sitemap.xml and robots.txt for crawlers, plus admin tools for forcing a
sitemap rebuild and checking social card images.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import ImageValidateRequest, ImageValidationRead
from memopyk.media.image_validator import validate_image_url
from memopyk.server.services.deps import AdminDep, HttpClientDep, SeoRepoDep, SitemapCacheDep

logger = get_logger(__name__)

router = APIRouter(tags=["seo"])


@router.get(
    "/sitemap.xml",
    summary="Sitemap",
    response_class=Response,
    responses={200: {"content": {"application/xml": {}}}},
)
async def sitemap_xml(seo: SeoRepoDep, cache: SitemapCacheDep) -> Response:
    content = await cache.get_sitemap(seo.list)
    return Response(content=content, media_type="application/xml")


@router.get("/robots.txt", summary="robots.txt", response_class=PlainTextResponse)
async def robots_txt(cache: SitemapCacheDep) -> PlainTextResponse:
    return PlainTextResponse(cache.get_robots_txt())


@router.post(
    "/seo/sitemap/regenerate",
    summary="Regenerate Sitemap",
    description="Drop the cached sitemap and robots.txt and build the sitemap again.",
)
async def regenerate_sitemap(_: AdminDep, seo: SeoRepoDep, cache: SitemapCacheDep):
    cache.invalidate()
    content = await cache.get_sitemap(seo.list, force_regenerate=True)
    return {
        "success": True,
        "message": "Sitemap regenerated successfully",
        "urls": content.count("<url>"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post(
    "/image/validate",
    response_model=ImageValidationRead,
    tags=["seo"],
    summary="Validate Social Image",
    description="Check an Open Graph or Twitter Card image URL.",
)
async def validate_image(payload: ImageValidateRequest, _: AdminDep, client: HttpClientDep) -> ImageValidationRead:
    """
    Validate a social card image.

    - **url**: HTTPS URL of the image.
    - **type**: ``og`` (1200x630) or ``twitter`` (1200x600).
    """
    result = await validate_image_url(payload.url, payload.type, client=client)
    return ImageValidationRead.model_validate(result)
