"""
Process-wide sitemap cache.

SEO settings routes call ``get_sitemap_cache().invalidate()`` after every
change so the next crawler request sees the new pages.
"""

from memopyk.seo.sitemap import SitemapCache, SitemapGenerator, SitemapOptions
from memopyk.server.core.config import settings

sitemap_cache = SitemapCache(
    generator=SitemapGenerator(SitemapOptions(base_url=settings.site.base_url)),
    ttl_seconds=settings.site.sitemap_cache_ttl_seconds,
)


def get_sitemap_cache() -> SitemapCache:
    return sitemap_cache
