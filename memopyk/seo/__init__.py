"""
Search engine helpers.

Modules:
- sitemap: sitemap.xml / robots.txt generation and their cache
- json_ld: schema.org structured data built from FAQs and gallery videos
"""

from .sitemap import SitemapCache, SitemapGenerator, SitemapOptions, SitemapUrl

__all__ = [
    "SitemapCache",
    "SitemapGenerator",
    "SitemapOptions",
    "SitemapUrl",
]
