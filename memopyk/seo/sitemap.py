"""
Sitemap and robots.txt generation.

The sitemap lists every public page in English and, when hreflang output is
on, its French twin under ``/fr``. Pages come from the SEO settings table
first, then a fixed set of default and legal pages.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Awaitable, Callable, Iterable, Optional, Protocol, Sequence
from xml.sax.saxutils import escape

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://memopyk.com"
DEFAULT_PAGES = ("home", "about", "contact", "gallery", "faq")
LEGAL_PAGES = ("legal-notice", "privacy-policy", "cookie-policy", "terms-sale", "terms-use")

CHANGE_FREQUENCIES = {
    "home": "daily",
    "gallery": "weekly",
    "faq": "weekly",
    "about": "monthly",
    "contact": "monthly",
    "services": "monthly",
}
PRIORITIES = {
    "home": 1.0,
    "services": 0.9,
    "gallery": 0.8,
    "contact": 0.8,
    "about": 0.7,
    "faq": 0.6,
}
DEFAULT_CHANGE_FREQUENCY = "monthly"
DEFAULT_PRIORITY = 0.5
LEGAL_CHANGE_FREQUENCY = "monthly"
LEGAL_PRIORITY = 0.3

_XML_ENTITIES = {'"': "&quot;", "'": "&#39;"}


class PageSource(Protocol):
    """Anything with a page key and a modification time, e.g. an SEO setting row."""

    page: str
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class SitemapOptions:
    base_url: str = DEFAULT_BASE_URL
    generate_hreflang: bool = True


@dataclass
class SitemapUrl:
    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[float] = None
    alternates: dict[str, str] = field(default_factory=dict)


def escape_xml(text: str) -> str:
    return escape(text, _XML_ENTITIES)


def change_frequency(page: str) -> str:
    return CHANGE_FREQUENCIES.get(page, DEFAULT_CHANGE_FREQUENCY)


def priority(page: str) -> float:
    return PRIORITIES.get(page, DEFAULT_PRIORITY)


def base_page(page: str) -> str:
    """Fold a French page key onto its base page (``faq-fr`` -> ``faq``)."""
    return page.replace("-fr", "", 1)


class SitemapGenerator:
    """Builds sitemap.xml and robots.txt documents."""

    def __init__(self, options: Optional[SitemapOptions] = None) -> None:
        self.options = options or SitemapOptions()

    @property
    def base_url(self) -> str:
        return self.options.base_url.rstrip("/")

    def page_path(self, page: str) -> str:
        return "" if page == "home" else f"/{page}"

    def _page_urls(self, page: str, lastmod: str, changefreq: str, prio: float) -> list[SitemapUrl]:
        path = self.page_path(page)
        en_loc = f"{self.base_url}{path}"
        if not self.options.generate_hreflang:
            return [SitemapUrl(loc=en_loc, lastmod=lastmod, changefreq=changefreq, priority=prio)]

        fr_loc = f"{self.base_url}/fr{path}"
        alternates = {"en": en_loc, "fr": fr_loc, "x-default": en_loc}
        return [
            SitemapUrl(loc=loc, lastmod=lastmod, changefreq=changefreq, priority=prio, alternates=dict(alternates))
            for loc in (en_loc, fr_loc)
        ]

    def collect_urls(self, seo_settings: Iterable[PageSource], today: Optional[date] = None) -> list[SitemapUrl]:
        """
        Work out every URL of the sitemap, in document order.

        Args:
            seo_settings: Rows with ``page`` and ``updated_at``; the first row
                seen for a base page wins
            today: Date stamped on pages that have no SEO settings row

        Returns:
            SEO pages, then missing default pages, then legal pages
        """
        today_str = (today or date.today()).isoformat()
        urls: list[SitemapUrl] = []
        seen: set[str] = set()

        for setting in seo_settings:
            page = base_page(setting.page)
            if page in seen:
                continue
            seen.add(page)
            lastmod = setting.updated_at.date().isoformat() if setting.updated_at else today_str
            urls.extend(self._page_urls(page, lastmod, change_frequency(page), priority(page)))

        for page in DEFAULT_PAGES:
            if page in seen:
                continue
            seen.add(page)
            urls.extend(self._page_urls(page, today_str, change_frequency(page), priority(page)))

        for page in LEGAL_PAGES:
            urls.extend(self._page_urls(page, today_str, LEGAL_CHANGE_FREQUENCY, LEGAL_PRIORITY))

        return urls

    def render_xml(self, urls: Sequence[SitemapUrl]) -> str:
        elements = []
        for url in urls:
            lines = ["  <url>", f"    <loc>{escape_xml(url.loc)}</loc>"]
            if url.lastmod:
                lines.append(f"    <lastmod>{url.lastmod}</lastmod>")
            if url.changefreq:
                lines.append(f"    <changefreq>{url.changefreq}</changefreq>")
            if url.priority is not None:
                lines.append(f"    <priority>{url.priority:.1f}</priority>")
            for lang, href in url.alternates.items():
                lines.append(f'    <xhtml:link rel="alternate" hreflang="{lang}" href="{escape_xml(href)}"/>')
            lines.append("  </url>")
            elements.append("\n".join(lines))

        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"\n'
            '        xmlns:xhtml="http://www.w3.org/1999/xhtml">\n'
            + "\n".join(elements)
            + "\n</urlset>"
        )

    def generate_sitemap(self, seo_settings: Iterable[PageSource], today: Optional[date] = None) -> str:
        return self.render_xml(self.collect_urls(seo_settings, today))

    def generate_robots_txt(self) -> str:
        return "\n".join(
            [
                "User-agent: *",
                "Allow: /",
                "",
                "# Disallow admin areas",
                "Disallow: /admin",
                "Disallow: /api/",
                "",
                "# Allow specific API endpoints for search engines",
                "Allow: /api/sitemap.xml",
                "",
                "# Sitemap location",
                f"Sitemap: {self.base_url}/api/sitemap.xml",
                "",
                "# Crawl delay for good behavior",
                "Crawl-delay: 1",
                "",
            ]
        )


@dataclass
class _CacheEntry:
    content: str
    created_at: float


class SitemapCache:
    """
    Process-local cache of the generated sitemap and robots.txt.

    Entries are served until ``ttl_seconds`` have passed, a caller forces
    regeneration, or ``invalidate()`` is called after SEO settings change.
    """

    def __init__(
        self,
        generator: SitemapGenerator,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.generator = generator
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sitemap: Optional[_CacheEntry] = None
        self._robots: Optional[_CacheEntry] = None

    def _fresh(self, entry: Optional[_CacheEntry]) -> bool:
        return entry is not None and (self._clock() - entry.created_at) < self.ttl_seconds

    async def get_sitemap(
        self,
        load_settings: Callable[[], Awaitable[Iterable[PageSource]]],
        force_regenerate: bool = False,
    ) -> str:
        """Cached sitemap, regenerated from ``load_settings()`` when stale."""
        if not force_regenerate and self._fresh(self._sitemap):
            return self._sitemap.content

        content = self.generator.generate_sitemap(await load_settings())
        self._sitemap = _CacheEntry(content=content, created_at=self._clock())
        logger.info(f"Generated new sitemap with {content.count('<url>')} URLs")
        return content

    def get_robots_txt(self, force_regenerate: bool = False) -> str:
        if not force_regenerate and self._fresh(self._robots):
            return self._robots.content

        content = self.generator.generate_robots_txt()
        self._robots = _CacheEntry(content=content, created_at=self._clock())
        logger.info("Generated new robots.txt")
        return content

    def invalidate(self) -> None:
        self._sitemap = None
        self._robots = None
        logger.info("Sitemap cache invalidated")
