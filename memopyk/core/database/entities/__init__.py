"""
Database entity models.

Each module holds the SQLModel table for one MEMOPYK record type.

Modules:
- contacts: Visitor contact requests
- hero_videos: Landing page background videos
- gallery_items: Portfolio entries with cover image and video
- faqs: Sectioned bilingual FAQs
- seo_settings: Per-page SEO metadata
- deployments: Deployment log
"""

from . import (
    contacts,
    deployments,
    faqs,
    gallery_items,
    hero_videos,
    seo_settings,
)

__all__ = [
    "contacts",
    "deployments",
    "faqs",
    "gallery_items",
    "hero_videos",
    "seo_settings",
]
