"""
Database repository layer using SQLModel.

Each module provides async data access operations for one entity, on the
shared ``AsyncBaseRepository`` interface.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- contacts: Contact request operations
- hero_videos: Hero video CRUD and rotation order
- gallery_items: Gallery item CRUD and display order
- faqs: FAQ CRUD plus section-level operations
- seo_settings: SEO settings CRUD and upsert by page
- deployments: Deployment log and history
"""

from .base import AsyncBaseRepository, QueryBuilder
from .contacts import ContactRepository
from .deployments import DeploymentRepository
from .faqs import FaqRepository
from .gallery_items import GalleryItemRepository
from .hero_videos import HeroVideoRepository
from .seo_settings import SeoSettingRepository

__all__ = [
    "AsyncBaseRepository",
    "ContactRepository",
    "DeploymentRepository",
    "FaqRepository",
    "GalleryItemRepository",
    "HeroVideoRepository",
    "QueryBuilder",
    "SeoSettingRepository",
]
