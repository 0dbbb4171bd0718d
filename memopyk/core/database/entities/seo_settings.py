"""
SEO settings entity.

One row per public page (``home``, ``faq``, ``gallery-fr``, ...) holding meta
tags, social card data and optional structured data.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


class SeoSetting(Base, table=True):
    """Per-page SEO metadata.

    Table: seo_settings
    """

    __tablename__ = "seo_settings"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    page: str = Field(index=True, description="Page key, e.g. 'home' or 'faq-fr'")
    url_slug: str = Field(description="Path of the page, e.g. '/faq'")
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    robots_directives: str = Field(default="index,follow")
    canonical_url: Optional[str] = None

    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None

    json_ld: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSON)
    auto_generate_faq: bool = Field(default=False)
    auto_generate_videos: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": utc_now_naive}
    )

    def __repr__(self) -> str:
        return f"SeoSetting(id={self.id}, page={self.page})"
