"""
SEO settings and image validation I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from .common import CamelModel


class SeoSettingRead(CamelModel):
    id: str
    page: str
    url_slug: str
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    robots_directives: str
    canonical_url: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None
    json_ld: Optional[Dict[str, Any]] = None
    auto_generate_faq: bool
    auto_generate_videos: bool
    created_at: datetime
    updated_at: datetime


class SeoSettingCreate(CamelModel):
    """Schema for creating SEO settings for a page."""

    page: str = Field(min_length=1, description="Page key, e.g. 'home' or 'faq-fr'")
    url_slug: str = Field(min_length=1, description="Path of the page, e.g. '/faq'")
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    robots_directives: str = "index,follow"
    canonical_url: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None
    json_ld: Optional[Dict[str, Any]] = None
    auto_generate_faq: bool = False
    auto_generate_videos: bool = False


class SeoSettingUpdate(CamelModel):
    page: Optional[str] = None
    url_slug: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    robots_directives: Optional[str] = None
    canonical_url: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None
    json_ld: Optional[Dict[str, Any]] = None
    auto_generate_faq: Optional[bool] = None
    auto_generate_videos: Optional[bool] = None


class SeoSettingResponse(CamelModel):
    success: bool = True
    setting: SeoSettingRead


class SeoExport(CamelModel):
    exported_at: datetime
    settings: List[SeoSettingRead]


class SeoImportRequest(CamelModel):
    settings: List[SeoSettingCreate]


class SeoImportResult(CamelModel):
    success: bool = True
    created: int
    updated: int


class FetchAsGoogleResult(CamelModel):
    success: bool
    url: str
    status_code: Optional[int] = None
    status_text: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None
    timestamp: datetime


class ImageValidateRequest(CamelModel):
    url: str = Field(min_length=1)
    type: Literal["og", "twitter"] = "og"


class ImageValidationRead(CamelModel):
    """Outcome of checking a social card image."""

    is_valid: bool
    url: str
    type: str
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    format: Optional[str] = None
    load_time_ms: Optional[float] = None
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
