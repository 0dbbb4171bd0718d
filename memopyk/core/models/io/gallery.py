"""
Gallery I/O models, including the media processing endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class GalleryItemRead(CamelModel):
    id: str
    title_en: str
    title_fr: str
    description_en: str
    description_fr: str
    additional_info_en: List[str]
    additional_info_fr: List[str]
    price_en: Optional[str] = None
    price_fr: Optional[str] = None
    image_url_en: str
    image_url_fr: str
    video_url_en: Optional[str] = None
    video_url_fr: Optional[str] = None
    alt_text_en: str
    alt_text_fr: str
    order: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GalleryItemCreate(CamelModel):
    """Schema for creating a gallery item via API."""

    title_en: str = Field(min_length=1)
    title_fr: str = Field(min_length=1)
    description_en: str
    description_fr: str
    additional_info_en: List[str] = Field(default_factory=list)
    additional_info_fr: List[str] = Field(default_factory=list)
    price_en: Optional[str] = None
    price_fr: Optional[str] = None
    image_url_en: str
    image_url_fr: str
    video_url_en: Optional[str] = None
    video_url_fr: Optional[str] = None
    alt_text_en: str
    alt_text_fr: str
    order: int = 0
    is_active: bool = True


class GalleryItemUpdate(CamelModel):
    title_en: Optional[str] = None
    title_fr: Optional[str] = None
    description_en: Optional[str] = None
    description_fr: Optional[str] = None
    additional_info_en: Optional[List[str]] = None
    additional_info_fr: Optional[List[str]] = None
    price_en: Optional[str] = None
    price_fr: Optional[str] = None
    image_url_en: Optional[str] = None
    image_url_fr: Optional[str] = None
    video_url_en: Optional[str] = None
    video_url_fr: Optional[str] = None
    alt_text_en: Optional[str] = None
    alt_text_fr: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class GalleryItemResponse(CamelModel):
    success: bool = True
    item: GalleryItemRead


class GalleryItemOrder(CamelModel):
    id: str
    order: int


class GalleryReorder(CamelModel):
    item_orders: List[GalleryItemOrder] = Field(min_length=1)


class ProcessRequest(CamelModel):
    timestamp: float = Field(default=5, ge=0, description="Seconds into the video to grab the frame from")


class ResizeRequest(CamelModel):
    target_width: int = Field(gt=0, le=7680)
    target_height: int = Field(gt=0, le=4320)


class Dimensions(CamelModel):
    width: int
    height: int


class VideoDimensions(Dimensions):
    aspect_ratio: float


class VideoInfoRead(VideoDimensions):
    duration: float


class ProcessResult(CamelModel):
    success: bool = True
    thumbnail_path: str
    thumbnail_url: str
    video_dimensions: VideoDimensions
    message: str


class ResizeResult(CamelModel):
    success: bool = True
    original_dimensions: Dimensions
    target_dimensions: Dimensions
    resized_url: str
    message: str


class CleanupResult(CamelModel):
    success: bool = True
    removed: int
    message: str
