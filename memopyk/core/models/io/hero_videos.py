"""
Hero video I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class HeroVideoRead(CamelModel):
    id: int
    title_en: str
    title_fr: str
    url_en: str
    url_fr: str
    order_index: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class HeroVideoCreate(CamelModel):
    """Schema for adding a hero video; ``order_index`` defaults to the end of the rotation."""

    title_en: str = Field(min_length=1)
    title_fr: str = Field(min_length=1)
    url_en: str = Field(min_length=1)
    url_fr: str = Field(min_length=1)
    order_index: Optional[int] = Field(default=None, ge=0)
    is_active: bool = True


class HeroVideoUpdate(CamelModel):
    title_en: Optional[str] = None
    title_fr: Optional[str] = None
    url_en: Optional[str] = None
    url_fr: Optional[str] = None
    order_index: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None


class HeroVideoReorder(CamelModel):
    video_ids: List[int] = Field(min_length=1, description="Video ids in their new rotation order")
