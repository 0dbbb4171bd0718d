"""
Gallery item entity.

A gallery item pairs a cover image with an optional sample video, in both
languages. Identifiers are readable strings rather than serial integers so
that generated media files can be named after them.
"""

import random
import string
import time
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_gallery_item_id() -> str:
    """Build an id of the form ``gallery-<epoch ms>-<9 base36 chars>``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"gallery-{int(time.time() * 1000)}-{suffix}"


class GalleryItem(Base, table=True):
    """Portfolio entry shown in the public gallery.

    Table: gallery_items
    """

    __tablename__ = "gallery_items"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_gallery_item_id, primary_key=True, max_length=64)

    title_en: str
    title_fr: str
    description_en: str
    description_fr: str
    additional_info_en: List[str] = Field(default_factory=list, sa_type=JSON)
    additional_info_fr: List[str] = Field(default_factory=list, sa_type=JSON)
    price_en: Optional[str] = Field(default=None, description="Display price, e.g. 'USD 325'")
    price_fr: Optional[str] = Field(default=None, description="Display price, e.g. '300 €'")
    image_url_en: str
    image_url_fr: str
    video_url_en: Optional[str] = Field(default=None)
    video_url_fr: Optional[str] = Field(default=None)
    alt_text_en: str
    alt_text_fr: str
    order: int = Field(default=0, index=True)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": utc_now_naive}
    )

    @property
    def video_url(self) -> Optional[str]:
        """English video when present, otherwise the French one."""
        return self.video_url_en or self.video_url_fr

    def __repr__(self) -> str:
        return f"GalleryItem(id={self.id}, title_en={self.title_en})"
