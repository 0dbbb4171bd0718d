"""
Hero video entity.

Hero videos rotate in the landing page background. Each has an English and a
French title and source URL.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class HeroVideo(Base, table=True):
    """Landing page background video.

    Table: hero_videos
    """

    __tablename__ = "hero_videos"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    title_en: str
    title_fr: str
    url_en: str
    url_fr: str
    order_index: int = Field(default=0, index=True, description="Position in the rotation")
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": utc_now_naive}
    )
