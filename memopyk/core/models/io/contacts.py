"""
Contact and dashboard statistics I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from .common import CamelModel


class ContactCreate(CamelModel):
    """Schema for the public contact form."""

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    package: str = Field(min_length=1, max_length=100, description="Package the visitor is interested in")
    message: Optional[str] = Field(default=None, max_length=5000)


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    package: str
    message: Optional[str] = None
    created_at: datetime


class ContactCreated(CamelModel):
    success: bool = True
    contact: ContactRead


class StatsRead(CamelModel):
    """Admin dashboard counters."""

    hero_videos: int
    gallery_items: int
    faq_sections: int
    contacts: int
