"""
FAQ I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class FaqRead(CamelModel):
    id: str
    section: str
    section_name_en: str
    section_name_fr: str
    section_order: int
    order: int
    is_active: bool
    question_en: str
    question_fr: str
    answer_en: str
    answer_fr: str
    created_at: datetime


class FaqCreate(CamelModel):
    """Schema for creating a FAQ; the section is created implicitly by its first FAQ."""

    section: str = Field(min_length=1, description="Language-neutral section key")
    section_name_en: str = Field(min_length=1)
    section_name_fr: str = Field(min_length=1)
    section_order: int = 0
    order: int = 0
    is_active: bool = True
    question_en: str = Field(min_length=1)
    question_fr: str = Field(min_length=1)
    answer_en: str = Field(min_length=1)
    answer_fr: str = Field(min_length=1)


class FaqUpdate(CamelModel):
    section: Optional[str] = None
    section_name_en: Optional[str] = None
    section_name_fr: Optional[str] = None
    section_order: Optional[int] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None
    question_en: Optional[str] = None
    question_fr: Optional[str] = None
    answer_en: Optional[str] = None
    answer_fr: Optional[str] = None


class FaqSectionRead(CamelModel):
    """A section and its FAQs, in display order."""

    section: str
    section_name_en: str
    section_name_fr: str
    section_order: int
    faqs: List[FaqRead]


class SectionOrder(CamelModel):
    section: str
    section_order: int


class ReorderSections(CamelModel):
    section_orders: List[SectionOrder] = Field(min_length=1)


class FaqOrder(CamelModel):
    id: str
    order: int


class ReorderFaqs(CamelModel):
    faq_orders: List[FaqOrder] = Field(min_length=1)


class MoveFaq(CamelModel):
    faq_id: str
    new_section: str
    new_order: int = Field(ge=0)


class UpdateSectionNames(CamelModel):
    section: str = Field(min_length=1)
    section_name_en: str = Field(min_length=1)
    section_name_fr: Optional[str] = None


class UpdatedCount(CamelModel):
    success: bool = True
    updated: int
