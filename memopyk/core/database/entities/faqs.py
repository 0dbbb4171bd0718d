"""
FAQ entity.

FAQs are grouped into sections by a language-neutral ``section`` key. Every
row carries its section's display names and order, so a section exists as
long as at least one FAQ belongs to it.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class Faq(Base, table=True):
    """Bilingual question/answer pair.

    Table: faqs
    """

    __tablename__ = "faqs"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    section: str = Field(index=True, description="Language-neutral section key, e.g. 'general'")
    section_name_en: str
    section_name_fr: str
    section_order: int = Field(default=0)
    order: int = Field(default=0, description="Position within the section")
    is_active: bool = Field(default=True)

    question_en: str
    question_fr: str
    answer_en: str
    answer_fr: str

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
