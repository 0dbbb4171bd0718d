"""
Contact request entity.

A contact row is written every time a visitor submits the public contact
form; the admin panel lists them in arrival order.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class Contact(Base, table=True):
    """Visitor contact request.

    Table: contacts
    """

    __tablename__ = "contacts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(description="Visitor name")
    email: str = Field(description="Reply address")
    package: str = Field(description="Package the visitor is interested in")
    message: Optional[str] = Field(default=None, description="Free-form message")

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"Contact(id={self.id}, email={self.email})"
