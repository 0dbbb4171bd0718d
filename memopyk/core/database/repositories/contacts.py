"""
Contact repository.

Contacts are append-only in practice: the public form creates them and the
admin panel reads them back in arrival order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.contacts import Contact
from .base import AsyncBaseRepository, QueryBuilder


class ContactRepository(AsyncBaseRepository[Contact]):
    """Repository for contact requests."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Contact)

    async def create(self, contact: Contact) -> Contact:
        return await self._save(contact)

    async def get_by_id(self, contact_id: str | int) -> Optional[Contact]:
        result = await self.session.execute(select(Contact).where(Contact.id == int(contact_id)))
        return result.scalar_one_or_none()

    async def update(self, contact: Contact) -> Contact:
        return await self._save(contact)

    async def delete(self, contact_id: str | int) -> bool:
        return await self._delete_by_id(contact_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Contact]:
        """List contacts oldest first."""
        stmt = select(Contact)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Contact, filters)
        stmt = stmt.order_by(Contact.created_at, Contact.id)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
