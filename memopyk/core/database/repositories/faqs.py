"""
FAQ repository.

Sections have no table of their own: their key, display names and order are
copied onto every FAQ in the section. Section-level operations therefore
update every matching row at once.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.faqs import Faq
from .base import AsyncBaseRepository, QueryBuilder


class FaqRepository(AsyncBaseRepository[Faq]):
    """Repository for FAQs and their sections."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Faq)

    async def create(self, faq: Faq) -> Faq:
        return await self._save(faq)

    async def get_by_id(self, faq_id: str | int) -> Optional[Faq]:
        result = await self.session.execute(select(Faq).where(Faq.id == str(faq_id)))
        return result.scalar_one_or_none()

    async def update(self, faq: Faq) -> Faq:
        return await self._save(faq)

    async def delete(self, faq_id: str | int) -> bool:
        return await self._delete_by_id(faq_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Faq]:
        """List FAQs in display order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (``is_active``, ``section``)

        Returns:
            FAQs ordered by ``(section_order, order)``
        """
        stmt = select(Faq)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Faq, filters)
        stmt = stmt.order_by(Faq.section_order, Faq.order, Faq.created_at)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_sections(self) -> int:
        """Number of distinct sections."""
        result = await self.session.execute(select(func.count(func.distinct(Faq.section))))
        return int(result.scalar_one())

    async def get_section_template(self, section: str) -> Optional[Faq]:
        """Any FAQ of ``section``, used to read the section's names and order."""
        stmt = select(Faq).where(Faq.section == section).order_by(Faq.order).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def reorder_sections(self, section_orders: Iterable[Tuple[str, int]]) -> int:
        """Set ``section_order`` on every FAQ of each listed section.

        Returns:
            Number of FAQ rows updated
        """
        updated = 0
        for section, section_order in section_orders:
            result = await self.session.execute(
                sa_update(Faq).where(Faq.section == section).values(section_order=section_order)
            )
            updated += result.rowcount or 0
        await self.session.commit()
        return updated

    async def reorder(self, faq_orders: Iterable[Tuple[str, int]]) -> int:
        """Apply ``(id, order)`` pairs within sections."""
        updated = 0
        for faq_id, order in faq_orders:
            result = await self.session.execute(sa_update(Faq).where(Faq.id == faq_id).values(order=order))
            updated += result.rowcount or 0
        await self.session.commit()
        return updated

    async def move(self, faq: Faq, template: Faq, new_order: int) -> Faq:
        """Move ``faq`` into the section described by ``template``.

        The FAQ adopts the section key, both display names and the section
        order of ``template`` and takes ``new_order`` inside it.
        """
        faq.section = template.section
        faq.section_name_en = template.section_name_en
        faq.section_name_fr = template.section_name_fr
        faq.section_order = template.section_order
        faq.order = new_order
        return await self._save(faq)

    async def update_section_names(self, section: str, name_en: str, name_fr: Optional[str] = None) -> int:
        """Rename a section on all of its FAQs; the French name is kept when not given."""
        values: Dict[str, Any] = {"section_name_en": name_en}
        if name_fr is not None:
            values["section_name_fr"] = name_fr
        result = await self.session.execute(sa_update(Faq).where(Faq.section == section).values(**values))
        await self.session.commit()
        return result.rowcount or 0
