"""
Gallery item repository.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.gallery_items import GalleryItem
from .base import AsyncBaseRepository, QueryBuilder


class GalleryItemRepository(AsyncBaseRepository[GalleryItem]):
    """Repository for gallery items."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GalleryItem)

    async def create(self, item: GalleryItem) -> GalleryItem:
        return await self._save(item)

    async def get_by_id(self, item_id: str | int) -> Optional[GalleryItem]:
        result = await self.session.execute(select(GalleryItem).where(GalleryItem.id == str(item_id)))
        return result.scalar_one_or_none()

    async def update(self, item: GalleryItem) -> GalleryItem:
        item.updated_at = utc_now_naive()
        return await self._save(item)

    async def delete(self, item_id: str | int) -> bool:
        return await self._delete_by_id(item_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[GalleryItem]:
        """List gallery items by display order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (``is_active``)

        Returns:
            Items ordered by ``order``
        """
        stmt = select(GalleryItem)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, GalleryItem, filters)
        stmt = stmt.order_by(GalleryItem.order, GalleryItem.created_at)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def reorder(self, item_orders: Iterable[Tuple[str, int]]) -> int:
        """Apply ``(id, order)`` pairs; returns how many rows were touched."""
        now = utc_now_naive()
        updated = 0
        for item_id, order in item_orders:
            result = await self.session.execute(
                sa_update(GalleryItem).where(GalleryItem.id == item_id).values(order=order, updated_at=now)
            )
            updated += result.rowcount or 0
        await self.session.commit()
        return updated
