"""
SEO settings repository.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.seo_settings import SeoSetting
from .base import AsyncBaseRepository, QueryBuilder


class SeoSettingRepository(AsyncBaseRepository[SeoSetting]):
    """Repository for per-page SEO settings."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SeoSetting)

    async def create(self, setting: SeoSetting) -> SeoSetting:
        return await self._save(setting)

    async def get_by_id(self, setting_id: str | int) -> Optional[SeoSetting]:
        result = await self.session.execute(select(SeoSetting).where(SeoSetting.id == str(setting_id)))
        return result.scalar_one_or_none()

    async def get_by_page(self, page: str) -> Optional[SeoSetting]:
        stmt = select(SeoSetting).where(SeoSetting.page == page).order_by(SeoSetting.created_at).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, setting: SeoSetting) -> SeoSetting:
        setting.updated_at = utc_now_naive()
        return await self._save(setting)

    async def delete(self, setting_id: str | int) -> bool:
        return await self._delete_by_id(setting_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[SeoSetting]:
        """List settings ordered by page key."""
        stmt = select(SeoSetting)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, SeoSetting, filters)
        stmt = stmt.order_by(SeoSetting.page, SeoSetting.created_at)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert_by_page(self, data: Dict[str, Any]) -> Tuple[SeoSetting, bool]:
        """Create or update the setting of ``data["page"]``.

        Args:
            data: Column values keyed by attribute name; must contain ``page``

        Returns:
            The stored setting and whether it was newly created
        """
        existing = await self.get_by_page(data["page"])
        if existing is None:
            return await self.create(SeoSetting(**data)), True

        for key, value in data.items():
            if key in ("id", "created_at", "updated_at"):
                continue
            setattr(existing, key, value)
        return await self.update(existing), False
