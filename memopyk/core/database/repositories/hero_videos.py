"""
Hero video repository.

Besides CRUD this module owns the rotation order: new videos are appended
after the last one and the admin panel can rewrite the whole order at once.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.hero_videos import HeroVideo
from .base import AsyncBaseRepository, QueryBuilder


class HeroVideoRepository(AsyncBaseRepository[HeroVideo]):
    """Repository for hero videos."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HeroVideo)

    async def create(self, video: HeroVideo) -> HeroVideo:
        return await self._save(video)

    async def get_by_id(self, video_id: str | int) -> Optional[HeroVideo]:
        result = await self.session.execute(select(HeroVideo).where(HeroVideo.id == int(video_id)))
        return result.scalar_one_or_none()

    async def update(self, video: HeroVideo) -> HeroVideo:
        video.updated_at = utc_now_naive()
        return await self._save(video)

    async def delete(self, video_id: str | int) -> bool:
        return await self._delete_by_id(video_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[HeroVideo]:
        """List videos in rotation order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (``is_active``)

        Returns:
            Videos ordered by ``(order_index, id)``
        """
        stmt = select(HeroVideo)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, HeroVideo, filters)
        stmt = stmt.order_by(HeroVideo.order_index, HeroVideo.id)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def next_order_index(self) -> int:
        """Order index that places a new video after every existing one."""
        result = await self.session.execute(select(func.max(HeroVideo.order_index)))
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def reorder(self, video_ids: Sequence[int]) -> Optional[List[HeroVideo]]:
        """Give each listed video the order index of its list position.

        Args:
            video_ids: Video ids in their new rotation order

        Returns:
            The full list in its new order, or None when any id is unknown
            (in which case nothing is changed)
        """
        result = await self.session.execute(select(HeroVideo).where(HeroVideo.id.in_(list(video_ids))))
        found = {video.id: video for video in result.scalars().all()}
        if len(found) != len(set(video_ids)):
            return None

        now = utc_now_naive()
        for position, video_id in enumerate(video_ids):
            video = found[video_id]
            video.order_index = position
            video.updated_at = now
            self.session.add(video)
        await self.session.commit()
        return await self.list()
