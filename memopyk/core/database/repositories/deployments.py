"""
Deployment log repository.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.deployments import Deployment
from .base import AsyncBaseRepository, QueryBuilder


class DeploymentRepository(AsyncBaseRepository[Deployment]):
    """Repository for deployment log rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Deployment)

    async def create(self, deployment: Deployment) -> Deployment:
        return await self._save(deployment)

    async def get_by_id(self, deployment_id: str | int) -> Optional[Deployment]:
        result = await self.session.execute(select(Deployment).where(Deployment.id == str(deployment_id)))
        return result.scalar_one_or_none()

    async def update(self, deployment: Deployment) -> Deployment:
        return await self._save(deployment)

    async def delete(self, deployment_id: str | int) -> bool:
        return await self._delete_by_id(deployment_id)

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Deployment]:
        """List deployments newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (``environment``, ``status``)
        """
        stmt = select(Deployment)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Deployment, filters)
        stmt = stmt.order_by(Deployment.started_at.desc())
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def history(self, environment: str, limit: int = 20) -> List[Deployment]:
        return await self.list(limit=limit, filters={"environment": environment})
