"""
Deployment log entity.

Rows record each deployment of the site to an environment. The row itself is
the whole feature: nothing here talks to a server.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class DeploymentEnvironment(str, Enum):
    STAGING = "staging"
    PRODUCTION = "production"


class DeploymentStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_finished(self) -> bool:
        return self in (DeploymentStatus.COMPLETED, DeploymentStatus.FAILED)


class Deployment(Base, table=True):
    """One deployment attempt.

    Table: deployments
    """

    __tablename__ = "deployments"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    environment: str = Field(index=True, max_length=32)
    version: str
    status: str = Field(default=DeploymentStatus.PENDING.value, max_length=32)
    notes: Optional[str] = None
    deployed_by: Optional[str] = None

    started_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime)
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime)
