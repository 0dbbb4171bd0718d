"""
Deployment log I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel


class DeploymentCreate(CamelModel):
    version: str = Field(min_length=1, max_length=100)
    notes: Optional[str] = None


class DeploymentStatusUpdate(CamelModel):
    status: Literal["in_progress", "completed", "failed"]
    notes: Optional[str] = None


class DeploymentRead(CamelModel):
    id: str
    environment: str
    version: str
    status: str
    notes: Optional[str] = None
    deployed_by: Optional[str] = None
    started_at: datetime
    completed_at: Optional[datetime] = None
