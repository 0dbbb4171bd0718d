"""
Centralized database layer for the MEMOPYK backend.

This package provides a unified location for all database entities and
repositories, one module per table.

Structure:
- entities/: SQLModel table models
- repositories/: Data access layer on top of the entities
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create_all)
"""

from .base import Base, utc_now_naive
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
    "utc_now_naive",
]
