"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer against
an in-memory SQLite database.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from memopyk.core.database import create_all, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture(scope="function")
def sample_faq_data() -> dict:
    """Sample FAQ data for testing."""
    return {
        "section": "general",
        "section_name_en": "General",
        "section_name_fr": "Général",
        "section_order": 0,
        "order": 0,
        "question_en": "How long does a film take?",
        "question_fr": "Combien de temps faut-il pour un film ?",
        "answer_en": "About two weeks.",
        "answer_fr": "Environ deux semaines.",
    }


@pytest.fixture(scope="function")
def sample_gallery_item_data() -> dict:
    """Sample gallery item data for testing."""
    return {
        "title_en": "Wedding in Provence",
        "title_fr": "Mariage en Provence",
        "description_en": "A summer wedding film.",
        "description_fr": "Un film de mariage estival.",
        "additional_info_en": ["80 photos", "10 videos"],
        "additional_info_fr": ["80 photos", "10 vidéos"],
        "price_en": "USD 325",
        "price_fr": "300 €",
        "image_url_en": "https://mock-cdn.test/provence-en.jpg",
        "image_url_fr": "https://mock-cdn.test/provence-fr.jpg",
        "video_url_en": "https://mock-cdn.test/provence-en.mp4",
        "alt_text_en": "Couple in a lavender field",
        "alt_text_fr": "Couple dans un champ de lavande",
    }
