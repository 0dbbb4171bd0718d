"""Unit tests for the contact repository."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from memopyk.core.database import utc_now_naive
from memopyk.core.database.entities.contacts import Contact
from memopyk.core.database.repositories.contacts import ContactRepository


@pytest.fixture
def repository(in_memory_session):
    return ContactRepository(in_memory_session)


class TestContactRepository:
    async def test_create_assigns_id(self, repository):
        contact = await repository.create(Contact(name="Ana", email="ana@example.com", package="essential"))

        assert contact.id is not None
        assert await repository.get_by_id(contact.id) is not None

    async def test_get_by_id_accepts_strings(self, repository):
        contact = await repository.create(Contact(name="Ana", email="ana@example.com", package="premium"))

        found = await repository.get_by_id(str(contact.id))
        assert found is not None
        assert found.email == "ana@example.com"

    async def test_list_is_oldest_first(self, repository):
        await repository.create(
            Contact(name="Late", email="late@example.com", package="essential", created_at=datetime(2026, 3, 2))
        )
        await repository.create(
            Contact(name="Early", email="early@example.com", package="essential", created_at=datetime(2026, 3, 1))
        )

        contacts = await repository.list()

        assert [c.name for c in contacts] == ["Early", "Late"]

    async def test_count_and_delete(self, repository):
        contact = await repository.create(Contact(name="Ana", email="ana@example.com", package="essential"))
        assert await repository.count() == 1

        assert await repository.delete(contact.id) is True
        assert await repository.delete(contact.id) is False
        assert await repository.count() == 0

    async def test_insert_stores_naive_utc_timestamp(self, repository):
        contact = await repository.create(Contact(name="Ana", email="ana@example.com", package="basic"))

        repository.session.expire_all()
        stored = await repository.get_by_id(contact.id)

        assert stored.created_at.tzinfo is None
        assert abs(stored.created_at - utc_now_naive()) < timedelta(minutes=1)
