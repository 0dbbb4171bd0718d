"""Unit tests for the legal content file store."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from memopyk.server.services.legal_content import LegalContentStore, get_legal_content_store


def test_load_missing_file(tmp_path: Path):
    assert LegalContentStore(tmp_path / "none.json").load() == {}


def test_save_creates_parent_and_round_trips(tmp_path: Path):
    store = LegalContentStore(tmp_path / "nested" / "legal.json")
    store.save({"cookiePolicy": {"titleFr": "Politique des cookies"}})

    assert store.load() == {"cookiePolicy": {"titleFr": "Politique des cookies"}}
    assert "Politique des cookies" in store.path.read_text(encoding="utf-8")


def test_save_replaces_whole_document(tmp_path: Path):
    store = LegalContentStore(tmp_path / "legal.json")
    store.save({"a": 1})
    store.save({"b": 2})
    assert store.load() == {"b": 2}
    assert [p.name for p in tmp_path.iterdir()] == ["legal.json"]


def test_failed_write_keeps_previous_document(tmp_path: Path):
    store = LegalContentStore(tmp_path / "legal.json")
    store.save({"a": 1})

    with patch("memopyk.server.services.legal_content.json.dump", side_effect=TypeError("not serializable")):
        with pytest.raises(TypeError):
            store.save({"b": object()})

    assert json.loads(store.path.read_text(encoding="utf-8")) == {"a": 1}
    assert [p.name for p in tmp_path.iterdir()] == ["legal.json"]


def test_dependency_uses_configured_path():
    from memopyk.server.core.config import settings

    assert get_legal_content_store().path == Path(settings.site.legal_content_path)
