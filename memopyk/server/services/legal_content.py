"""
Legal content document store.

The bilingual legal pages (legal notice, privacy, cookies, terms) are edited
as one JSON document in the admin panel and kept in a file rather than the
database.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from memopyk.server.core.config import settings

logger = logging.getLogger(__name__)


class LegalContentStore:
    """Reads and atomically replaces the legal content JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any]:
        """The stored document, or ``{}`` when nothing has been saved yet."""
        if not self.path.is_file():
            return {}
        with self.path.open(encoding="utf-8") as fh:
            return json.load(fh)

    def save(self, content: dict[str, Any]) -> None:
        """Write ``content`` pretty-printed, replacing the file in one step."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(content, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info(f"Legal content saved to {self.path}")


def get_legal_content_store() -> LegalContentStore:
    return LegalContentStore(settings.site.legal_content_path)
