"""
Per-item temp files for gallery media.

Every gallery item owns up to four files in the media temp directory:

- ``<id>_thumbnail.jpg``: frame grabbed from the item's video
- ``<id>_resized.jpg``: external image letterboxed to a target size
- ``<id>_original_url_en.txt`` / ``<id>_original_url_fr.txt``: the external
  image URL an item had before processing, kept for before/after comparison
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

THUMBNAIL_SUFFIX = "_thumbnail.jpg"
RESIZED_SUFFIX = "_resized.jpg"
LANGUAGES = ("en", "fr")


@dataclass(frozen=True)
class TempFileInfo:
    path: str
    exists: bool
    size: Optional[int] = None
    modified_at: Optional[datetime] = None


class GalleryTempStore:
    """File layout and cleanup for generated gallery media."""

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir)

    def ensure_dir(self) -> Path:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        return self.base_dir

    def thumbnail_path(self, item_id: str) -> Path:
        return self.base_dir / f"{item_id}{THUMBNAIL_SUFFIX}"

    def resized_path(self, item_id: str) -> Path:
        return self.base_dir / f"{item_id}{RESIZED_SUFFIX}"

    def original_url_path(self, item_id: str, lang: str) -> Path:
        return self.base_dir / f"{item_id}_original_url_{lang}.txt"

    def record_original_url(self, item_id: str, lang: str, url: str) -> Path:
        """Remember the external image URL ``item_id`` had for ``lang``."""
        self.ensure_dir()
        path = self.original_url_path(item_id, lang)
        path.write_text(url, encoding="utf-8")
        logger.debug(f"Recorded original {lang} image URL for {item_id}")
        return path

    def read_original_url(self, item_id: str) -> Optional[str]:
        """The recorded English URL, else the French one, else None."""
        for lang in LANGUAGES:
            path = self.original_url_path(item_id, lang)
            if path.is_file():
                url = path.read_text(encoding="utf-8").strip()
                if url:
                    return url
        return None

    def _remove(self, paths: list[Path]) -> int:
        removed = 0
        for path in paths:
            try:
                path.unlink()
                removed += 1
            except FileNotFoundError:
                continue
        return removed

    def cleanup_generated(self, item_id: str) -> int:
        """Remove the thumbnail and resized image of an item, keeping URL records."""
        removed = self._remove([self.thumbnail_path(item_id), self.resized_path(item_id)])
        if removed:
            logger.info(f"Removed {removed} generated file(s) for {item_id}")
        return removed

    def cleanup_item(self, item_id: str) -> int:
        """Remove every temp file belonging to an item."""
        removed = self.cleanup_generated(item_id)
        removed += self._remove([self.original_url_path(item_id, lang) for lang in LANGUAGES])
        return removed

    def cleanup_all(self) -> int:
        """Remove every generated thumbnail and resized image in the directory."""
        if not self.base_dir.is_dir():
            return 0
        paths = [
            path
            for path in self.base_dir.iterdir()
            if path.is_file() and path.name.endswith((THUMBNAIL_SUFFIX, RESIZED_SUFFIX))
        ]
        removed = self._remove(paths)
        logger.info(f"Removed {removed} generated gallery file(s) from {self.base_dir}")
        return removed

    def file_info(self, path: Path) -> TempFileInfo:
        if not path.is_file():
            return TempFileInfo(path=str(path), exists=False)
        stat = path.stat()
        return TempFileInfo(
            path=str(path),
            exists=True,
            size=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime),
        )
