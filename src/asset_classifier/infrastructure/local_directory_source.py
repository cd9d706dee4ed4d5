"""Local directory adapter — implements the AssetNameSource port.

Lists exported asset files below a directory as POSIX relative paths.
File contents are never opened.
"""

from __future__ import annotations

import logging
from pathlib import Path

from asset_classifier.domain.exceptions import AssetSourceError

logger = logging.getLogger(__name__)


class LocalDirectoryAssetSource:
    """Concrete AssetNameSource backed by a directory on disk."""

    def __init__(self, root: Path | str, include_hidden: bool = False) -> None:
        self._root = Path(root)
        self._include_hidden = include_hidden

    def list_names(self) -> list[str]:
        """Return every file below the root, sorted, relative to it."""
        if not self._root.is_dir():
            raise AssetSourceError(f"Asset directory not found: '{self._root}'.")

        try:
            paths = sorted(p for p in self._root.rglob("*") if p.is_file())
        except OSError as exc:
            raise AssetSourceError(f"Cannot read asset directory '{self._root}': {exc}") from exc

        names = [
            rel.as_posix()
            for rel in (p.relative_to(self._root) for p in paths)
            if self._include_hidden or not _is_hidden(rel)
        ]
        logger.debug("Found %d asset file(s) under %s", len(names), self._root)
        return names


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") for part in rel.parts)
