"""Folder hierarchy builder — infer a folder tree from path-like asset names.

Two naming conventions are understood::

    "全域管理/Toast/清除快取/Success.png"   → 全域管理 / Toast / 清除快取 + asset "Success"
    "Desktop_UserMgmt_List_Default@2x.png" → Desktop / UserMgmt / List + asset "Default@2x"

A real path separator wins; underscores split the name only when there is
no slash or backslash.  Nodes are created in first-occurrence order and
looked up through a ``path → node`` index, so each insertion costs one
dictionary probe per path part rather than a walk of the tree.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from asset_classifier.domain.entities import (
    Complexity,
    FolderMetadata,
    FolderRole,
    FolderStructure,
)
from asset_classifier.domain.ports.asset_source import NamedAsset
from asset_classifier.services.name_normalizer import strip_extension

logger = logging.getLogger(__name__)

_PATH_SEPARATOR_RE = re.compile(r"[/\\]")
_CONVENTION_SEPARATOR = "_"

ROOT_PATH = "/"

_ROLE_BY_DEPTH: tuple[FolderRole, ...] = (
    FolderRole.MODULE,
    FolderRole.PAGE,
    FolderRole.SUBPAGE,
)

# ── Keyword groups (matched case-insensitively against the folder name) ─────

# (keywords, state, description); first hit wins.
_STATE_KEYWORDS: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("success", "成功"), "success", "Success state notice"),
    (("error", "錯誤"), "error", "Error state notice"),
    (("loading", "載入"), "loading", "Loading state"),
)

# Depth 0: (keywords, category, description).
_MODULE_CATEGORIES: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("system", "系統"), "system-management", "System management module"),
    (("global", "全域"), "global-management", "Global management feature"),
)

# Depth 1: (keywords, component type, description).
_COMPONENT_TYPES: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("dialog", "對話"), "dialog", "Dialog component"),
    (("toast", "提示"), "toast", "Toast message component"),
    (("page", "頁面"), "page", "Page component"),
    (("drawer", "抽屜"), "drawer", "Drawer component"),
)


def asset_name(item: str | NamedAsset) -> str:
    """Return the filename carried by *item* (a string or a ``name``-bearing object)."""
    if isinstance(item, str):
        return item
    return str(item.name)


def split_path(file_name: str) -> list[str]:
    """Tokenize *file_name* into trimmed, non-empty path parts."""
    if _PATH_SEPARATOR_RE.search(file_name):
        raw_parts = _PATH_SEPARATOR_RE.split(file_name)
    else:
        raw_parts = file_name.split(_CONVENTION_SEPARATOR)
    return [part.strip() for part in raw_parts if part.strip()]


def asset_stem(part: str) -> str:
    """Strip the extension from the final path part."""
    return strip_extension(part) or part


def _first_keyword_hit(
    name_lower: str,
    groups: tuple[tuple[tuple[str, ...], str, str], ...],
) -> tuple[str, str] | None:
    for keywords, value, description in groups:
        if any(keyword in name_lower for keyword in keywords):
            return value, description
    return None


def folder_role(depth: int) -> FolderRole:
    """Role of a folder at zero-based *depth*: module, page, subpage, then asset."""
    if depth < len(_ROLE_BY_DEPTH):
        return _ROLE_BY_DEPTH[depth]
    return FolderRole.ASSET


def folder_metadata(name: str, depth: int) -> FolderMetadata:
    """Infer descriptive metadata for a folder from its name and depth."""
    name_lower = name.lower()
    metadata = FolderMetadata()

    state_hit = _first_keyword_hit(name_lower, _STATE_KEYWORDS)
    if state_hit:
        metadata.state, metadata.description = state_hit

    if depth == 0:
        metadata.complexity = Complexity.MODERATE
        category_hit = _first_keyword_hit(name_lower, _MODULE_CATEGORIES)
        if category_hit:
            metadata.category, metadata.description = category_hit
    elif depth == 1:
        metadata.complexity = Complexity.SIMPLE
        component_hit = _first_keyword_hit(name_lower, _COMPONENT_TYPES)
        if component_hit:
            metadata.component_type, metadata.description = component_hit
    elif depth == 2:
        metadata.complexity = Complexity.SIMPLE
        metadata.description = f"{metadata.state or 'state'} component"

    return metadata


class FolderHierarchyBuilder:
    """Build a :class:`FolderStructure` tree from a batch of asset names.

    Parameters
    ----------
    root_name:
        Name of the synthetic root node that anchors every top-level folder.
    """

    def __init__(self, root_name: str = "root") -> None:
        self._root_name = root_name

    def new_root(self) -> FolderStructure:
        return FolderStructure(
            name=self._root_name,
            role=FolderRole.MODULE,
            path=ROOT_PATH,
        )

    def build(self, items: Iterable[str | NamedAsset]) -> FolderStructure:
        """Return the root of a fresh tree holding every item of the batch."""
        root = self.new_root()
        index: dict[str, FolderStructure] = {ROOT_PATH: root}

        for item in items:
            file_name = asset_name(item)
            parts = split_path(file_name)
            if not parts:
                logger.debug("Skipping %r: no path parts after tokenizing", file_name)
                continue
            self._insert(parts, root, index)

        logger.debug("Built folder tree with %d node(s)", len(index))
        return root

    @staticmethod
    def _insert(
        parts: list[str],
        root: FolderStructure,
        index: dict[str, FolderStructure],
    ) -> None:
        current = root
        for depth, part in enumerate(parts[:-1]):
            path = f"{current.path}{part}/"
            node = index.get(path)
            if node is None:
                node = FolderStructure(
                    name=part,
                    role=folder_role(depth),
                    path=path,
                    metadata=folder_metadata(part, depth),
                )
                index[path] = node
                current.children.append(node)
            current = node

        current.assets.append(asset_stem(parts[-1]))
