"""Plain-text views of a folder tree for rendering collaborators."""

from __future__ import annotations

from typing import Iterator

from asset_classifier.domain.entities import FolderStructure

_INDENT = "  "


def iter_nodes(
    node: FolderStructure, depth: int = 0
) -> Iterator[tuple[int, FolderStructure]]:
    """Yield ``(depth, node)`` pairs in depth-first pre-order."""
    yield depth, node
    for child in node.children:
        yield from iter_nodes(child, depth + 1)


def collect_assets(node: FolderStructure) -> list[str]:
    """Every asset stem in the tree, depth-first, each node's own assets first."""
    return [asset for _, current in iter_nodes(node) for asset in current.assets]


def render_tree(node: FolderStructure) -> str:
    """Render the tree as an indented listing.

    Folders print as ``name/``; assets as ``- stem`` one level deeper.
    Folders with nothing below them are skipped.
    """
    lines: list[str] = []
    _render(node, 0, lines)
    return "\n".join(lines)


def _render(node: FolderStructure, depth: int, lines: list[str]) -> None:
    if node.is_prunable:
        return
    indent = _INDENT * depth
    lines.append(f"{indent}{node.name}/")
    for child in node.children:
        _render(child, depth + 1, lines)
    for asset in node.assets:
        lines.append(f"{indent}{_INDENT}- {asset}")
