"""Structure optimizer — prune empty folders, then merge equivalent siblings.

Both passes mutate the tree in place and return the root they were given.
Running :func:`optimize` on an already optimized tree changes nothing.
"""

from __future__ import annotations

import logging

from asset_classifier.domain.entities import FolderStructure, StateType

logger = logging.getLogger(__name__)

SimilarityKey = tuple[str, str]


def similarity_key(node: FolderStructure) -> SimilarityKey:
    """``(role, state)``; a node with no detected state counts as ``default``.

    Two distinct folders that share a role and carry no state therefore
    share a key and are merged.
    """
    return node.role.value, node.metadata.state or StateType.DEFAULT.value


def prune(node: FolderStructure) -> FolderStructure:
    """Remove descendants with no children and no assets, bottom-up."""
    removed = _prune(node)
    if removed:
        logger.debug("Pruned %d empty folder(s) under %s", removed, node.path)
    return node


def _prune(node: FolderStructure) -> int:
    removed = 0
    kept: list[FolderStructure] = []
    for child in node.children:
        removed += _prune(child)
        if child.is_prunable:
            removed += 1
        else:
            kept.append(child)
    node.children = kept
    return removed


def merge_folders(group: list[FolderStructure]) -> FolderStructure:
    """Collapse *group* into one node carrying the first member's identity.

    Children and assets are concatenated member by member, in order.
    """
    first = group[0]
    merged = FolderStructure(
        name=first.name,
        role=first.role,
        path=first.path,
        metadata=first.metadata.copy(),
    )
    for folder in group:
        merged.children.extend(folder.children)
        merged.assets.extend(folder.assets)
    return merged


def merge_similar(node: FolderStructure) -> FolderStructure:
    """Merge same-key siblings at every level, parents before children."""
    merged = _merge(node)
    if merged:
        logger.debug("Merged %d duplicate sibling folder(s) under %s", merged, node.path)
    return node


def _merge(node: FolderStructure) -> int:
    groups: dict[SimilarityKey, list[FolderStructure]] = {}
    for child in node.children:
        groups.setdefault(similarity_key(child), []).append(child)

    merged_count = 0
    if len(groups) < len(node.children):
        # dicts keep insertion order, so each group sits where its first member was.
        children: list[FolderStructure] = []
        for group in groups.values():
            if len(group) > 1:
                merged_count += len(group) - 1
                children.append(merge_folders(group))
            else:
                children.append(group[0])
        node.children = children

    for child in node.children:
        merged_count += _merge(child)
    return merged_count


def optimize(node: FolderStructure) -> FolderStructure:
    """Prune, then merge."""
    return merge_similar(prune(node))
