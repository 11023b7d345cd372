from __future__ import annotations

"""
Directory Tree Generator.

Builds the nested TreeNode model from relative path strings and prunes
blocked names from it at any depth. Key order is the order in which each
segment was first seen, never alphabetical.
"""

import logging
from typing import Iterable

from treemark.domain.constants import BUILTIN_PRUNE_ORDER, PATH_SEPARATOR
from treemark.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(paths: Iterable[str]) -> TreeNode:
    """
    Merge every path's segment sequence into a single tree.

    Segments are taken verbatim, so an empty path or a trailing slash
    produces an empty-string key.

    Args:
        paths: Relative '/'-separated paths.

    Returns:
        TreeNode: The root node of the hierarchy.
    """
    tree: TreeNode = {}
    for path in paths:
        node = tree
        for part in path.split(PATH_SEPARATOR):
            node = node.setdefault(part, {})
    return tree


def prune_tree(tree: TreeNode, blocked_name: str) -> None:
    """
    Remove every key equal to `blocked_name`, at any depth, in place.

    Removed subtrees are not visited. Pruning a tree without the name is a
    no-op.
    """
    if blocked_name in tree:
        del tree[blocked_name]

    for child in tree.values():
        if child:
            prune_tree(child, blocked_name)


def prune_builtin_names(tree: TreeNode) -> None:
    """Run one full pruning pass per built-in ignore name."""
    for name in BUILTIN_PRUNE_ORDER:
        prune_tree(tree, name)


def descend_root(tree: TreeNode, root_folder_name: str) -> TreeNode:
    """
    Return the node below the shared root folder.

    The root folder's children come first; any foreign top-level keys (paths
    not starting with the root name) follow as siblings, in insertion order.
    """
    if root_folder_name not in tree:
        return tree
    if len(tree) == 1:
        return tree[root_folder_name]

    foreign = [key for key in tree if key != root_folder_name]
    logger.debug(f"{len(foreign)} top-level entries do not share root '{root_folder_name}'.")

    merged: TreeNode = dict(tree[root_folder_name])
    for key in foreign:
        if key in merged:
            _merge_into(merged[key], tree[key])
        else:
            merged[key] = tree[key]
    return merged

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _merge_into(target: TreeNode, source: TreeNode) -> None:
    """Union `source` into `target`, keeping target's key order first."""
    for key, child in source.items():
        if key in target:
            _merge_into(target[key], child)
        else:
            target[key] = child
