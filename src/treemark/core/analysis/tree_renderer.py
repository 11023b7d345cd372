from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode models into ASCII box-drawing lines. Siblings are
emitted in their stored order so the output is stable for a given input.
"""

from typing import List

from treemark.domain.constants import (
    CONNECTOR_LAST,
    CONNECTOR_MIDDLE,
    INDENT_CLOSED,
    INDENT_OPEN,
)
from treemark.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: TreeNode, indent: str = "") -> List[str]:
    """
    Recursively transform a TreeNode into connector-prefixed lines.

    Each child line is emitted before the lines of its own subtree. The
    last sibling takes `└── ` and closes the indentation for its children;
    every other sibling takes `├── ` and keeps a `│` rail open.

    Args:
        tree: Node whose children are rendered.
        indent: Prefix accumulated from the ancestors.

    Returns:
        List[str]: Rendered lines for the subtree.
    """
    lines: List[str] = []
    keys = list(tree.keys())
    total = len(keys)

    for i, key in enumerate(keys):
        is_last = i == total - 1
        connector = CONNECTOR_LAST if is_last else CONNECTOR_MIDDLE
        lines.append(f"{indent}{connector}{key}")

        children = tree[key]
        if children:
            child_indent = indent + (INDENT_CLOSED if is_last else INDENT_OPEN)
            lines.extend(render_tree(children, child_indent))

    return lines


def render_structure_lines(root_folder_name: str, tree: TreeNode) -> List[str]:
    """Prefix the rendered tree with the root folder name as the first line."""
    return [root_folder_name] + render_tree(tree, "")
