from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive type definition used to represent a project
hierarchy built from relative path strings.
"""

from typing import Dict

# A node maps each child segment to its own node. An empty mapping is a leaf;
# files and empty directories are not distinguished.
TreeNode = Dict[str, "TreeNode"]
