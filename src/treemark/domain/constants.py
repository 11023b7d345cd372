from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: the built-in
ignore names, preview and progress cadences, scheduling delays, and the
Markdown document template.
"""

from typing import FrozenSet, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------

# Always excluded, at the root by filtering and at any depth by pruning.
# The tuple fixes the pruning order; the set is for membership tests.
BUILTIN_PRUNE_ORDER: Tuple[str, ...] = ("node_modules", ".git", ".DS_Store")
BUILTIN_IGNORED_NAMES: FrozenSet[str] = frozenset(BUILTIN_PRUNE_ORDER)

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

CONNECTOR_MIDDLE = "├── "
CONNECTOR_LAST = "└── "
INDENT_OPEN = "│   "
INDENT_CLOSED = "    "

DEFAULT_PREVIEW_LIMIT = 100
TRUNCATION_NOTICE = "... (truncated, total {total} lines)"

# -----------------------------------------------------------------------------
# SCHEDULING
# -----------------------------------------------------------------------------

DEFAULT_PROGRESS_INTERVAL = 100

# Seconds granted to the host before the bulk scan starts
DEFAULT_YIELD_DELAY = 0.05

# -----------------------------------------------------------------------------
# DOCUMENT OUTPUT
# -----------------------------------------------------------------------------

MARKDOWN_HEADING = "# Project File and Folder Structure"
MARKDOWN_INTRO = "Below is the structure of the project:"
MARKDOWN_FENCE = "```"
MARKDOWN_EXTENSION = ".md"
