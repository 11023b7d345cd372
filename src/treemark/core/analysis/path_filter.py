from __future__ import annotations

"""
Path Collector and Root Filter.

Decides which relative paths take part in a structure run by comparing
their first segment against the ignore set. The built-in noise names are
always part of that set, whatever the user selected.
"""

import logging
import math
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence

from treemark.domain.constants import (
    BUILTIN_IGNORED_NAMES,
    DEFAULT_PROGRESS_INTERVAL,
    PATH_SEPARATOR,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]

# -----------------------------------------------------------------------------
# IGNORE SET HELPERS
# -----------------------------------------------------------------------------

def first_segment(path: str) -> str:
    """Return the text before the first '/', or the whole path if it has none."""
    return path.split(PATH_SEPARATOR, 1)[0]


def effective_ignore_set(user_roots: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """
    Union the user-selected names with the built-in ignore names.

    Args:
        user_roots: Names chosen by the host, matched case-sensitively.

    Returns:
        FrozenSet[str]: The complete ignore set for a run.
    """
    return BUILTIN_IGNORED_NAMES | frozenset(user_roots or ())


def ignore_roots_from_groups(groups: Iterable[Optional[Iterable[str]]]) -> FrozenSet[str]:
    """
    Derive user ignore names from selected folder groups.

    Each group is the path list of one folder the user chose to exclude;
    every path contributes its first segment. Unset groups are skipped.

    Args:
        groups: One path iterable (or None) per excluded folder selection.

    Returns:
        FrozenSet[str]: The derived ignore names.
    """
    names = set()
    for group in groups:
        if not group:
            continue
        for path in group:
            names.add(first_segment(path))
    return frozenset(names)

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------

def progress_percent(index: int, total: int) -> int:
    """Percentage complete after processing item `index`, rounded half-up."""
    return int(math.floor((index + 1) / total * 100 + 0.5))


def filter_paths(
        paths: Sequence[str],
        ignore_roots: Optional[Iterable[str]] = None,
        on_progress: Optional[ProgressCallback] = None,
        interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> List[str]:
    """
    Keep the paths whose first segment is not ignored.

    Progress is reported on the first item, every `interval`-th item and the
    last item, bounding the number of updates a host has to paint.

    Args:
        paths: Relative paths in host order.
        ignore_roots: User ignore names; built-ins are always added.
        on_progress: Optional callback receiving an integer percentage.
        interval: Progress reporting cadence in items.

    Returns:
        List[str]: Retained paths, order preserved.
    """
    ignored = effective_ignore_set(ignore_roots)
    total = len(paths)
    kept: List[str] = []

    for index, path in enumerate(paths):
        if first_segment(path) not in ignored:
            kept.append(path)

        if on_progress and (index % interval == 0 or index == total - 1):
            on_progress(progress_percent(index, total))

    logger.debug(f"Root filter kept {len(kept)} of {total} paths.")
    return kept
