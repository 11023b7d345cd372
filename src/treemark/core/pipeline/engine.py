from __future__ import annotations

"""
Core structure pipeline.

This module coordinates a complete structure run:
1. Rejects runs without input.
2. Filters paths whose first segment is ignored, reporting progress.
3. Builds the tree and prunes built-in names at every depth.
4. Renders the lines, the full text and the line-capped preview.

The asynchronous entry point yields to the host event loop exactly once
before the scan; everything after that runs synchronously to completion.
"""

import asyncio
import logging
from typing import Any, Iterable, List, Optional, Sequence

from treemark.core.analysis.path_filter import ProgressCallback, filter_paths
from treemark.core.analysis.tree_generator import (
    build_tree,
    descend_root,
    prune_builtin_names,
)
from treemark.core.analysis.tree_renderer import render_structure_lines
from treemark.domain.constants import (
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_PROGRESS_INTERVAL,
    DEFAULT_YIELD_DELAY,
    PATH_SEPARATOR,
    TRUNCATION_NOTICE,
)
from treemark.domain.structure_models import (
    MissingInputError,
    StructureRequest,
    StructureResult,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SYNCHRONOUS PIPELINE
# -----------------------------------------------------------------------------

def filter_and_build_structure(
        paths: Optional[Sequence[str]],
        user_ignore_roots: Optional[Iterable[str]],
        root_folder_name: str,
        on_progress: Optional[ProgressCallback] = None,
        *,
        preview_limit: int = DEFAULT_PREVIEW_LIMIT,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> StructureResult:
    """
    Run filter, build, prune and render over one path snapshot.

    Args:
        paths: Relative paths sharing `root_folder_name` as first segment.
        user_ignore_roots: Top-level names selected for exclusion.
        root_folder_name: Name rendered as the first line.
        on_progress: Optional percentage callback for the filtering scan.
        preview_limit: Maximum number of lines kept in the preview.
        progress_interval: Progress reporting cadence in items.

    Returns:
        StructureResult: Full text, preview and run counters.

    Raises:
        MissingInputError: If `paths` is None or empty.
    """
    if not paths:
        raise MissingInputError("No project paths were provided.")

    logger.info(f"Building structure for '{root_folder_name}' from {len(paths)} paths.")

    kept = filter_paths(
        paths,
        user_ignore_roots,
        on_progress=on_progress,
        interval=progress_interval,
    )
    _warn_empty_segments(kept)

    tree = build_tree(kept)
    prune_builtin_names(tree)
    root = descend_root(tree, root_folder_name)

    lines = render_structure_lines(root_folder_name, root)
    full_text = "\n".join(lines)
    preview_text = build_preview(lines, preview_limit)

    logger.info(f"Structure rendered: {len(lines)} lines ({len(kept)} paths kept).")
    return StructureResult(
        root_folder_name=root_folder_name,
        lines=tuple(lines),
        full_text=full_text,
        preview_text=preview_text,
        total_paths=len(paths),
        kept_paths=len(kept),
        truncated=len(lines) > preview_limit,
    )


def build_preview(lines: Sequence[str], limit: int = DEFAULT_PREVIEW_LIMIT) -> str:
    """
    Cap the rendered lines for display.

    Args:
        lines: Full rendered line sequence.
        limit: Number of lines to keep.

    Returns:
        str: The first `limit` lines, plus a truncation notice when lines
             were dropped.
    """
    preview = "\n".join(lines[:limit])
    if len(lines) > limit:
        preview += "\n" + TRUNCATION_NOTICE.format(total=len(lines))
    return preview


# -----------------------------------------------------------------------------
# ASYNC BOUNDARY
# -----------------------------------------------------------------------------

async def generate_structure(
        request: StructureRequest,
        on_progress: Optional[ProgressCallback] = None,
        *,
        yield_delay: float = DEFAULT_YIELD_DELAY,
        preview_limit: int = DEFAULT_PREVIEW_LIMIT,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> StructureResult:
    """
    Yield to the event loop once, then run the pipeline to completion.

    The single suspension lets a host render its busy state before the
    non-preemptible scan. Runs are neither cancellable nor de-duplicated;
    callers must serialize them.

    Raises:
        MissingInputError: If the request has no paths. Raised before the
                           yield so no work is scheduled.
    """
    if not request.paths:
        raise MissingInputError("No project paths were provided.")

    if on_progress:
        on_progress(0)
    await asyncio.sleep(yield_delay)

    return filter_and_build_structure(
        request.paths,
        request.ignore_roots,
        request.root_folder_name,
        on_progress,
        preview_limit=preview_limit,
        progress_interval=progress_interval,
    )


def run_structure(
        request: StructureRequest,
        on_progress: Optional[ProgressCallback] = None,
        **options: Any,
) -> StructureResult:
    """Blocking facade over `generate_structure` for hosts without a loop."""
    return asyncio.run(generate_structure(request, on_progress, **options))


# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

def _warn_empty_segments(paths: List[str]) -> None:
    """Flag paths that will produce empty-string keys."""
    suspicious = sum(1 for p in paths if "" in p.split(PATH_SEPARATOR))
    if suspicious:
        logger.warning(
            f"{suspicious} path(s) contain empty segments (e.g. a trailing '/'); "
            f"they are kept as empty-named entries."
        )
