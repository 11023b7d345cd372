from __future__ import annotations

"""
Path Collection Service.

Host-side helpers that produce the relative path lists consumed by the
structure pipeline: either by walking a directory on disk (mirroring what a
browser folder picker reports) or by reading a newline-separated list.
"""

import logging
import os
from typing import Iterable, Iterator, List, TextIO

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_relative_paths(input_path: str) -> Iterator[str]:
    """
    Walk a directory and yield `<folder name>/<relative path>` for each file.

    Paths use '/' on every platform. Directories and files are visited in
    sorted order so repeated scans of an unchanged folder yield the same
    sequence. Empty directories produce no entries, as with a folder picker.

    Args:
        input_path: Directory selected by the user.

    Yields:
        str: One relative path per file, prefixed by the folder's own name.
    """
    base = os.path.abspath(input_path)
    root_name = os.path.basename(base.rstrip(os.sep)) or base

    for root, dirs, files in os.walk(base):
        dirs.sort()
        files.sort()

        rel_root = os.path.relpath(root, base)
        parts = [root_name]
        if rel_root != ".":
            parts.extend(rel_root.split(os.sep))

        for file_name in files:
            yield "/".join(parts + [file_name])


def collect_relative_paths(input_path: str) -> List[str]:
    """Materialize `yield_relative_paths` into a list."""
    paths = list(yield_relative_paths(input_path))
    logger.debug(f"Collected {len(paths)} paths under '{input_path}'.")
    return paths


def read_path_list(stream: TextIO) -> List[str]:
    """
    Read one path per line, dropping line terminators and blank lines.

    Other whitespace is kept: path strings are opaque.
    """
    return _non_blank(line.rstrip("\r\n") for line in stream)


def _non_blank(lines: Iterable[str]) -> List[str]:
    return [line for line in lines if line.strip()]
