from __future__ import annotations

"""
Structure Pipeline Domain Models.

Defines the run context handed to the structure pipeline, the immutable
result it produces, and the precondition errors surfaced to hosts.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class StructureError(Exception):
    """Base class for caller-facing structure pipeline failures."""


class MissingInputError(StructureError):
    """Raised when the pipeline is invoked without any paths."""


class PreconditionError(StructureError):
    """Raised when document generation runs before a structure exists."""

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureRequest:
    """
    Immutable snapshot of the inputs for a single pipeline run.

    Attributes:
        paths: Relative '/'-separated paths, in host order.
        ignore_roots: User-selected top-level names to exclude.
        root_folder_name: Shared first segment, used for display only.
    """
    paths: Tuple[str, ...]
    ignore_roots: FrozenSet[str] = field(default_factory=frozenset)
    root_folder_name: str = ""

    @classmethod
    def create(
            cls,
            paths: Optional[Iterable[str]],
            ignore_roots: Optional[Iterable[str]] = None,
            root_folder_name: Optional[str] = None,
    ) -> "StructureRequest":
        """
        Build a request, deriving the root folder name from the first path.

        Args:
            paths: Raw path sequence (may be None or empty).
            ignore_roots: Optional user ignore names.
            root_folder_name: Explicit root name; defaults to the first
                              segment of the first path.

        Returns:
            StructureRequest: The frozen run context.
        """
        snapshot = tuple(paths or ())
        if root_folder_name is None:
            root_folder_name = snapshot[0].split("/")[0] if snapshot else ""
        return cls(
            paths=snapshot,
            ignore_roots=frozenset(ignore_roots or ()),
            root_folder_name=root_folder_name,
        )


@dataclass(frozen=True)
class StructureResult:
    """
    Output of a completed structure pipeline run.

    Attributes:
        root_folder_name: Name rendered as the first line.
        lines: Every rendered line, root name included.
        full_text: Lines joined with newlines (never truncated).
        preview_text: Line-capped rendering for display.
        total_paths: Number of paths received.
        kept_paths: Number of paths surviving root-level filtering.
        truncated: Whether the preview dropped lines.
    """
    root_folder_name: str
    lines: Tuple[str, ...]
    full_text: str
    preview_text: str
    total_paths: int = 0
    kept_paths: int = 0
    truncated: bool = False

    @property
    def line_count(self) -> int:
        return len(self.lines)
