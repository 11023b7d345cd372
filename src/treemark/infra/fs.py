from __future__ import annotations

"""
Filesystem locations used by the CLI host.

Resolves where treemark keeps its saved session and log files, and turns
user-typed directory arguments into absolute paths.
"""

import os
from typing import Optional

WINDOWS_DIR_NAME = "Treemark"
POSIX_DIR_NAME = ".treemark"


def get_user_data_dir() -> str:
    """
    Directory holding the saved session and the optional log file.

    `%LOCALAPPDATA%\\Treemark` on Windows (or under `%APPDATA%` when the
    former is unset), `~/.treemark` elsewhere. Nothing is created here;
    writers make the folder when they first need it.

    Returns:
        str: Absolute directory path.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, WINDOWS_DIR_NAME))
    return os.path.abspath(os.path.join(os.path.expanduser("~"), POSIX_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Absolute form of a directory argument.

    `~` and environment variables are expanded; a blank argument means
    `fallback`.
    """
    raw = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))
