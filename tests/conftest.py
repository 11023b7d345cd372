from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory so tests never touch real settings.
3. Shared path fixtures used across unit and integration tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data_dir(tmp_path, monkeypatch):
    """Redirect persisted configuration into a per-test temporary folder."""
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    monkeypatch.setattr("treemark.domain.config.get_user_data_dir", lambda: str(data_dir))
    return data_dir


@pytest.fixture
def proj_paths() -> List[str]:
    """
    Return the reference project path list.

    Includes a root-level node_modules entry that the pipeline must drop.
    """
    return [
        "proj/src/index.ts",
        "proj/src/util.ts",
        "proj/README.md",
        "proj/node_modules/pkg/index.js",
    ]


@pytest.fixture
def proj_expected_text() -> str:
    """Return the expected rendering of `proj_paths`."""
    return "\n".join([
        "proj",
        "├── src",
        "│   ├── index.ts",
        "│   └── util.ts",
        "└── README.md",
    ])
