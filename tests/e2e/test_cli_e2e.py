from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stream output and the generated document.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "treemark" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with an isolated home directory.

    Args:
        args: Command line arguments (excluding interpreter and script).
        home: Directory used as HOME/LOCALAPPDATA for persisted settings.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Structure:
    /demo
      /.git
        HEAD
      /lib
        core.py
      main.py
    """
    root = tmp_path / "demo"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref", encoding="utf-8")
    (root / "lib").mkdir()
    (root / "lib" / "core.py").write_text("", encoding="utf-8")
    (root / "main.py").write_text("", encoding="utf-8")
    return root


def test_cli_happy_path_execution(tmp_path: Path, sample_project: Path) -> None:
    output_dir = tmp_path / "output"

    result = run_cli(["-i", str(sample_project), "-o", str(output_dir)], tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    document = (output_dir / "demo.md").read_text(encoding="utf-8")
    assert "demo\n├── main.py\n└── lib\n    └── core.py" in document
    assert ".git" not in document
    assert "100%" in result.stderr


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "non_existent_folder")], tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr
