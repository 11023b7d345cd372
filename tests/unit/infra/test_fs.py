from __future__ import annotations

"""
Unit tests for the filesystem helpers of the CLI host.
"""

import os

import pytest

from treemark.infra.fs import get_user_data_dir, normalize_path


def test_blank_path_uses_fallback(tmp_path):
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


def test_path_expands_user_and_variables(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("TREEMARK_TEST_DIR", "proj")

    assert normalize_path("~/$TREEMARK_TEST_DIR", "/unused") == str(tmp_path / "proj")


@pytest.mark.skipif(os.name == "nt", reason="POSIX home layout")
def test_user_data_dir_is_hidden_folder_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    path = get_user_data_dir()

    assert path == str(tmp_path / ".treemark")
    assert not os.path.exists(path)
