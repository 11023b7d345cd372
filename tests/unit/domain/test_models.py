from __future__ import annotations

"""
Unit tests for Structure Domain Models.
"""

import dataclasses

import pytest

from treemark.domain.structure_models import (
    MissingInputError,
    PreconditionError,
    StructureError,
    StructureRequest,
    StructureResult,
)


def test_request_derives_root_name_from_first_path():
    request = StructureRequest.create(["proj/a", "proj/b"], ["dist"])

    assert request.root_folder_name == "proj"
    assert request.paths == ("proj/a", "proj/b")
    assert request.ignore_roots == frozenset({"dist"})


def test_request_explicit_root_name_wins():
    request = StructureRequest.create(["proj/a"], root_folder_name="Custom")
    assert request.root_folder_name == "Custom"


def test_request_without_paths():
    request = StructureRequest.create(None)
    assert request.paths == ()
    assert request.root_folder_name == ""


def test_request_snapshot_is_detached_from_source():
    source = ["proj/a"]
    request = StructureRequest.create(source)
    source.append("proj/b")
    assert request.paths == ("proj/a",)


def test_result_is_immutable():
    result = StructureResult(root_folder_name="p", lines=("p",), full_text="p", preview_text="p")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.full_text = "x"  # type: ignore[misc]
    assert result.line_count == 1


def test_error_hierarchy():
    assert issubclass(MissingInputError, StructureError)
    assert issubclass(PreconditionError, StructureError)
