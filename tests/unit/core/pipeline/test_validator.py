from __future__ import annotations

"""
Unit tests for Configuration Validation.

Verifies default injection, lenient coercion with warnings and strict-mode
failures.
"""

import pytest

from treemark.core.pipeline.validator import validate_config
from treemark.domain.config import get_default_config


def test_non_dict_config_returns_defaults_with_warning():
    cfg, warnings = validate_config(["not", "a", "dict"])
    assert cfg == get_default_config()
    assert len(warnings) == 1


def test_non_dict_config_raises_in_strict_mode():
    with pytest.raises(TypeError):
        validate_config("bad", strict=True)


def test_valid_config_passes_without_warnings():
    cfg, warnings = validate_config({
        "ignore_roots": ["dist", "build"],
        "preview_limit": 50,
        "write_markdown": False,
    })

    assert warnings == []
    assert cfg["ignore_roots"] == ["dist", "build"]
    assert cfg["preview_limit"] == 50
    assert cfg["write_markdown"] is False


def test_lenient_coercions():
    cfg, warnings = validate_config({
        "ignore_roots": "dist, coverage",
        "preview_limit": "20",
        "print_preview": "no",
        "yield_delay": "0.2",
    })

    assert cfg["ignore_roots"] == ["dist", "coverage"]
    assert cfg["preview_limit"] == 20
    assert cfg["print_preview"] is False
    assert cfg["yield_delay"] == pytest.approx(0.2)
    assert len(warnings) == 4


def test_out_of_range_numbers_fall_back():
    defaults = get_default_config()
    cfg, warnings = validate_config({"preview_limit": 0, "yield_delay": -1})

    assert cfg["preview_limit"] == defaults["preview_limit"]
    assert cfg["yield_delay"] == defaults["yield_delay"]
    assert len(warnings) == 2


def test_strict_mode_rejects_out_of_range():
    with pytest.raises(ValueError):
        validate_config({"progress_interval": 0}, strict=True)


def test_ignore_names_are_kept_verbatim():
    cfg, _ = validate_config({"ignore_roots": ["Dist", " spaced", "", 3]})
    assert cfg["ignore_roots"] == ["Dist", " spaced"]


def test_bool_is_not_accepted_as_count():
    cfg, warnings = validate_config({"preview_limit": True})
    assert cfg["preview_limit"] == get_default_config()["preview_limit"]
    assert warnings


def test_strict_mode_names_the_offending_field():
    with pytest.raises(TypeError, match="ignore_roots"):
        validate_config({"ignore_roots": ["dist", 3]}, strict=True)
