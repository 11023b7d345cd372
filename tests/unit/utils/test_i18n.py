from __future__ import annotations

"""
Unit tests for Internationalization (i18n) consistency.

Ensures that all locale files share the same key structure and that
dot-notation resolution works as expected.
"""

import json
import os
from typing import Any, Dict, Set

from treemark.utils.i18n import I18n

_LOCALES_DIR = os.path.abspath(os.path.join(
    os.path.dirname(__file__), "..", "..", "..", "src", "treemark", "interface", "locales"
))


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def test_locales_key_parity() -> None:
    """Verify that EN and ES locales have identical keys."""
    with open(os.path.join(_LOCALES_DIR, "en.json"), "r", encoding="utf-8") as f:
        en = json.load(f)
    with open(os.path.join(_LOCALES_DIR, "es.json"), "r", encoding="utf-8") as f:
        es = json.load(f)

    assert _get_flat_keys(en) == _get_flat_keys(es)


def test_translation_with_interpolation() -> None:
    manager = I18n("en")

    assert manager.is_loaded
    assert manager.t("cli.status.progress", percent=40) == "Processing paths: 40%"


def test_missing_key_falls_back_to_key_or_default() -> None:
    manager = I18n("en")

    assert manager.t("cli.nope.missing") == "cli.nope.missing"
    assert manager.t("cli.nope.missing", default="Fallback") == "Fallback"


def test_unknown_locale_is_not_loaded() -> None:
    manager = I18n("xx")

    assert not manager.is_loaded
    assert manager.t("cli.status.saved") == "cli.status.saved"
