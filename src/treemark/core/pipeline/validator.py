from __future__ import annotations

"""
Configuration Validation Service.

Sits between untrusted configuration sources (the saved session JSON, CLI
overrides) and the structure pipeline. Every known field goes through a
coercer for its type; a value that cannot be used is replaced by the
field's default and reported as a warning, or raised in strict mode.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from treemark.domain.config import get_default_config

logger = logging.getLogger(__name__)

# (value to store, or None for the default; note describing a conversion)
_Coerced = Tuple[Any, Optional[str]]

_TRUE_WORDS = frozenset({"true", "1", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "n", "off"})

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Return a fully populated, correctly typed copy of `config`.

    Missing keys take their default. In lenient mode, loose values such as
    numeric strings, 0/1 flags, yes/no words and comma-separated names are
    converted, each conversion noted in the warnings.

    Args:
        config: Raw configuration, normally a dict.
        strict: Raise instead of converting or falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Clean config and warnings.

    Raises:
        TypeError: In strict mode, for a value of the wrong type.
        ValueError: In strict mode, for a number out of range.
    """
    defaults = get_default_config()
    warnings: List[str] = []

    if not isinstance(config, dict):
        msg = f"Config must be a dict, got {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        logger.warning(msg)
        warnings.append(f"{msg} Defaults used.")
        return defaults, warnings

    clean: Dict[str, Any] = {**defaults, **config}

    for field, coerce in _COERCERS.items():
        raw = clean.get(field)
        if raw is None:
            clean[field] = defaults[field]
            continue
        try:
            value, note = coerce(raw, strict)
        except (TypeError, ValueError) as e:
            if strict:
                raise type(e)(f"Field '{field}': {e}") from e
            warnings.append(f"Field '{field}': {e} Default {defaults[field]!r} used.")
            clean[field] = defaults[field]
            continue

        if note:
            warnings.append(f"Field '{field}': {note}")
        clean[field] = defaults[field] if value is None else value

    return clean, warnings

# -----------------------------------------------------------------------------
# COERCERS
# -----------------------------------------------------------------------------

def _type_name(value: Any) -> str:
    return type(value).__name__


def _to_text(raw: Any, strict: bool) -> _Coerced:
    """Blank text falls back to the default without a warning."""
    if not isinstance(raw, str):
        raise TypeError(f"expected text, got {_type_name(raw)}.")
    return raw.strip() or None, None


def _to_flag(raw: Any, strict: bool) -> _Coerced:
    if isinstance(raw, bool):
        return raw, None
    if not strict:
        if isinstance(raw, (int, float)) and raw in (0, 1):
            return bool(raw), f"number {raw} read as {bool(raw)}."
        if isinstance(raw, str):
            word = raw.strip().lower()
            if word in _TRUE_WORDS:
                return True, f"'{raw}' read as True."
            if word in _FALSE_WORDS:
                return False, f"'{raw}' read as False."
    raise TypeError(f"expected a boolean, got {_type_name(raw)}.")


def _to_count(raw: Any, strict: bool) -> _Coerced:
    """Counts such as the preview cap: integers of at least 1."""
    note = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        number = raw
    elif isinstance(raw, str) and not strict:
        number = int(raw.strip())
        note = f"'{raw}' read as {number}."
    else:
        raise TypeError(f"expected an integer, got {_type_name(raw)}.")

    if number < 1:
        raise ValueError(f"must be at least 1, got {number}.")
    return number, note


def _to_seconds(raw: Any, strict: bool) -> _Coerced:
    """The pre-scan yield delay: a non-negative number of seconds."""
    note = None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        seconds = float(raw)
    elif isinstance(raw, str) and not strict:
        seconds = float(raw.strip())
        note = f"'{raw}' read as {seconds}."
    else:
        raise TypeError(f"expected seconds as a number, got {_type_name(raw)}.")

    if seconds < 0:
        raise ValueError(f"must not be negative, got {seconds}.")
    return seconds, note


def _to_names(raw: Any, strict: bool) -> _Coerced:
    """
    Ignore names, kept verbatim.

    Names are matched exactly, so items are neither trimmed nor case
    folded. Empty strings are dropped silently, non-text items with a note.
    """
    if isinstance(raw, str) and not strict:
        names = [part.strip() for part in raw.split(",") if part.strip()]
        return names, "comma-separated text split into a list."

    if not isinstance(raw, (list, tuple, set, frozenset)):
        raise TypeError(f"expected a list of names, got {_type_name(raw)}.")

    names = [item for item in raw if isinstance(item, str) and item]
    dropped = sum(1 for item in raw if not isinstance(item, str))
    if dropped and strict:
        raise TypeError(f"{dropped} item(s) are not text.")
    note = f"{dropped} non-text item(s) dropped." if dropped else None
    return names, note


_COERCERS: Dict[str, Callable[[Any, bool], _Coerced]] = {
    "input_path": _to_text,
    "output_dir": _to_text,
    "root_folder_name": _to_text,
    "log_level": _to_text,
    "write_markdown": _to_flag,
    "print_preview": _to_flag,
    "preview_limit": _to_count,
    "progress_interval": _to_count,
    "yield_delay": _to_seconds,
    "ignore_roots": _to_names,
}
