from __future__ import annotations

"""
Session configuration of the CLI host.

A flat dict of settings with defaults, saved after each successful run as
`last_session` in `<user data dir>/config.json` and merged back over the
defaults on the next start. A missing or unreadable file means defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from treemark.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_PROGRESS_INTERVAL,
    DEFAULT_YIELD_DELAY,
)
from treemark.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# Describe one run only: never written to, nor restored from, the saved session
RUN_SCOPED_KEYS = ("root_folder_name", "ignore_roots")


def get_config_file() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Fresh dict of default settings.

    Input and output directories default to the current working directory.

    Returns:
        Dict[str, Any]: One entry per known setting.
    """
    cwd = os.getcwd()
    return {
        # Where paths come from and where <root>.md goes
        "input_path": cwd,
        "output_dir": cwd,
        "root_folder_name": "",

        # User ignore names (first segments)
        "ignore_roots": [],

        # Pipeline tuning
        "preview_limit": DEFAULT_PREVIEW_LIMIT,
        "progress_interval": DEFAULT_PROGRESS_INTERVAL,
        "yield_delay": DEFAULT_YIELD_DELAY,

        # Output switches
        "write_markdown": True,
        "print_preview": True,

        "log_level": "INFO",
    }

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def load_config() -> Dict[str, Any]:
    """
    Defaults overlaid with the saved `last_session`.

    Run-scoped keys found in an older file are ignored. Values are not
    type-checked here; the validator does that.

    Returns:
        Dict[str, Any]: The merged settings, or plain defaults when the
                        file is absent or unreadable.
    """
    settings = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug(f"No saved session at {config_file}.")
        return settings

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read saved session {config_file}: {e}. Defaults used.")
        return settings

    session = stored.get("last_session") if isinstance(stored, dict) else None
    if not isinstance(session, dict):
        logger.warning(f"Saved session {config_file} has no usable 'last_session'. Defaults used.")
        return settings

    settings.update({k: v for k, v in session.items() if k not in RUN_SCOPED_KEYS})
    return settings


def save_config(config: Dict[str, Any]) -> None:
    """
    Store `config` as the last session.

    Keys in `RUN_SCOPED_KEYS` are left out: the root folder name and the
    ignore names belong to the paths of the run that set them. A failed
    write is logged, not raised; the run itself already succeeded.
    """
    config_file = get_config_file()
    session = {k: v for k, v in config.items() if k not in RUN_SCOPED_KEYS}
    state = {"version": CURRENT_CONFIG_VERSION, "last_session": session}
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error(f"Cannot save session to {config_file}: {e}")
        return
    logger.debug(f"Session saved to {config_file}")
