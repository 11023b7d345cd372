from __future__ import annotations

"""
Logging bootstrap for treemark.

The root logger gets a single QueueHandler; a background QueueListener
drains the queue into the stderr stream and, when a log file is requested,
a size-rotated file. Emitting a record therefore never waits on disk I/O.
"""

import atexit
import logging
import os
import queue
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from treemark.infra.fs import get_user_data_dir

LOG_FILE_NAME = "treemark.log"

# Attributes set on the root logger and on the handlers we own
_CONFIGURED_FLAG_ATTR: str = "_treemark_configured"
_QUEUE_LISTENER_ATTR: str = "_treemark_queue_listener"
_HANDLER_TAG_ATTR: str = "_treemark_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Level name, case-insensitive; unknown names mean INFO.
        console: Emit records on stderr.
        log_file: Path of the rotating log file, or None for console only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside the active one.
        console_fmt: Line format on stderr.
        file_fmt: Line format in the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3
    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_default_log_path() -> str:
    """Location of the `--save-log` file: `<user data dir>/logs/treemark.log`."""
    return os.path.join(get_user_data_dir(), "logs", LOG_FILE_NAME)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route root logging through a queue to the sinks `cfg` asks for.

    Only the first call takes effect. With `force=True` the queue handler
    and listener left by an earlier call are torn down and rebuilt.

    Args:
        cfg: Level, sinks and formats to install.
        force: Rebuild even if logging was already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = _level_number(cfg.level)
    root.setLevel(level)
    _teardown(root)

    sinks = _build_sinks(cfg, level)
    if not sinks:
        return root

    records: queue.Queue[logging.LogRecord] = queue.Queue()
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    entry = QueueHandler(records)
    setattr(entry, _HANDLER_TAG_ATTR, True)
    root.addHandler(entry)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _level_number(name: Optional[str]) -> int:
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _build_sinks(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """Handlers fed by the listener thread, never attached to the root."""
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(console)

    if cfg.log_file:
        log_file = _open_log_file(cfg)
        if log_file is not None:
            sinks.append(log_file)

    for sink in sinks:
        sink.setLevel(level)
    return sinks


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file, creating its folder.

    A file that cannot be opened is reported on stderr and left out, so a
    read-only data directory degrades to console logging.
    """
    path = os.path.abspath(str(cfg.log_file))
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"WARNING: log file '{path}' unavailable: {e}", file=sys.stderr)
        return None

    handler.setFormatter(logging.Formatter(cfg.file_fmt))
    return handler


def _teardown(root: logging.Logger) -> None:
    """Remove the queue handler and stop the listener of a previous call."""
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            root.removeHandler(handler)
            handler.close()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # atexit may fire for a listener a forced reconfiguration already stopped
    if listener is None or getattr(listener, "_thread", None) is None:
        return
    listener.stop()
    for sink in listener.handlers:
        sink.close()
