"""Logging setup for certiweb.

Two sinks, both under ``<data_dir>/logs`` (the configured data directory,
or the certiweb home when none is passed):

- ``local-<date>.log``: the ``certiweb`` logger hierarchy
- ``registry-events-<date>.log``: one line per registry write or rejection,
  meant for audit trails of who changed which table
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from certiweb.config import get_certiweb_home

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def _log_dir(data_dir: Optional[Path] = None) -> Path:
    log_dir = Path(data_dir or get_certiweb_home()) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_certiweb_logging(
    registry_id: str = "default", level: str = "INFO", data_dir: Optional[Path] = None
) -> logging.Logger:
    """Configure the ``certiweb`` logger.

    Adds a file handler writing to ``local-<date>.log``. At DEBUG a console
    handler is added as well. Calling this again reuses the existing
    handlers instead of stacking new ones. Logs go under ``data_dir``, or
    the certiweb home directory when it is not given.
    """
    root = logging.getLogger("certiweb")
    log_level = getattr(logging, str(level).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    root.setLevel(log_level)

    if any(isinstance(h, logging.FileHandler) for h in root.handlers):
        return root

    log_file = _log_dir(data_dir) / f"local-{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)

    if log_level == logging.DEBUG:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

    root.debug(f"Logging initialized for registry={registry_id}")
    return root


def log_registry_event(
    event_type: str,
    details: str,
    registry_id: str = "default",
    data_dir: Optional[Path] = None,
) -> None:
    """Append one line to the registry event log. Never raises."""
    try:
        now = datetime.now()
        event_file = _log_dir(data_dir) / f"registry-events-{now.strftime('%Y-%m-%d')}.log"
        with open(event_file, "a", encoding="utf-8") as f:
            f.write(f"{now.isoformat()} | {event_type} | registry={registry_id} | {details}\n")
    except OSError as e:
        logger.debug(f"Could not write registry event: {e}")


def log_write(
    registry_id: str,
    table: str,
    record_id: int,
    operation: str,
    data_dir: Optional[Path] = None,
) -> None:
    """Record a successful write to a table."""
    log_registry_event(
        "write", f"table={table}, id={record_id}, op={operation}", registry_id, data_dir
    )


def log_rejected(
    registry_id: str,
    table: str,
    record_id: int,
    reason: str,
    data_dir: Optional[Path] = None,
) -> None:
    """Record an invocation that was rejected before anything was persisted."""
    log_registry_event(
        "rejected", f"table={table}, id={record_id}, reason={reason}", registry_id, data_dir
    )
