# -*- coding: utf-8 -*-
"""Per-session logging for the game window."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Set on the root logger once a session has been configured.
_CONFIGURED_ATTR = "_telepict_logging_configured"
_SESSION_LOG_ATTR = "_telepict_session_log"


def session_log_name(app_name: str, started: datetime | None = None) -> str:
    """File name of a session log, e.g. ``telephone-pictionary-20260101-120000.log``."""
    slug = "-".join(app_name.lower().split())
    stamp = (started or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return f"{slug}-{stamp}.log"


def _attach(root: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)


def setup_session_logging(base_dir: str | Path, app_name: str, level: int = logging.INFO) -> Path | None:
    """Send log records to stderr and to ``<base_dir>/logs/<session>.log``.

    Only the first call in a process configures anything; later calls return
    the log path chosen then. ``None`` means the log file could not be opened
    and the session logs to stderr only.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_ATTR, False):
        return getattr(root, _SESSION_LOG_ATTR, None)

    root.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        _attach(root, logging.StreamHandler(), level)

    log_path: Path | None = Path(base_dir) / "logs" / session_log_name(app_name)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(root, logging.FileHandler(log_path, encoding="utf-8"), level)
    except OSError as e:
        root.error("Could not open session log %s: %s", log_path, e)
        log_path = None
    else:
        root.info("Logging game session to %s", log_path)

    setattr(root, _CONFIGURED_ATTR, True)
    setattr(root, _SESSION_LOG_ATTR, log_path)
    return log_path
