# -*- coding: utf-8 -*-
"""Tests for logging setup."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest

from telepict.utils.logger import session_log_name, setup_session_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for attr in ("_telepict_logging_configured", "_telepict_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    for attr in ("_telepict_logging_configured", "_telepict_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_session_log_name_uses_slug_and_timestamp() -> None:
    started = datetime(2026, 1, 2, 3, 4, 5)
    assert session_log_name("Telephone  Pictionary", started) == "telephone-pictionary-20260102-030405.log"


def test_session_logging_creates_log_once(tmp_path: Path, clean_root_logger) -> None:
    path = setup_session_logging(tmp_path, "Telephone Pictionary")
    assert path is not None
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("telephone-pictionary-")
    assert path.exists()
    assert setup_session_logging(tmp_path / "other", "Telephone Pictionary") == path
