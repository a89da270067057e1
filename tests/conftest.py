# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import base64
import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


PNG_1X1_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+fJ8AAAAASUVORK5CYII="
)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_1X1_BYTES


@pytest.fixture
def sample_png(tmp_path: Path) -> Path:
    path = tmp_path / "drawing.png"
    path.write_bytes(PNG_1X1_BYTES)
    return path


@pytest.fixture
def sample_entries() -> list:
    from telepict.models.entry import Drawing, Phrase

    return [
        Phrase("a cat\non a mat"),
        Drawing(PNG_1X1_BYTES),
        Phrase("a dog on a rug"),
    ]


@pytest.fixture
def default_config() -> dict:
    from telepict.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
