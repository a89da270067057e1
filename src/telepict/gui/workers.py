# -*- coding: utf-8 -*-
"""Worker classes for file I/O off the GUI thread."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from telepict.core.errors import GameError, IoFailure
from telepict.core.persistence import load_game, save_game
from telepict.models.entry import Entry
from telepict.utils.image_utils import load_image_bytes

logger = logging.getLogger(__name__)


class SaveWorker(QObject):
    """Write a snapshot of the game to disk."""

    finished = pyqtSignal(str)
    error = pyqtSignal(str)

    def __init__(self, entries: list[Entry], filename: str | Path) -> None:
        super().__init__()
        self.entries = list(entries)
        self.filename = filename

    def run(self) -> None:
        try:
            logger.info("SaveWorker: writing %d entries to %s", len(self.entries), self.filename)
            path = save_game(self.entries, self.filename)
            self.finished.emit(str(path))
        except GameError as e:
            self.error.emit(str(e))


class LoadWorker(QObject):
    """Read and decode a save file."""

    finished = pyqtSignal(object)
    error = pyqtSignal(str)

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)

    def run(self) -> None:
        try:
            logger.info("LoadWorker: reading %s", self.path)
            entries = load_game(self.path)
            self.finished.emit(entries)
        except GameError as e:
            self.error.emit(str(e))


class ImageReadWorker(QObject):
    """Read the bytes of an image chosen for a drawing entry."""

    finished = pyqtSignal(object)
    error = pyqtSignal(str)

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)

    def run(self) -> None:
        try:
            logger.info("ImageReadWorker: reading %s", self.path)
            data = load_image_bytes(self.path)
        except OSError as e:
            logger.error("ImageReadWorker: failed to read %s: %s", self.path, e)
            self.error.emit(str(IoFailure(f"Could not read {self.path}: {e.strerror or e}", self.path)))
            return
        self.finished.emit(data)
