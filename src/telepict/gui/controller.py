# -*- coding: utf-8 -*-
"""Application controller owning the game state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from telepict.core.drawing_server import DrawingServer
from telepict.core.review import ReviewMode
from telepict.core.state import GameState, InputKind
from telepict.gui.workers import ImageReadWorker, LoadWorker, SaveWorker
from telepict.models.entry import Drawing, Entry, Phrase

logger = logging.getLogger(__name__)


class GameController(QObject):
    """
    Central controller for the game.
    Views read from it and call its methods; they never touch the state directly.
    """
    state_changed = pyqtSignal(object)
    review_mode_changed = pyqtSignal(bool)
    busy_changed = pyqtSignal(bool)
    game_saved = pyqtSignal(str)
    error_occurred = pyqtSignal(str)

    def __init__(self, settings: dict[str, Any] | None = None, run_in_background: bool = True) -> None:
        super().__init__()
        self.settings = settings or {}
        self.state = GameState()
        self.review = ReviewMode()
        self.drawing_server = DrawingServer(self.state)
        self.run_in_background = run_in_background
        self._busy = False
        self._active_threads: list[tuple[QThread, QObject]] = []
        self.state.add_listener(self._on_state_changed)

    # -- queries -----------------------------------------------------------

    def entries(self) -> list[Entry]:
        return self.state.entries()

    def next_input_kind(self) -> InputKind:
        return self.state.next_input_kind()

    def has_entries(self) -> bool:
        return not self.state.is_empty()

    def is_busy(self) -> bool:
        return self._busy

    def save_dir(self) -> Path | None:
        raw = str(self.settings.get("files", {}).get("save_dir", "") or "")
        return Path(raw) if raw else None

    # -- game actions ------------------------------------------------------

    def submit_phrase(self, text: str) -> None:
        logger.info("Phrase submitted (%d chars)", len(text))
        self.state.append_entry(Phrase(text))

    def submit_drawing_bytes(self, data: bytes) -> None:
        logger.info("Drawing submitted (%d bytes)", len(data))
        self.state.append_entry(Drawing(bytes(data)))

    def submit_drawing_file(self, path: str | Path | None) -> None:
        if not path:
            logger.debug("Image selection dismissed")
            return
        worker = ImageReadWorker(path)
        worker.finished.connect(self.apply_read_image)
        self._start_worker(worker)

    def apply_read_image(self, data: bytes) -> None:
        self.submit_drawing_bytes(data)

    def new_game(self) -> None:
        logger.info("New game requested (discarding %d entries)", len(self.state))
        self.state.clear()

    def toggle_review(self) -> bool:
        active = self.review.toggle()
        logger.info("Review mode %s", "on" if active else "off")
        self.review_mode_changed.emit(active)
        return active

    # -- persistence -------------------------------------------------------

    def save_game(self, filename: str) -> None:
        filename = (filename or "").strip()
        if not filename:
            logger.debug("Save requested without a filename")
            return
        target = Path(filename)
        save_dir = self.save_dir()
        if save_dir is not None and not target.is_absolute():
            target = save_dir / target
        worker = SaveWorker(self.state.entries(), target)
        worker.finished.connect(self.game_saved.emit)
        self._start_worker(worker)

    def load_game(self, path: str | Path | None) -> None:
        if not path:
            logger.debug("Load selection dismissed")
            return
        worker = LoadWorker(path)
        worker.finished.connect(self.apply_loaded)
        self._start_worker(worker)

    def apply_loaded(self, entries: list[Entry]) -> None:
        self.state.replace(entries)

    # -- internals ---------------------------------------------------------

    def _on_state_changed(self, entries: list[Entry]) -> None:
        self.state_changed.emit(entries)

    def _report_error(self, message: str) -> None:
        logger.warning("Operation failed, state left unchanged: %s", message)
        self.error_occurred.emit(message)

    def _set_busy(self, busy: bool) -> None:
        if self._busy != busy:
            self._busy = busy
            self.busy_changed.emit(busy)

    def _cleanup_threads(self) -> None:
        """Drop finished threads together with their workers."""
        self._active_threads = [(t, w) for t, w in self._active_threads if t.isRunning()]

    def _on_worker_done(self, *_args: Any) -> None:
        self._set_busy(False)

    def _start_worker(self, worker: QObject) -> None:
        if self._busy:
            logger.warning("File operation already running; ignoring %s", type(worker).__name__)
            self.error_occurred.emit("Another file operation is still running; please try again.")
            return
        self._set_busy(True)
        worker.error.connect(self._report_error)
        worker.finished.connect(self._on_worker_done)
        worker.error.connect(self._on_worker_done)

        if not self.run_in_background:
            worker.run()
            return

        self._cleanup_threads()
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        self._active_threads.append((thread, worker))
        thread.start()

    def wait_for_workers(self, timeout_ms: int = 5000) -> None:
        for thread, _worker in list(self._active_threads):
            thread.wait(timeout_ms)
        self._cleanup_threads()
