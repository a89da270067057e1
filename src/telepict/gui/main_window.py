# -*- coding: utf-8 -*-
"""Main window for the telephone pictionary game."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from telepict.constants import APP_NAME, APP_VERSION
from telepict.gui.controller import GameController
from telepict.gui.controls_widget import ControlsWidget
from telepict.gui.entry_widgets import EntryDisplayWidget
from telepict.gui.review_widget import ReviewWidget
from telepict.models.entry import Entry

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Active entry or full review, plus the game controls."""

    def __init__(
        self,
        settings: dict[str, Any],
        controller: GameController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self.controller = controller or GameController(settings)

        window = self.settings.get("window", {})
        self.setWindowTitle(str(window.get("title", APP_NAME)))
        self.resize(int(window.get("width", 800)), int(window.get("height", 800)))
        if not window.get("resizable", True):
            self.setFixedSize(self.size())

        self._build_ui()
        self._connect_controller()
        self._apply_styles()
        self._refresh_ui(self.controller.entries())

    def _build_ui(self) -> None:
        display = self.settings.get("display", {})
        files = self.settings.get("files", {})

        self.entry_display = EntryDisplayWidget(
            display=display,
            image_extensions=files.get("image_extensions"),
        )
        self.review_widget = ReviewWidget(
            self.controller.drawing_server,
            drawing_width=int(display.get("drawing_width", 600)),
            drawing_height=int(display.get("drawing_height", 600)),
        )
        self.controls_widget = ControlsWidget()
        self.count_label = QLabel("")
        self.count_label.setObjectName("mutedText")

        entry_scroll = QScrollArea()
        entry_scroll.setWidgetResizable(True)
        entry_scroll.setWidget(self.entry_display)
        self.entry_scroll = entry_scroll

        central = QWidget()
        central_layout = QVBoxLayout(central)
        central_layout.setContentsMargins(14, 14, 14, 14)
        central_layout.setSpacing(12)
        central_layout.addWidget(self.entry_scroll, 1)
        central_layout.addWidget(self.controls_widget)
        central_layout.addWidget(self.review_widget, 1)
        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar())
        self.statusBar().addPermanentWidget(self.count_label)
        self.statusBar().showMessage(f"{APP_NAME} v{APP_VERSION}", 5000)

    def _connect_controller(self) -> None:
        self.entry_display.phrase_submitted.connect(self.controller.submit_phrase)
        self.entry_display.image_selected.connect(self.controller.submit_drawing_file)
        self.controls_widget.review_toggled.connect(self.controller.toggle_review)
        self.controls_widget.new_requested.connect(self.controller.new_game)
        self.controls_widget.save_requested.connect(self.controller.save_game)
        self.controls_widget.load_requested.connect(self.controller.load_game)

        self.controller.state_changed.connect(self._refresh_ui)
        self.controller.review_mode_changed.connect(self._on_review_mode_changed)
        self.controller.busy_changed.connect(self.controls_widget.set_busy)
        self.controller.busy_changed.connect(self.entry_display.set_busy)
        self.controller.game_saved.connect(self._on_game_saved)
        self.controller.error_occurred.connect(self._show_error)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QLabel#mutedText {
                color: #6b7280;
            }
            QPushButton#primaryButton {
                background: #0f766e;
                color: white;
                border: 1px solid #115e59;
                border-radius: 6px;
                padding: 4px 10px;
                font-weight: 700;
            }
            QPushButton#secondaryButton {
                background: white;
                border: 1px solid #d0d7e2;
                border-radius: 6px;
                padding: 4px 10px;
            }
            QPushButton#secondaryButton:disabled {
                color: #9ca3af;
            }
            """
        )

    def is_review_mode(self) -> bool:
        return self.controller.review.active

    def _refresh_ui(self, entries: list[Entry]) -> None:
        self.entry_display.show_entries(entries, self.controller.next_input_kind())
        self.controls_widget.set_game_state(bool(entries))
        self.count_label.setText(f"{len(entries)} entries")
        if self.is_review_mode():
            self.review_widget.show_entries(entries)
        self._apply_mode_visibility()

    def _on_review_mode_changed(self, active: bool) -> None:
        self.controls_widget.set_review_label(self.controller.review.button_label)
        if active:
            self.review_widget.show_entries(self.controller.entries())
        self._apply_mode_visibility()

    def _apply_mode_visibility(self) -> None:
        active = self.is_review_mode()
        self.entry_scroll.setVisible(not active)
        self.review_widget.setVisible(active)

    def _on_game_saved(self, path: str) -> None:
        logger.info("Game saved: %s", path)
        self.statusBar().showMessage(f"Saved to {path}", 5000)

    def _show_error(self, message: str) -> None:
        QMessageBox.warning(self, APP_NAME, message)

    def closeEvent(self, event) -> None:
        self.controller.wait_for_workers()
        super().closeEvent(event)
