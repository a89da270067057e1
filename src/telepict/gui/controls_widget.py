# -*- coding: utf-8 -*-
"""Game controls: review toggle, new, save and load."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from telepict.constants import REVIEW_BUTTON_LABELS, SAVE_FILE_FILTER


class DoubleClickButton(QPushButton):
    """Push button that only acts on a double click."""

    double_clicked = pyqtSignal()

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:
        self.double_clicked.emit()
        super().mouseDoubleClickEvent(event)


class ControlsWidget(QWidget):
    """Buttons for ending/reviewing, starting over, saving and loading."""

    review_toggled = pyqtSignal()
    new_requested = pyqtSignal()
    save_requested = pyqtSignal(str)
    load_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.review_button = self._make_button(REVIEW_BUTTON_LABELS[False], self.review_toggled.emit)

        self.new_button = DoubleClickButton("New")
        self.new_button.setObjectName("secondaryButton")
        self.new_button.setFixedWidth(80)
        self.new_button.setToolTip("Double-click to discard this game and start a new one.")
        self.new_button.double_clicked.connect(self.new_requested.emit)

        self.save_button = self._make_button("Save", self._emit_save)
        self.filename_edit = QLineEdit()
        self.filename_edit.setObjectName("saveFilename")
        self.filename_edit.setPlaceholderText("game.tpi")
        self.filename_edit.textChanged.connect(self._on_filename_changed)
        self.save_label = QLabel("File:")

        self.load_button = self._make_button("Load...", self.choose_load_file)
        self.load_button.setToolTip("Open a saved .tpi game. The current game is replaced.")

        self.save_row = QWidget()
        save_layout = QHBoxLayout(self.save_row)
        save_layout.setContentsMargins(0, 0, 0, 0)
        save_layout.setSpacing(8)
        save_layout.addWidget(self.save_button)
        save_layout.addWidget(self.save_label)
        save_layout.addWidget(self.filename_edit, 1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addWidget(self.review_button)
        layout.addWidget(self.new_button)
        layout.addWidget(self.save_row)
        layout.addWidget(self.load_button)

        self._has_entries = False
        self._busy = False
        self._refresh()

    def _make_button(self, text: str, handler) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName("secondaryButton")
        button.setMinimumWidth(80)
        button.clicked.connect(handler)
        return button

    def _on_filename_changed(self, _text: str) -> None:
        self._refresh()

    def _emit_save(self) -> None:
        filename = self.filename_edit.text().strip()
        if filename:
            self.save_requested.emit(filename)

    def _ask_for_load_file(self) -> str:
        selected, _ = QFileDialog.getOpenFileName(self, "Load Game", "", SAVE_FILE_FILTER)
        return selected

    def choose_load_file(self) -> None:
        selected = self._ask_for_load_file()
        if not selected:
            return
        self.load_requested.emit(selected)

    def set_review_label(self, text: str) -> None:
        self.review_button.setText(text)

    def set_game_state(self, has_entries: bool) -> None:
        """New and Save only make sense once something was entered."""
        self._has_entries = has_entries
        self._refresh()

    def set_busy(self, busy: bool) -> None:
        self._busy = busy
        self._refresh()

    def _refresh(self) -> None:
        self.new_button.setVisible(self._has_entries)
        self.save_row.setVisible(self._has_entries)
        self.save_button.setEnabled(bool(self.filename_edit.text().strip()) and not self._busy)
        self.load_button.setEnabled(not self._busy)
