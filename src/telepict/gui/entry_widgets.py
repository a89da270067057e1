# -*- coding: utf-8 -*-
"""Widgets for writing phrases, choosing drawings and showing the last entry."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from telepict.constants import DEFAULT_IMAGE_EXTENSIONS
from telepict.core.state import InputKind
from telepict.models.entry import Drawing, Entry, Phrase

logger = logging.getLogger(__name__)


class PhraseLabel(QLabel):
    """Bordered block showing a phrase with its line breaks."""

    def __init__(self, text: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("phraseBlock")
        self.setTextFormat(Qt.TextFormat.PlainText)
        self.setWordWrap(True)
        self.setStyleSheet("QLabel#phraseBlock { border: 1px solid black; padding: 6px; }")
        self.setText(text)


class DrawingView(QLabel):
    """Show image bytes scaled to fit, keeping the aspect ratio."""

    def __init__(self, width: int = 600, height: int = 600, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("drawingView")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFixedSize(width, height)
        self._has_image = False

    def set_image_bytes(self, data: bytes) -> bool:
        pixmap = QPixmap()
        if not data or not pixmap.loadFromData(data):
            logger.warning("Could not render drawing (%d bytes)", len(data))
            self._has_image = False
            self.clear()
            self.setText("(image cannot be displayed)")
            return False
        scaled = pixmap.scaled(
            self.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.setPixmap(scaled)
        self._has_image = True
        return True

    def has_image(self) -> bool:
        return self._has_image


class PhraseInputWidget(QWidget):
    """Multi-line text box with an OK button."""

    submitted = pyqtSignal(str)

    def __init__(self, columns: int = 80, rows: int = 3, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.text_edit = QPlainTextEdit()
        self.text_edit.setObjectName("caption")
        metrics = self.text_edit.fontMetrics()
        self.text_edit.setFixedWidth(metrics.horizontalAdvance("m") * columns)
        self.text_edit.setFixedHeight(metrics.lineSpacing() * rows + 12)
        self.ok_button = QPushButton("OK")
        self.ok_button.setObjectName("primaryButton")
        self.ok_button.setFixedWidth(80)
        self.ok_button.clicked.connect(self.submit)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        layout.addWidget(self.text_edit)
        layout.addWidget(self.ok_button)

    def text(self) -> str:
        return self.text_edit.toPlainText()

    def set_text(self, text: str) -> None:
        self.text_edit.setPlainText(text)

    def submit(self) -> None:
        text = self.text()
        self.text_edit.clear()
        self.submitted.emit(text)


class ImageSelectorWidget(QWidget):
    """Button that asks for an image file and reports the chosen path."""

    image_selected = pyqtSignal(str)

    def __init__(self, extensions: list[str] | tuple[str, ...] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.extensions = list(extensions or DEFAULT_IMAGE_EXTENSIONS)
        self.choose_button = QPushButton("Choose image...")
        self.choose_button.setObjectName("secondaryButton")
        self.choose_button.clicked.connect(self.choose_image)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.choose_button)
        layout.addStretch(1)

    def file_filter(self) -> str:
        patterns = " ".join(f"*{ext}" for ext in self.extensions)
        return f"Images ({patterns})"

    def _ask_for_file(self) -> str:
        selected, _ = QFileDialog.getOpenFileName(self, "Select Drawing", "", self.file_filter())
        return selected

    def choose_image(self) -> None:
        selected = self._ask_for_file()
        if not selected:
            return
        self.image_selected.emit(selected)


class EntryDisplayWidget(QWidget):
    """Show the last entry together with the input it asks for."""

    phrase_submitted = pyqtSignal(str)
    image_selected = pyqtSignal(str)

    def __init__(self, display: dict | None = None, image_extensions: list[str] | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        display = display or {}
        columns = int(display.get("phrase_columns", 80))
        rows = int(display.get("phrase_rows", 3))
        width = int(display.get("drawing_width", 600))
        height = int(display.get("drawing_height", 600))

        self.stack = QStackedWidget()

        # Empty game
        self.initial_page = QWidget()
        initial_layout = QVBoxLayout(self.initial_page)
        self.initial_prompt = QLabel("Write something!")
        self.initial_input = PhraseInputWidget(columns, rows)
        initial_layout.addWidget(self.initial_prompt)
        initial_layout.addWidget(self.initial_input)
        initial_layout.addStretch(1)

        # Last entry is a phrase
        self.draw_page = QWidget()
        draw_layout = QVBoxLayout(self.draw_page)
        self.draw_prompt = QLabel("Draw:")
        self.draw_phrase = PhraseLabel()
        self.draw_hint = QLabel("then upload the image")
        self.image_selector = ImageSelectorWidget(image_extensions)
        for widget in (self.draw_prompt, self.draw_phrase, self.draw_hint, self.image_selector):
            draw_layout.addWidget(widget)
        draw_layout.addStretch(1)

        # Last entry is a drawing
        self.caption_page = QWidget()
        caption_layout = QVBoxLayout(self.caption_page)
        self.caption_drawing = DrawingView(width, height)
        self.caption_prompt = QLabel("What is this?")
        self.caption_input = PhraseInputWidget(columns, rows)
        for widget in (self.caption_drawing, self.caption_prompt, self.caption_input):
            caption_layout.addWidget(widget)
        caption_layout.addStretch(1)

        self._pages = {
            InputKind.INITIAL_PHRASE: self.initial_page,
            InputKind.DRAWING: self.draw_page,
            InputKind.PHRASE: self.caption_page,
        }
        for page in self._pages.values():
            self.stack.addWidget(page)

        self.initial_input.submitted.connect(self.phrase_submitted.emit)
        self.caption_input.submitted.connect(self.phrase_submitted.emit)
        self.image_selector.image_selected.connect(self.image_selected.emit)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.stack)
        self._kind = InputKind.INITIAL_PHRASE

    def current_kind(self) -> InputKind:
        return self._kind

    def show_entries(self, entries: list[Entry], kind: InputKind) -> None:
        last = entries[-1] if entries else None
        if isinstance(last, Phrase):
            self.draw_phrase.setText(last.text)
        elif isinstance(last, Drawing):
            self.caption_drawing.set_image_bytes(last.data)
        self._kind = kind
        self.stack.setCurrentWidget(self._pages[kind])

    def set_busy(self, busy: bool) -> None:
        self.image_selector.choose_button.setEnabled(not busy)
