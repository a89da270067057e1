# -*- coding: utf-8 -*-
"""Read-only view of every entry in the game."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QSize, QUrl, Qt
from PyQt6.QtGui import QImage, QTextDocument
from PyQt6.QtWidgets import QTextBrowser, QWidget

from telepict.core.drawing_server import DrawingServer
from telepict.core.review import build_review_items, render_review_html
from telepict.models.entry import Entry

logger = logging.getLogger(__name__)


class ReviewWidget(QTextBrowser):
    """Render the review document; ``entry/<i>`` images come from the drawing server."""

    def __init__(
        self,
        server: DrawingServer,
        drawing_width: int = 600,
        drawing_height: int = 600,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("reviewView")
        self.setOpenLinks(False)
        self._server = server
        self._drawing_width = drawing_width
        self._drawing_height = drawing_height
        self._item_count = 0

    def show_entries(self, entries: list[Entry]) -> None:
        items = build_review_items(entries)
        self._item_count = len(items)
        # Drops images cached from the previous game.
        self.document().clear()
        self.setHtml(render_review_html(items))

    def item_count(self) -> int:
        return self._item_count

    def _fit_image(self, image: QImage) -> QImage:
        """Scale into the drawing box, keeping the aspect ratio."""
        return image.scaled(
            QSize(self._drawing_width, self._drawing_height),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )

    def loadResource(self, type: int, name: QUrl) -> Any:
        if getattr(type, "value", type) == QTextDocument.ResourceType.ImageResource.value:
            response = self._server.handle(name.toString())
            if response.ok:
                image = QImage()
                if image.loadFromData(response.body):
                    return self._fit_image(image)
                logger.warning("Drawing at %s could not be decoded", name.toString())
            return QImage()
        return super().loadResource(type, name)
