# -*- coding: utf-8 -*-
"""Serve drawing bytes to the review view by ``entry/<index>`` address."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from telepict.constants import ENTRY_RESOURCE_PREFIX
from telepict.core.errors import IndexOutOfRange
from telepict.core.state import GameState
from telepict.models.entry import Drawing
from telepict.utils.image_utils import guess_mime_type


logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_NO_CONTENT = 204
STATUS_NOT_FOUND = 404


@dataclass(frozen=True)
class DrawingResponse:
    status: int
    body: bytes = b""
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


class DrawingServer:
    """Look up drawings in the live game state.

    Nothing is cached: every request reads the current sequence.
    """

    def __init__(self, state: GameState) -> None:
        self._state = state

    def lookup(self, index: int) -> bytes:
        """Return drawing bytes at ``index``; empty bytes for a phrase."""
        entries = self._state.entries()
        if index < 0 or index >= len(entries):
            raise IndexOutOfRange(index, len(entries))
        entry = entries[index]
        if isinstance(entry, Drawing):
            return entry.data
        return b""

    @staticmethod
    def parse_resource_path(path: str) -> int | None:
        """Extract the index from ``entry/<n>`` or ``/entry/<n>``."""
        trimmed = path.lstrip("/")
        if not trimmed.startswith(ENTRY_RESOURCE_PREFIX):
            return None
        suffix = trimmed[len(ENTRY_RESOURCE_PREFIX):]
        if not (suffix.isascii() and suffix.isdigit()):
            return None
        return int(suffix)

    def handle(self, path: str) -> DrawingResponse:
        index = self.parse_resource_path(path)
        if index is None:
            logger.debug("Ignoring unknown resource path: %s", path)
            return DrawingResponse(STATUS_NOT_FOUND)
        try:
            body = self.lookup(index)
        except IndexOutOfRange as exc:
            logger.warning("Drawing request failed: %s", exc)
            return DrawingResponse(STATUS_NOT_FOUND)
        if not body:
            return DrawingResponse(STATUS_NO_CONTENT)
        return DrawingResponse(STATUS_OK, body, guess_mime_type(body))
