# -*- coding: utf-8 -*-
"""Recoverable error types raised by the game core."""

from __future__ import annotations

from pathlib import Path


class GameError(Exception):
    """Base class for errors the GUI reports instead of crashing."""


class IoFailure(GameError):
    """A save file or image could not be created, written, or read."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DecodeFailure(GameError):
    """A loaded file is not a valid game encoding."""


class IndexOutOfRange(GameError, IndexError):
    """A drawing was requested for an index outside the game sequence."""

    def __init__(self, index: int, length: int) -> None:
        if length:
            message = f"Entry index {index} out of range (0..{length - 1})"
        else:
            message = f"Entry index {index} out of range (game is empty)"
        super().__init__(message)
        self.index = index
        self.length = length
