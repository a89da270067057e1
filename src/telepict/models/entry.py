# -*- coding: utf-8 -*-
"""Game entry data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Phrase:
    """A text phrase written by the player."""

    text: str


@dataclass(frozen=True)
class Drawing:
    """Raw bytes of an uploaded image, stored exactly as read from disk."""

    data: bytes

    def __repr__(self) -> str:
        return f"Drawing(<{len(self.data)} bytes>)"


Entry = Union[Phrase, Drawing]


@dataclass(frozen=True)
class PictionaryEntry:
    """An entry tagged with the player who produced it.

    Not used by the interactive game yet; kept so authored records can be
    serialized alongside plain entries.
    """

    author: str
    entry: Entry
