# -*- coding: utf-8 -*-
"""Game sequence and the rule deciding which input comes next."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from telepict.models.entry import Drawing, Entry, Phrase


logger = logging.getLogger(__name__)

StateListener = Callable[[list[Entry]], None]


class InputKind(str, Enum):
    """What the player has to supply next."""

    INITIAL_PHRASE = "initial_phrase"
    DRAWING = "drawing"
    PHRASE = "phrase"


def next_input_kind(sequence: Sequence[Entry]) -> InputKind:
    """Return the input required after the last entry of ``sequence``."""
    if not sequence:
        return InputKind.INITIAL_PHRASE
    last = sequence[-1]
    if isinstance(last, Phrase):
        return InputKind.DRAWING
    if isinstance(last, Drawing):
        return InputKind.PHRASE
    raise TypeError(f"Unsupported entry type: {type(last).__name__}")


class GameState:
    """Ordered entries of one game.

    Entries are only ever appended, cleared, or replaced as a whole. Kind
    alternation is not checked here; the GUI only offers the input that
    ``next_input_kind`` asks for.
    """

    def __init__(self, entries: Iterable[Entry] | None = None) -> None:
        self._entries: list[Entry] = list(entries or [])
        self._listeners: list[StateListener] = []

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def entries(self) -> list[Entry]:
        """Return a snapshot copy of the sequence."""
        return list(self._entries)

    def entry_at(self, index: int) -> Entry:
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"Invalid entry index: {index}")
        return self._entries[index]

    def last(self) -> Entry | None:
        return self._entries[-1] if self._entries else None

    def is_empty(self) -> bool:
        return not self._entries

    def next_input_kind(self) -> InputKind:
        return next_input_kind(self._entries)

    def append_entry(self, entry: Entry) -> None:
        updated = self.entries()
        updated.append(entry)
        self._commit(updated, f"append {type(entry).__name__}")

    def clear(self) -> None:
        self._commit([], "clear")

    def replace(self, entries: Iterable[Entry]) -> None:
        self._commit(list(entries), "replace")

    def _commit(self, entries: list[Entry], reason: str) -> None:
        self._entries = entries
        logger.debug("Game state %s -> %d entries", reason, len(entries))
        snapshot = self.entries()
        for listener in list(self._listeners):
            listener(snapshot)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())
