# -*- coding: utf-8 -*-
"""Read-only review of a finished game."""

from __future__ import annotations

import html
from collections.abc import Sequence
from dataclasses import dataclass, field

from telepict.constants import ENTRY_RESOURCE_PREFIX, REVIEW_BUTTON_LABELS
from telepict.models.entry import Drawing, Entry, Phrase


class ReviewMode:
    """Switch between the active entry and the full game review."""

    def __init__(self, active: bool = False) -> None:
        self._active = bool(active)

    @property
    def active(self) -> bool:
        return self._active

    def toggle(self) -> bool:
        self._active = not self._active
        return self._active

    @property
    def button_label(self) -> str:
        return REVIEW_BUTTON_LABELS[self._active]


@dataclass
class ReviewItem:
    """One rendered row of the review."""

    kind: str
    index: int
    text: str = ""
    lines: list[str] = field(default_factory=list)
    resource: str = ""


def resource_for_index(index: int) -> str:
    return f"{ENTRY_RESOURCE_PREFIX}{index}"


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF only; a trailing newline adds no empty line."""
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
        lines = [piece.removesuffix("\r") for piece in pieces]
    else:
        lines = [piece.removesuffix("\r") for piece in pieces[:-1]] + [pieces[-1]]
    return lines


def build_review_items(sequence: Sequence[Entry]) -> list[ReviewItem]:
    """Map every entry, in order, to a phrase block or an image reference."""
    items: list[ReviewItem] = []
    for index, entry in enumerate(sequence):
        if isinstance(entry, Phrase):
            items.append(
                ReviewItem(kind="phrase", index=index, text=entry.text, lines=split_lines(entry.text))
            )
        elif isinstance(entry, Drawing):
            items.append(ReviewItem(kind="drawing", index=index, resource=resource_for_index(index)))
    return items


def render_phrase_html(lines: Sequence[str]) -> str:
    body = "".join(f"{html.escape(line)}<br/>" for line in lines)
    return (
        '<table width="100%" cellpadding="6" style="border: 1px solid black; border-collapse: collapse;">'
        f"<tr><td>{body}</td></tr></table>"
    )


def render_drawing_html(resource: str) -> str:
    return f'<p><img src="{html.escape(resource)}"/></p>'


def render_review_html(items: Sequence[ReviewItem]) -> str:
    """Build the rich-text document shown in review mode.

    Image sizes are left to the view, which fits each drawing into its box.
    """
    parts = ["<html><body>"]
    for item in items:
        if item.kind == "phrase":
            parts.append(render_phrase_html(item.lines))
        else:
            parts.append(render_drawing_html(item.resource))
    parts.append("</body></html>")
    return "\n".join(parts)
