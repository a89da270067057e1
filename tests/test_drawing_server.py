# -*- coding: utf-8 -*-
"""Tests for drawing lookup by entry index."""

from __future__ import annotations

import pytest

from telepict.core.drawing_server import DrawingServer
from telepict.core.errors import IndexOutOfRange
from telepict.core.state import GameState
from telepict.models.entry import Drawing, Phrase


@pytest.fixture
def server(sample_entries: list) -> DrawingServer:
    return DrawingServer(GameState(sample_entries))


def test_lookup_returns_drawing_bytes(server: DrawingServer, png_bytes: bytes) -> None:
    assert server.lookup(1) == png_bytes


def test_lookup_phrase_returns_empty(server: DrawingServer) -> None:
    assert server.lookup(0) == b""


@pytest.mark.parametrize("index", [3, 99, -1])
def test_lookup_out_of_range_raises(server: DrawingServer, index: int) -> None:
    with pytest.raises(IndexOutOfRange):
        server.lookup(index)


def test_index_out_of_range_is_an_index_error(server: DrawingServer) -> None:
    with pytest.raises(IndexError):
        server.lookup(5)


def test_lookup_on_empty_game_raises() -> None:
    with pytest.raises(IndexOutOfRange) as excinfo:
        DrawingServer(GameState()).lookup(0)
    assert "empty" in str(excinfo.value)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("entry/0", 0),
        ("/entry/12", 12),
        ("entry/", None),
        ("entry/-1", None),
        ("entry/1a", None),
        ("entry/\u00b2", None),
        ("entry/\u0663", None),
        ("picture/1", None),
        ("", None),
    ],
)
def test_parse_resource_path(path: str, expected: int | None) -> None:
    assert DrawingServer.parse_resource_path(path) == expected


def test_handle_drawing_returns_bytes_and_mime(server: DrawingServer, png_bytes: bytes) -> None:
    response = server.handle("entry/1")
    assert response.ok
    assert response.body == png_bytes
    assert response.content_type == "image/png"


def test_handle_phrase_returns_empty_body(server: DrawingServer) -> None:
    response = server.handle("/entry/0")
    assert response.status == 204
    assert response.body == b""


def test_handle_out_of_range_is_not_found(server: DrawingServer) -> None:
    assert server.handle("entry/40").status == 404


def test_handle_unknown_path_is_not_found(server: DrawingServer) -> None:
    assert server.handle("styles/app.css").status == 404


def test_lookup_reads_live_state() -> None:
    state = GameState([Phrase("cat")])
    server = DrawingServer(state)
    state.append_entry(Drawing(b"GIF89a..."))
    assert server.lookup(1) == b"GIF89a..."
    assert server.handle("entry/1").content_type == "image/gif"
    state.clear()
    with pytest.raises(IndexOutOfRange):
        server.lookup(1)


@pytest.mark.parametrize("path", ["entry/²", "/entry/1¹", "entry/١"])
def test_handle_non_ascii_digits_is_not_found(server: DrawingServer, path: str) -> None:
    assert server.handle(path).status == 404
