# -*- coding: utf-8 -*-
"""Tests for image signature helpers."""

from __future__ import annotations

import base64

import pytest

from telepict.utils.image_utils import (
    decode_base64_bytes,
    extension_for_bytes,
    guess_image_type,
    guess_mime_type,
)


@pytest.mark.parametrize(
    ("data", "kind"),
    [
        (b"\x89PNG\r\n\x1a\n....", "png"),
        (b"\xff\xd8\xff\xe0....", "jpeg"),
        (b"GIF89a....", "gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "webp"),
        (b"BM......", "bmp"),
        (b"hello", None),
        (b"", None),
    ],
)
def test_guess_image_type(data: bytes, kind: str | None) -> None:
    assert guess_image_type(data) == kind


def test_png_detection(png_bytes: bytes) -> None:
    assert guess_image_type(png_bytes) == "png"
    assert guess_mime_type(png_bytes) == "image/png"
    assert extension_for_bytes(png_bytes) == ".png"


def test_unknown_bytes_fall_back() -> None:
    assert guess_mime_type(b"???") == "application/octet-stream"
    assert extension_for_bytes(b"???") == ".bin"
    assert extension_for_bytes(b"\xff\xd8\xff") == ".jpg"


def test_base64_helpers(png_bytes: bytes) -> None:
    encoded = base64.b64encode(png_bytes).decode("ascii")
    assert decode_base64_bytes(encoded) == png_bytes


def test_base64_decode_rejects_foreign_characters() -> None:
    with pytest.raises(ValueError):
        decode_base64_bytes("not base64!")
