# -*- coding: utf-8 -*-
"""Recognise drawing formats by their leading bytes; decode base64 drawings."""

from __future__ import annotations

import base64
from pathlib import Path


PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"
GIF_SIGNATURES = (b"GIF87a", b"GIF89a")
BMP_SIGNATURE = b"BM"

_EXTENSIONS = {
    "png": ".png",
    "jpeg": ".jpg",
    "gif": ".gif",
    "bmp": ".bmp",
    "webp": ".webp",
}


def decode_base64_bytes(data: str) -> bytes:
    """Decode base64 text, rejecting characters outside the alphabet."""
    return base64.b64decode(data.encode("ascii"), validate=True)


def guess_image_type(data: bytes) -> str | None:
    """Return a short format name from the file signature, or None."""
    if data.startswith(PNG_SIGNATURE):
        return "png"
    if data.startswith(JPEG_SIGNATURE):
        return "jpeg"
    if data.startswith(GIF_SIGNATURES):
        return "gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    if data.startswith(BMP_SIGNATURE):
        return "bmp"
    return None


def guess_mime_type(data: bytes) -> str:
    kind = guess_image_type(data)
    if kind is None:
        return "application/octet-stream"
    return f"image/{kind}"


def extension_for_bytes(data: bytes, default: str = ".bin") -> str:
    kind = guess_image_type(data)
    return _EXTENSIONS.get(kind or "", default)


def load_image_bytes(path: str | Path) -> bytes:
    """Read image bytes from disk."""
    return Path(path).read_bytes()
