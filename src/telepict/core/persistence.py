# -*- coding: utf-8 -*-
"""Save and load games as ``.tpi`` files.

A ``.tpi`` file is a JSON array of externally tagged entries::

    [{"Phrase": "a cat"}, {"Drawing": [137, 80, 78, 71, ...]}]

Drawing bytes are written as an integer array so files written by earlier
builds stay readable. A base64 string is accepted for ``Drawing`` on load.
There is no header, version field, or checksum.
"""

from __future__ import annotations

import binascii
import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from telepict.constants import SAVE_FILE_EXTENSION
from telepict.core.errors import DecodeFailure, IoFailure
from telepict.models.entry import Drawing, Entry, PictionaryEntry, Phrase
from telepict.utils.file_utils import read_bytes_file, write_bytes_file
from telepict.utils.image_utils import decode_base64_bytes


logger = logging.getLogger(__name__)

FILE_EXTENSION = SAVE_FILE_EXTENSION
PHRASE_TAG = "Phrase"
DRAWING_TAG = "Drawing"


def ensure_extension(filename: str | Path) -> Path:
    """Append ``.tpi`` unless the name already ends with it."""
    name = str(filename)
    if not name.endswith(FILE_EXTENSION):
        name += FILE_EXTENSION
    return Path(name)


def entry_to_json(entry: Entry) -> dict[str, Any]:
    if isinstance(entry, Phrase):
        return {PHRASE_TAG: entry.text}
    if isinstance(entry, Drawing):
        return {DRAWING_TAG: list(entry.data)}
    raise TypeError(f"Unsupported entry type: {type(entry).__name__}")


def _drawing_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        try:
            return decode_base64_bytes(value)
        except (binascii.Error, ValueError) as exc:
            raise DecodeFailure(f"Drawing payload is not valid base64: {exc}") from exc
    if not isinstance(value, list):
        raise DecodeFailure(f"Drawing payload must be a byte array, got {type(value).__name__}")
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 255:
            raise DecodeFailure(f"Drawing payload contains invalid byte value: {item!r}")
    return bytes(value)


def entry_from_json(value: Any) -> Entry:
    if not isinstance(value, dict) or len(value) != 1:
        raise DecodeFailure(f"Entry must be an object with exactly one tag, got {value!r:.80}")
    tag, payload = next(iter(value.items()))
    if tag == PHRASE_TAG:
        if not isinstance(payload, str):
            raise DecodeFailure(f"Phrase payload must be a string, got {type(payload).__name__}")
        return Phrase(payload)
    if tag == DRAWING_TAG:
        return Drawing(_drawing_bytes(payload))
    raise DecodeFailure(f"Unknown entry tag: {tag!r}")


def encode_entries(entries: Sequence[Entry]) -> bytes:
    """Serialize the whole sequence to ``.tpi`` bytes."""
    payload = [entry_to_json(entry) for entry in entries]
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_entries(data: bytes) -> list[Entry]:
    """Parse ``.tpi`` bytes. Entry alternation is not checked."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeFailure(f"File is not UTF-8 text: {exc}") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeFailure(f"File is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise DecodeFailure(f"Expected a list of entries, got {type(raw).__name__}")
    return [entry_from_json(item) for item in raw]


def encode_pictionary_entry(record: PictionaryEntry) -> dict[str, Any]:
    return {"author": record.author, "entry": entry_to_json(record.entry)}


def decode_pictionary_entry(value: Any) -> PictionaryEntry:
    if not isinstance(value, dict) or set(value) != {"author", "entry"}:
        raise DecodeFailure("Authored entry must have exactly 'author' and 'entry'")
    author = value["author"]
    if not isinstance(author, str):
        raise DecodeFailure("Authored entry 'author' must be a string")
    return PictionaryEntry(author=author, entry=entry_from_json(value["entry"]))


def save_game(entries: Sequence[Entry], filename: str | Path) -> Path:
    """Write ``entries`` to ``filename`` (``.tpi`` appended when missing).

    Existing files are overwritten.
    """
    target = ensure_extension(filename)
    payload = encode_entries(entries)
    try:
        write_bytes_file(target, payload)
    except OSError as exc:
        logger.error("Failed to save game to %s: %s", target, exc)
        raise IoFailure(f"Could not write {target}: {exc.strerror or exc}", target) from exc
    logger.info("Saved %d entries to %s (%d bytes)", len(entries), target, len(payload))
    return target


def load_game(path: str | Path) -> list[Entry]:
    """Read and decode a ``.tpi`` file."""
    source = Path(path)
    try:
        data = read_bytes_file(source)
    except OSError as exc:
        logger.error("Failed to read game file %s: %s", source, exc)
        raise IoFailure(f"Could not read {source}: {exc.strerror or exc}", source) from exc
    try:
        entries = decode_entries(data)
    except DecodeFailure as exc:
        logger.error("Rejected game file %s: %s", source, exc)
        raise
    logger.info("Loaded %d entries from %s", len(entries), source)
    return entries
