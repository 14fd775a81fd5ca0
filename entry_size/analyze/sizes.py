"""Byte and character measurement for field values."""

import json
from typing import Any

from ..parse.rich_text import PlainText, RichDocument


def serialize_json(value: Any) -> str:
    """
    Serialize a JSON value the way the Content Management API stores it.

    Compact separators, non-ASCII kept as-is and insertion-ordered keys.
    Every size in the analyzer goes through this function so that field
    sizes stay consistent with the whole-entry size.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units (characters outside the BMP count twice)."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def _as_text(value: Any) -> str | None:
    """Return the string to measure for a value, or None when it is empty."""
    if isinstance(value, PlainText):
        value = value.text
    elif isinstance(value, RichDocument):
        value = value.raw

    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    return serialize_json(value)


def is_empty(value: Any) -> bool:
    """True for absent values and empty strings."""
    return _as_text(value) is None


def byte_size(value: Any) -> int:
    """
    Size in bytes of a field value.

    Plain text is measured as its UTF-8 encoding; structured values as the
    UTF-8 encoding of their JSON serialization. Empty values measure 0.
    """
    text = _as_text(value)
    if text is None:
        return 0
    return len(text.encode("utf-8", "surrogatepass"))


def character_count(value: Any) -> int:
    """
    Character count of a field value in UTF-16 code units.

    Structured values count the characters of their JSON serialization,
    a proxy for how long the stored JSON text is.
    """
    text = _as_text(value)
    if text is None:
        return 0
    return utf16_length(text)
