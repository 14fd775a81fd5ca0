"""Parsers turning Content Management API payloads into typed values."""

from .entry import Entry, EntryFormatError, parse_entry
from .locales import Locale, parse_locales
from .rich_text import (
    FieldValue,
    NodeKind,
    PlainText,
    RichDocument,
    RichNode,
    parse_field_value,
    parse_rich_node,
)

__all__ = [
    "Entry",
    "EntryFormatError",
    "parse_entry",
    "Locale",
    "parse_locales",
    "FieldValue",
    "NodeKind",
    "PlainText",
    "RichDocument",
    "RichNode",
    "parse_field_value",
    "parse_rich_node",
]
