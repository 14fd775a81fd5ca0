"""Parser for Contentful entry payloads."""

import logging
from dataclasses import dataclass
from typing import Any

from .rich_text import FieldValue, PlainText, RichDocument, parse_field_value

logger = logging.getLogger(__name__)


class EntryFormatError(ValueError):
    """Raised when an entry payload has no usable ``fields`` mapping."""

    pass


@dataclass(frozen=True)
class Entry:
    """
    A fetched entry: parsed field values plus the raw payload.

    When ``raw`` is omitted it is rebuilt from ``fields`` so the entry size
    still covers every field in every locale.
    """

    fields: dict[str, dict[str, FieldValue | None]]
    raw: dict[str, Any] | None = None

    def __post_init__(self):
        if self.raw is None:
            object.__setattr__(self, "raw", {"fields": _raw_fields(self.fields)})

    @property
    def entry_id(self) -> str | None:
        sys_data = self.raw.get("sys")
        if isinstance(sys_data, dict):
            return sys_data.get("id")
        return None


def _raw_value(value: FieldValue | None) -> Any:
    if isinstance(value, PlainText):
        return value.text
    if isinstance(value, RichDocument):
        return value.raw
    return None


def _raw_fields(fields: dict[str, dict[str, FieldValue | None]]) -> dict[str, dict[str, Any]]:
    return {
        field_id: {locale_code: _raw_value(value) for locale_code, value in localized.items()}
        for field_id, localized in fields.items()
    }


def parse_entry(data: Any) -> Entry:
    """
    Parse an entry payload into an Entry.

    The raw payload is kept untouched so the whole entry, including its
    ``sys`` and ``metadata`` blocks, can be measured as the API stores it.

    Args:
        data: Raw JSON entry

    Returns:
        Entry

    Raises:
        EntryFormatError: If the payload or its ``fields`` is not an object
    """
    if not isinstance(data, dict):
        raise EntryFormatError(f"Entry payload must be an object, got {type(data).__name__}")

    raw_fields = data.get("fields")
    if not isinstance(raw_fields, dict):
        raise EntryFormatError("Entry payload has no 'fields' object")

    fields: dict[str, dict[str, FieldValue | None]] = {}
    for field_id, localized in raw_fields.items():
        if not isinstance(localized, dict):
            logger.warning("Skipping field %s: expected locale map, got %s", field_id, type(localized).__name__)
            continue

        fields[field_id] = {
            locale_code: parse_field_value(value) for locale_code, value in localized.items()
        }

    return Entry(fields=fields, raw=data)
