"""Parser for Contentful locale collections."""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locale:
    """A locale enabled in the environment."""

    code: str
    name: str


def parse_locales(data: Any) -> list[Locale]:
    """
    Parse a locale collection from the Content Management API.

    Accepts either the collection response (``{"items": [...]}``) or a bare
    list of locale objects. Items without a string ``code`` are skipped.
    The collection order is kept; callers sort as needed.

    Args:
        data: Raw JSON locale collection

    Returns:
        List of Locale objects
    """
    if isinstance(data, dict):
        items = data.get("items", [])
    elif isinstance(data, list):
        items = data
    else:
        logger.warning("Unexpected locale collection type: %s", type(data).__name__)
        return []

    locales = []
    for item in items:
        code = item.get("code") if isinstance(item, dict) else None
        if not isinstance(code, str) or not code:
            logger.warning("Skipping locale without a code: %r", item)
            continue

        name = item.get("name")
        if not isinstance(name, str) or not name:
            name = code

        locales.append(Locale(code=code, name=name))

    return locales
