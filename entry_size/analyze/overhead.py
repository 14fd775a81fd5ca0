"""Structural overhead of rich-text field values."""

import logging
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..parse.rich_text import RichDocument
from .rich_text import extract_text
from .sizes import byte_size, is_empty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverheadResult:
    """How a value's serialized size splits into text and JSON structure."""

    total_size: int = 0
    content_size: int = 0
    overhead_size: int = 0
    overhead_percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def percentage(part: int, whole: int, digits: int = 1) -> float:
    """Return part as a percentage of whole rounded half up, or 0.0 when whole is 0."""
    if whole == 0:
        return 0.0
    exact = Decimal(part / whole * 100)
    return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def analyze_overhead(value: Any) -> OverheadResult:
    """
    Split a field value's size into actual text and structural overhead.

    Plain text has no overhead. For rich documents the overhead is the
    serialized size minus the UTF-8 size of the extracted text, so
    total_size == content_size + overhead_size always holds.

    Args:
        value: PlainText, RichDocument or None

    Returns:
        OverheadResult
    """
    if is_empty(value):
        return OverheadResult()

    total_size = byte_size(value)

    if not isinstance(value, RichDocument):
        return OverheadResult(total_size=total_size, content_size=total_size)

    content_size = byte_size(extract_text(value))
    overhead_size = total_size - content_size

    if overhead_size < 0:
        # Extracted text can only outgrow its own serialization if raw and root disagree
        logger.warning(
            "Extracted text (%d bytes) exceeds serialized document (%d bytes); clamping",
            content_size,
            total_size,
        )
        content_size = total_size
        overhead_size = 0

    return OverheadResult(
        total_size=total_size,
        content_size=content_size,
        overhead_size=overhead_size,
        overhead_percentage=percentage(overhead_size, total_size),
    )
