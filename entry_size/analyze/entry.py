"""Whole-entry size analysis against the Contentful entry size limit."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from ..config import CAUTION_THRESHOLD, ENTRY_SIZE_LIMIT_BYTES, WARNING_THRESHOLD
from ..parse.entry import Entry
from ..parse.locales import Locale
from .locales import LocaleAnalysis, LocaleTotals, analyze_locales
from .overhead import percentage
from .sizes import byte_size

logger = logging.getLogger(__name__)


class MissingFieldError(KeyError):
    """Raised when the field to analyze does not exist on the entry."""

    def __init__(self, field_id: str, available: Iterable[str] = ()):
        self.field_id = field_id
        self.available = sorted(available)
        super().__init__(field_id)

    def __str__(self) -> str:
        available = ", ".join(self.available) or "none"
        return f"Field '{self.field_id}' not found in entry (available: {available})"


class UsageBand(Enum):
    """How close an entry is to the size limit."""

    SAFE = "safe"
    CAUTION = "caution"
    WARNING = "warning"


@dataclass(frozen=True)
class FieldSize:
    """Serialized size of one field across all of its locales."""

    field_id: str
    size_in_bytes: int
    percentage_of_entry: float


@dataclass(frozen=True)
class LocaleExtremes:
    """Largest and smallest locales, among those with content."""

    largest: LocaleAnalysis
    smallest: LocaleAnalysis


@dataclass(frozen=True)
class AggregateReport:
    """Everything the analyzer knows about one entry."""

    field_id: str
    locales: list[LocaleAnalysis]
    totals: LocaleTotals
    entry_total_size: int
    limit_bytes: int
    usage_percentage: float
    usage_band: UsageBand
    field_sizes: list[FieldSize]
    extremes: LocaleExtremes | None

    @property
    def total_locales(self) -> int:
        return len(self.locales)

    @property
    def locales_with_content(self) -> int:
        return self.totals.locales_with_content

    @property
    def locales_without_content(self) -> int:
        return self.total_locales - self.locales_with_content

    @property
    def average_size_in_bytes(self) -> int:
        return _average(self.totals.size_in_bytes, self.locales_with_content)

    @property
    def average_character_count(self) -> int:
        return _average(self.totals.character_count, self.locales_with_content)

    @property
    def overhead_percentage(self) -> float:
        return percentage(self.totals.overhead_size, self.totals.size_in_bytes)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable form with deterministic ordering."""
        extremes = None
        if self.extremes is not None:
            extremes = {
                "largest": self.extremes.largest.locale_code,
                "largest_size_in_bytes": self.extremes.largest.size_in_bytes,
                "smallest": self.extremes.smallest.locale_code,
                "smallest_size_in_bytes": self.extremes.smallest.size_in_bytes,
            }

        return {
            "field_id": self.field_id,
            "locales": [analysis.to_dict() for analysis in self.locales],
            "summary": {
                "total_locales": self.total_locales,
                "locales_with_content": self.locales_with_content,
                "locales_without_content": self.locales_without_content,
                "totals": self.totals.to_dict(),
                "average_size_in_bytes": self.average_size_in_bytes,
                "average_character_count": self.average_character_count,
                "overhead_percentage": self.overhead_percentage,
            },
            "entry": {
                "total_size": self.entry_total_size,
                "limit_bytes": self.limit_bytes,
                "usage_percentage": self.usage_percentage,
                "usage_band": self.usage_band.value,
            },
            "fields": [
                {
                    "field_id": field_size.field_id,
                    "size_in_bytes": field_size.size_in_bytes,
                    "percentage_of_entry": field_size.percentage_of_entry,
                }
                for field_size in self.field_sizes
            ],
            "extremes": extremes,
        }


def _average(total: int, count: int) -> int:
    """Average rounded half up, 0 for an empty set."""
    if count == 0:
        return 0
    return math.floor(total / count + 0.5)


def entry_total_size(entry: Entry) -> int:
    """Serialized size of the whole entry, the quantity the limit applies to."""
    return byte_size(entry.raw)


def usage_percentage(size: int, limit_bytes: int = ENTRY_SIZE_LIMIT_BYTES) -> float:
    """Entry size as a percentage of the limit, two decimals."""
    return percentage(size, limit_bytes, digits=2)


def classify_usage(
    size: int,
    limit_bytes: int = ENTRY_SIZE_LIMIT_BYTES,
    caution_threshold: float = CAUTION_THRESHOLD,
    warning_threshold: float = WARNING_THRESHOLD,
) -> UsageBand:
    """
    Classify an entry size into a usage band.

    Bands are checked from high to low: above the warning threshold is
    WARNING, above the caution threshold is CAUTION, anything else is SAFE.
    """
    if size > limit_bytes * warning_threshold:
        return UsageBand.WARNING
    if size > limit_bytes * caution_threshold:
        return UsageBand.CAUTION
    return UsageBand.SAFE


def get_field_sizes(entry: Entry, total_size: int | None = None) -> list[FieldSize]:
    """
    Measure every field of the entry across all of its locales.

    Args:
        entry: Parsed entry
        total_size: Whole-entry size used for percentages (computed if omitted)

    Returns:
        FieldSize list, largest first, ties ordered by field id
    """
    if total_size is None:
        total_size = entry_total_size(entry)

    raw_fields = entry.raw.get("fields")
    if not isinstance(raw_fields, dict):
        raw_fields = {}

    sizes = [(field_id, byte_size(value)) for field_id, value in raw_fields.items()]
    sizes.sort(key=lambda item: (-item[1], item[0]))

    return [
        FieldSize(
            field_id=field_id,
            size_in_bytes=size,
            percentage_of_entry=percentage(size, total_size),
        )
        for field_id, size in sizes
    ]


def select_extremes(analyses: Sequence[LocaleAnalysis]) -> LocaleExtremes | None:
    """
    Find the largest and smallest locales by byte size.

    Only locales with content are considered; on ties the first locale in
    the given order wins.

    Returns:
        LocaleExtremes, or None when no locale has content
    """
    with_content = [analysis for analysis in analyses if analysis.has_content]
    if not with_content:
        return None

    largest = smallest = with_content[0]
    for analysis in with_content[1:]:
        if analysis.size_in_bytes > largest.size_in_bytes:
            largest = analysis
        if analysis.size_in_bytes < smallest.size_in_bytes:
            smallest = analysis

    return LocaleExtremes(largest=largest, smallest=smallest)


def get_entry_analysis(
    locales: Iterable[Locale],
    entry: Entry,
    field_id: str,
    limit_bytes: int = ENTRY_SIZE_LIMIT_BYTES,
    caution_threshold: float = CAUTION_THRESHOLD,
    warning_threshold: float = WARNING_THRESHOLD,
) -> AggregateReport:
    """
    Build the full size report for one field of an entry.

    Args:
        locales: All locales of the environment, in any order
        entry: Parsed entry
        field_id: Field whose per-locale sizes are analyzed
        limit_bytes: Entry size limit
        caution_threshold: Fraction of the limit above which usage is CAUTION
        warning_threshold: Fraction of the limit above which usage is WARNING

    Returns:
        AggregateReport

    Raises:
        MissingFieldError: If field_id is not a field of the entry
    """
    if field_id not in entry.fields:
        raise MissingFieldError(field_id, entry.fields.keys())

    analyses, totals = analyze_locales(entry.fields[field_id], locales)

    total_size = entry_total_size(entry)
    logger.debug("Entry serialized size: %d bytes", total_size)

    return AggregateReport(
        field_id=field_id,
        locales=analyses,
        totals=totals,
        entry_total_size=total_size,
        limit_bytes=limit_bytes,
        usage_percentage=usage_percentage(total_size, limit_bytes),
        usage_band=classify_usage(total_size, limit_bytes, caution_threshold, warning_threshold),
        field_sizes=get_field_sizes(entry, total_size),
        extremes=select_extremes(analyses),
    )
