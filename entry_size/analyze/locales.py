"""Per-locale size analysis of a single field."""

from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping

from ..parse.locales import Locale
from .overhead import OverheadResult, analyze_overhead
from .sizes import byte_size, character_count, is_empty


@dataclass(frozen=True)
class LocaleAnalysis:
    """Size measurements of one locale's value."""

    locale_code: str
    locale_name: str
    size_in_bytes: int
    character_count: int
    overhead: OverheadResult
    has_content: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale_code": self.locale_code,
            "locale_name": self.locale_name,
            "size_in_bytes": self.size_in_bytes,
            "character_count": self.character_count,
            "overhead": self.overhead.to_dict(),
            "has_content": self.has_content,
        }


@dataclass(frozen=True)
class LocaleTotals:
    """Running totals over the locales that have content."""

    size_in_bytes: int = 0
    character_count: int = 0
    content_size: int = 0
    overhead_size: int = 0
    locales_with_content: int = 0

    def add(self, analysis: LocaleAnalysis) -> "LocaleTotals":
        """Return new totals including analysis (unchanged if it has no content)."""
        if not analysis.has_content:
            return self
        return replace(
            self,
            size_in_bytes=self.size_in_bytes + analysis.size_in_bytes,
            character_count=self.character_count + analysis.character_count,
            content_size=self.content_size + analysis.overhead.content_size,
            overhead_size=self.overhead_size + analysis.overhead.overhead_size,
            locales_with_content=self.locales_with_content + 1,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "size_in_bytes": self.size_in_bytes,
            "character_count": self.character_count,
            "content_size": self.content_size,
            "overhead_size": self.overhead_size,
            "locales_with_content": self.locales_with_content,
        }


def sort_locales(locales: Iterable[Locale]) -> list[Locale]:
    """Sort locales by code, case-sensitive, for reproducible output."""
    return sorted(locales, key=lambda locale: locale.code)


def analyze_locale(locale: Locale, value: Any) -> LocaleAnalysis:
    """Measure one locale's value of the analyzed field."""
    return LocaleAnalysis(
        locale_code=locale.code,
        locale_name=locale.name,
        size_in_bytes=byte_size(value),
        character_count=character_count(value),
        overhead=analyze_overhead(value),
        has_content=not is_empty(value),
    )


def analyze_locales(
    field_values: Mapping[str, Any],
    locales: Iterable[Locale],
) -> tuple[list[LocaleAnalysis], LocaleTotals]:
    """
    Analyze a field's value for every locale.

    Locales are processed in ascending code order. A locale missing from
    field_values is analyzed as empty.

    Args:
        field_values: Map of locale code to field value
        locales: All locales of the environment, in any order

    Returns:
        Tuple of (analyses in locale code order, totals over locales with content)
    """
    analyses = []
    totals = LocaleTotals()

    for locale in sort_locales(locales):
        analysis = analyze_locale(locale, field_values.get(locale.code))
        analyses.append(analysis)
        totals = totals.add(analysis)

    return analyses, totals
