"""Size analysis of Contentful entries."""

from .entry import (
    AggregateReport,
    FieldSize,
    LocaleExtremes,
    MissingFieldError,
    UsageBand,
    classify_usage,
    entry_total_size,
    get_entry_analysis,
    get_field_sizes,
    select_extremes,
    usage_percentage,
)
from .locales import LocaleAnalysis, LocaleTotals, analyze_locales
from .overhead import OverheadResult, analyze_overhead
from .report import analyze_entry, log_content_sample, log_report
from .rich_text import extract_text
from .sizes import byte_size, character_count, serialize_json

__all__ = [
    "AggregateReport",
    "FieldSize",
    "LocaleExtremes",
    "MissingFieldError",
    "UsageBand",
    "classify_usage",
    "entry_total_size",
    "get_entry_analysis",
    "get_field_sizes",
    "select_extremes",
    "usage_percentage",
    "LocaleAnalysis",
    "LocaleTotals",
    "analyze_locales",
    "OverheadResult",
    "analyze_overhead",
    "analyze_entry",
    "log_content_sample",
    "log_report",
    "extract_text",
    "byte_size",
    "character_count",
    "serialize_json",
]
