"""Log-based rendering of entry size reports."""

import logging
from pathlib import Path
from typing import Iterable

from ..config import SAMPLE_LOCALE_COUNT, SAMPLE_PREVIEW_LENGTH
from ..parse.entry import Entry
from ..parse.locales import Locale
from ..parse.rich_text import PlainText, RichDocument
from ..utilities.file_io import write_json_file
from ..utilities.formatting import format_bytes, truncate
from .entry import AggregateReport, MissingFieldError, UsageBand, get_entry_analysis
from .sizes import serialize_json

logger = logging.getLogger(__name__)

_RULE = "=" * 70


def log_content_sample(
    entry: Entry,
    field_id: str,
    locales: list[Locale],
    count: int = SAMPLE_LOCALE_COUNT,
) -> None:
    """Log a short preview of the field's value for the first few locales."""
    values = entry.fields.get(field_id, {})
    logger.debug("Sample content for first %d locales:", count)
    for locale in locales[:count]:
        value = values.get(locale.code)
        if isinstance(value, PlainText):
            kind, preview = "string", truncate(serialize_json(value.text), SAMPLE_PREVIEW_LENGTH)
        elif isinstance(value, RichDocument):
            kind, preview = "object", truncate(serialize_json(value.raw), SAMPLE_PREVIEW_LENGTH)
        else:
            kind, preview = "missing", "null/undefined"
        logger.debug("  %s: %s - %s", locale.code, kind, preview)


def log_report(report: AggregateReport) -> None:
    """Log a full size report."""
    logger.info("\033[1mField '%s' size per locale:\033[0m", report.field_id)
    for analysis in report.locales:
        status = "✓" if analysis.has_content else "✗"
        overhead = ""
        if analysis.overhead.overhead_size:
            overhead = " (%s%% markup)" % analysis.overhead.overhead_percentage
        logger.info(
            "  %s %-8s | %10s | %7d chars | %s%s",
            status,
            analysis.locale_code,
            format_bytes(analysis.size_in_bytes),
            analysis.character_count,
            analysis.locale_name,
            overhead,
        )

    logger.info("")
    logger.info(_RULE)
    logger.info("\033[1mSummary:\033[0m")
    logger.info("  Total locales: %d", report.total_locales)
    logger.info("  Locales with content: %d", report.locales_with_content)
    logger.info("  Locales without content: %d", report.locales_without_content)

    logger.info("")
    logger.info("\033[1mSize Breakdown:\033[0m")
    logger.info("  Total '%s' field size: %s", report.field_id, format_bytes(report.totals.size_in_bytes))
    logger.info("    Text content: %s", format_bytes(report.totals.content_size))
    logger.info(
        "    Structural overhead: %s (%s%%)",
        format_bytes(report.totals.overhead_size),
        report.overhead_percentage,
    )
    logger.info("  Total entry size (all fields): %s", format_bytes(report.entry_total_size))

    logger.info("")
    logger.info("\033[1mEntry Size Limit:\033[0m")
    logger.info("  Limit: %s", format_bytes(report.limit_bytes))
    logger.info("  Current usage: %.2f%%", report.usage_percentage)
    if report.usage_band is UsageBand.WARNING:
        logger.warning("  WARNING: Entry is at %.2f%% of the size limit!", report.usage_percentage)
    elif report.usage_band is UsageBand.CAUTION:
        logger.warning("  CAUTION: Entry is at %.2f%% of the size limit", report.usage_percentage)
    else:
        logger.info("  Entry size is within safe limits")

    if report.locales_with_content:
        logger.info("")
        logger.info("\033[1mField Averages:\033[0m")
        logger.info("  Average size per locale: %s", format_bytes(report.average_size_in_bytes))
        logger.info("  Average characters per locale: %d", report.average_character_count)

    logger.info("")
    logger.info("\033[1mField Size Breakdown:\033[0m")
    for field_size in report.field_sizes:
        logger.info(
            "  %-20s | %12s | %5.1f%%",
            field_size.field_id,
            format_bytes(field_size.size_in_bytes),
            field_size.percentage_of_entry,
        )

    if report.extremes is not None:
        largest = report.extremes.largest
        smallest = report.extremes.smallest
        logger.info("")
        logger.info("  Largest content: %s (%s)", largest.locale_code, format_bytes(largest.size_in_bytes))
        logger.info("  Smallest content: %s (%s)", smallest.locale_code, format_bytes(smallest.size_in_bytes))


def analyze_entry(
    locales: Iterable[Locale],
    entry: Entry,
    field_id: str,
    output: Path | None = None,
    **options,
) -> int:
    """
    Analyze an entry and log the report.

    Args:
        locales: All locales of the environment
        entry: Parsed entry
        field_id: Field to analyze per locale
        output: Optional path to write the report as JSON
        **options: Passed through to get_entry_analysis (limit and thresholds)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        report = get_entry_analysis(locales, entry, field_id, **options)
    except MissingFieldError as e:
        logger.error("Content field '%s' not found in entry", e.field_id)
        logger.info("Available fields: %s", ", ".join(e.available))
        return 1

    log_report(report)

    if output is not None:
        if not write_json_file(output, report.to_dict()):
            return 1
        logger.info("")
        logger.info("Report written to %s", output)

    return 0
