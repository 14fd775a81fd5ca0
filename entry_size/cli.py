#!/usr/bin/env python3
"""Command-line interface for Contentful entry size analysis."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import httpx

from .analyze import analyze_entry, log_content_sample
from .analyze.locales import sort_locales
from .config import (
    ENTRY_SIZE_LIMIT_BYTES,
    load_dotenv_file,
    load_settings,
    missing_settings,
    setup_logging,
)
from .parse import EntryFormatError, parse_entry, parse_locales
from .utilities import ContentfulError, RateLimitError, ServerError, fetch_entry, read_json_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description=(
            "Contentful entry size analyzer: measure a field per locale "
            "and the whole entry against the 2MB entry limit"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--entry-id", help="Entry to analyze (default: $CONTENTFUL_ENTRY_ID)")
    parser.add_argument("--space-id", help="Space of the entry (default: $CONTENTFUL_SPACE_ID)")
    parser.add_argument(
        "--environment",
        help="Environment of the entry (default: $CONTENTFUL_ENVIRONMENT_ID or 'master')",
    )
    parser.add_argument(
        "--field",
        help="Field to analyze per locale (default: $CONTENTFUL_CONTENT_FIELD_ID or 'content')",
    )

    parser.add_argument(
        "--entry-file",
        type=Path,
        metavar="PATH",
        help="Analyze an exported entry JSON file instead of fetching it (requires --locales-file)",
    )
    parser.add_argument(
        "--locales-file",
        type=Path,
        metavar="PATH",
        help="Exported locale collection JSON file used with --entry-file",
    )

    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Also write the report as JSON to PATH",
    )
    parser.add_argument(
        "--limit-bytes",
        type=int,
        default=ENTRY_SIZE_LIMIT_BYTES,
        metavar="N",
        help="Entry size limit in bytes (default: %(default)d)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        metavar="PATH",
        help="Load settings from this .env file if it exists (default: .env)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging, including a sample of the field content",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    if args.limit_bytes <= 0:
        logger.error("--limit-bytes must be positive")
        return 1

    load_dotenv_file(args.env_file)
    settings = load_settings()

    overrides = {
        "entry_id": args.entry_id,
        "space_id": args.space_id,
        "environment_id": args.environment,
        "field_id": args.field,
    }
    settings = replace(settings, **{key: value for key, value in overrides.items() if value})

    # Offline mode: analyze exported files
    if args.entry_file is not None or args.locales_file is not None:
        if args.entry_file is None or args.locales_file is None:
            logger.error("--entry-file and --locales-file must be used together")
            return 1

        raw_entry = read_json_file(args.entry_file)
        raw_locales = read_json_file(args.locales_file)
        if raw_entry is None or raw_locales is None:
            return 1
    else:
        missing = missing_settings(settings)
        if missing:
            logger.error("Missing required environment variables:")
            for name in missing:
                logger.error("  - %s", name)
            logger.info("Please copy .env.example to .env and fill in your values.")
            return 1

        try:
            fetched = fetch_entry(settings)
        except ContentfulError as e:
            logger.error("Error occurred: %s", e)
            logger.error("Response status: %d", e.status_code)
            logger.error("Response data: %s", e.body)
            return 1
        except (httpx.HTTPError, ServerError, RateLimitError, ValueError) as e:
            logger.error("Error occurred: %s", e)
            return 1

        raw_entry = fetched.entry
        raw_locales = fetched.locales

    try:
        entry = parse_entry(raw_entry)
    except EntryFormatError as e:
        logger.error("Invalid entry data: %s", e)
        return 1

    locales = parse_locales(raw_locales)
    logger.debug("Entry %s fields: %s", entry.entry_id or "(no id)", ", ".join(entry.fields))

    if args.verbose:
        log_content_sample(entry, settings.field_id, sort_locales(locales))

    logger.info("")
    result = analyze_entry(
        locales,
        entry,
        settings.field_id,
        output=args.output,
        limit_bytes=args.limit_bytes,
    )
    if result == 0:
        logger.info("")
        logger.info("Analysis complete!")

    return result


if __name__ == "__main__":
    sys.exit(main())
