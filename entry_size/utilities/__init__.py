"""Utilities for talking to the Content Management API and writing reports."""

from .client import ContentfulClient, ContentfulError, FetchedEntry, fetch_entry
from .file_io import read_json_file, write_json_file
from .formatting import format_bytes, truncate
from .retry import RateLimitError, ServerError, make_request_with_retry

__all__ = [
    "ContentfulClient",
    "ContentfulError",
    "FetchedEntry",
    "fetch_entry",
    "read_json_file",
    "write_json_file",
    "format_bytes",
    "truncate",
    "RateLimitError",
    "ServerError",
    "make_request_with_retry",
]
