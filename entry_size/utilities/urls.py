"""URL utilities for the Contentful Content Management API."""

from urllib.parse import quote

from ..config import CMA_BASE_URL


def _segment(value: str) -> str:
    return quote(value, safe="")


def get_space_url(space_id: str, base_url: str = CMA_BASE_URL) -> str:
    """
    Generate the CMA URL for a space.

    Args:
        space_id: Space identifier
        base_url: API base URL

    Returns:
        Full URL to the space resource
    """
    return f"{base_url.rstrip('/')}/spaces/{_segment(space_id)}"


def get_environment_url(space_id: str, environment_id: str, base_url: str = CMA_BASE_URL) -> str:
    """Generate the CMA URL for an environment within a space."""
    return f"{get_space_url(space_id, base_url)}/environments/{_segment(environment_id)}"


def get_locales_url(space_id: str, environment_id: str, base_url: str = CMA_BASE_URL) -> str:
    """Generate the CMA URL listing an environment's locales."""
    return f"{get_environment_url(space_id, environment_id, base_url)}/locales"


def get_entry_url(
    space_id: str,
    environment_id: str,
    entry_id: str,
    base_url: str = CMA_BASE_URL,
) -> str:
    """Generate the CMA URL for a single entry."""
    return f"{get_environment_url(space_id, environment_id, base_url)}/entries/{_segment(entry_id)}"
