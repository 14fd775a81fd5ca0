"""Configuration for the entry size analyzer."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Mapping

from dotenv import load_dotenv

CMA_BASE_URL: Final[str] = "https://api.contentful.com"
CMA_CONTENT_TYPE: Final[str] = "application/vnd.contentful.management.v1+json"

# Contentful rejects entries whose serialized JSON exceeds 2 MiB
ENTRY_SIZE_LIMIT_BYTES: Final[int] = 2 * 1024 * 1024
CAUTION_THRESHOLD: Final[float] = 0.6
WARNING_THRESHOLD: Final[float] = 0.8

DEFAULT_FIELD_ID: Final[str] = "content"
DEFAULT_ENVIRONMENT_ID: Final[str] = "master"

# Number of locales shown in the debug content sample
SAMPLE_LOCALE_COUNT: Final[int] = 3
SAMPLE_PREVIEW_LENGTH: Final[int] = 100

# Environment variable names, keyed by Settings attribute
ENV_VARS: Final[dict[str, str]] = {
    "access_token": "CONTENTFUL_CMA_ACCESS_TOKEN",
    "space_id": "CONTENTFUL_SPACE_ID",
    "entry_id": "CONTENTFUL_ENTRY_ID",
    "environment_id": "CONTENTFUL_ENVIRONMENT_ID",
    "field_id": "CONTENTFUL_CONTENT_FIELD_ID",
    "base_url": "CONTENTFUL_CMA_BASE_URL",
}

REQUIRED_SETTINGS: Final[tuple[str, ...]] = ("access_token", "space_id", "entry_id")


@dataclass(frozen=True)
class Settings:
    """Connection settings for one analysis run."""

    access_token: str | None = None
    space_id: str | None = None
    entry_id: str | None = None
    environment_id: str = DEFAULT_ENVIRONMENT_ID
    field_id: str = DEFAULT_FIELD_ID
    base_url: str = CMA_BASE_URL


def load_dotenv_file(path: Path | str = ".env") -> bool:
    """Load variables from a .env file without overriding the environment.

    Returns:
        True if the file existed and was loaded
    """
    path = Path(path)
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Empty values are treated as unset so that defaults still apply.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance
    """
    if environ is None:
        environ = os.environ

    values = {}
    for attribute, variable in ENV_VARS.items():
        value = environ.get(variable)
        if value:
            values[attribute] = value

    return Settings(**values)


def missing_settings(settings: Settings) -> list[str]:
    """Return environment variable names of required settings that are unset."""
    return [ENV_VARS[name] for name in REQUIRED_SETTINGS if not getattr(settings, name)]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
