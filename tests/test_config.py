"""Tests for configuration module."""

import logging
import os

import pytest

from entry_size.config import (
    CAUTION_THRESHOLD,
    DEFAULT_ENVIRONMENT_ID,
    DEFAULT_FIELD_ID,
    ENTRY_SIZE_LIMIT_BYTES,
    ENV_VARS,
    WARNING_THRESHOLD,
    Settings,
    load_dotenv_file,
    load_settings,
    missing_settings,
    setup_logging,
)


def test_limits_defined():
    """Test that the size limit and thresholds are defined and ordered."""
    assert ENTRY_SIZE_LIMIT_BYTES == 2 * 1024 * 1024
    assert 0 < CAUTION_THRESHOLD < WARNING_THRESHOLD < 1


def test_load_settings_defaults():
    """Test defaults when nothing is configured."""
    settings = load_settings({})

    assert settings == Settings()
    assert settings.environment_id == DEFAULT_ENVIRONMENT_ID == "master"
    assert settings.field_id == DEFAULT_FIELD_ID == "content"


def test_load_settings_from_environment():
    """Test reading every setting from environment variables."""
    environ = {
        "CONTENTFUL_CMA_ACCESS_TOKEN": "token",
        "CONTENTFUL_SPACE_ID": "space",
        "CONTENTFUL_ENTRY_ID": "entry",
        "CONTENTFUL_ENVIRONMENT_ID": "staging",
        "CONTENTFUL_CONTENT_FIELD_ID": "body",
        "CONTENTFUL_CMA_BASE_URL": "https://api.eu.contentful.com",
    }

    settings = load_settings(environ)

    assert settings.access_token == "token"
    assert settings.space_id == "space"
    assert settings.entry_id == "entry"
    assert settings.environment_id == "staging"
    assert settings.field_id == "body"
    assert settings.base_url == "https://api.eu.contentful.com"


def test_load_settings_ignores_empty_values():
    """Test that empty variables fall back to defaults."""
    settings = load_settings({"CONTENTFUL_ENVIRONMENT_ID": "", "CONTENTFUL_CONTENT_FIELD_ID": ""})

    assert settings.environment_id == "master"
    assert settings.field_id == "content"


def test_missing_settings():
    """Test that missing required settings are reported by variable name."""
    assert missing_settings(Settings()) == [
        "CONTENTFUL_CMA_ACCESS_TOKEN",
        "CONTENTFUL_SPACE_ID",
        "CONTENTFUL_ENTRY_ID",
    ]
    assert missing_settings(Settings(access_token="t", space_id="s", entry_id="e")) == []


def test_load_dotenv_file(tmp_path, monkeypatch):
    """Test loading a .env file without overriding existing variables."""
    monkeypatch.setenv("CONTENTFUL_SPACE_ID", "from-environment")
    monkeypatch.delenv("CONTENTFUL_ENTRY_ID", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("CONTENTFUL_SPACE_ID=from-file\nCONTENTFUL_ENTRY_ID=entry-from-file\n")

    try:
        assert load_dotenv_file(env_file) is True
        assert os.environ["CONTENTFUL_SPACE_ID"] == "from-environment"
        assert os.environ["CONTENTFUL_ENTRY_ID"] == "entry-from-file"
    finally:
        os.environ.pop("CONTENTFUL_ENTRY_ID", None)


def test_load_dotenv_file_missing(tmp_path):
    """Test that a missing .env file is not an error."""
    assert load_dotenv_file(tmp_path / "missing.env") is False


def test_env_vars_cover_settings():
    """Test that every setting has an environment variable."""
    assert set(ENV_VARS) == set(Settings.__dataclass_fields__)


@pytest.mark.parametrize("verbose, level", [(False, logging.INFO), (True, logging.DEBUG)])
def test_setup_logging(verbose, level):
    """Test that setup_logging configures logging without errors."""
    # Clear any existing logging configuration
    logger = logging.getLogger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    setup_logging(verbose=verbose)

    assert logger.level == level
    assert len(logger.handlers) > 0
    assert logger.handlers[0].formatter is not None
