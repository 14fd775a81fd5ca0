"""Tests for CLI module."""

import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from entry_size.cli import main
from entry_size.config import ENV_VARS
from entry_size.utilities import ContentfulError, FetchedEntry

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ENTRY_FILE = FIXTURES_DIR / "entry.json"
LOCALES_FILE = FIXTURES_DIR / "locales.json"


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Contentful variables and return args pointing at no .env file."""
    for variable in ENV_VARS.values():
        monkeypatch.delenv(variable, raising=False)
    return ["--env-file", str(tmp_path / "missing.env")]


@pytest.fixture
def configured_env(monkeypatch, clean_env):
    """Provide the required Contentful variables."""
    monkeypatch.setenv("CONTENTFUL_CMA_ACCESS_TOKEN", "token")
    monkeypatch.setenv("CONTENTFUL_SPACE_ID", "space123")
    monkeypatch.setenv("CONTENTFUL_ENTRY_ID", "entry123")
    return clean_env


def fetched_fixture():
    return FetchedEntry(
        space_name="Marketing",
        environment_id="master",
        locales=json.loads(LOCALES_FILE.read_text(encoding="utf-8")),
        entry=json.loads(ENTRY_FILE.read_text(encoding="utf-8")),
    )


class TestOfflineMode:
    """Tests for analyzing exported files."""

    def test_analyze_files_success(self, clean_env):
        """Test analyzing exported entry and locale files."""
        result = main(clean_env + ["--entry-file", str(ENTRY_FILE), "--locales-file", str(LOCALES_FILE)])

        assert result == 0

    def test_analyze_files_with_output(self, clean_env, tmp_path):
        """Test writing the JSON report."""
        output = tmp_path / "report.json"

        result = main(
            clean_env
            + [
                "--entry-file", str(ENTRY_FILE),
                "--locales-file", str(LOCALES_FILE),
                "--field", "title",
                "--output", str(output),
            ]
        )

        assert result == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["field_id"] == "title"
        assert data["summary"]["locales_with_content"] == 3

    def test_entry_file_requires_locales_file(self, clean_env):
        """Test that offline mode needs both files."""
        assert main(clean_env + ["--entry-file", str(ENTRY_FILE)]) == 1
        assert main(clean_env + ["--locales-file", str(LOCALES_FILE)]) == 1

    def test_unreadable_entry_file(self, clean_env, tmp_path):
        """Test that a missing entry file fails."""
        result = main(
            clean_env
            + ["--entry-file", str(tmp_path / "nope.json"), "--locales-file", str(LOCALES_FILE)]
        )

        assert result == 1

    def test_invalid_entry_payload(self, clean_env, tmp_path):
        """Test that an entry without fields fails."""
        entry_file = tmp_path / "entry.json"
        entry_file.write_text(json.dumps({"sys": {"id": "x"}}))

        result = main(clean_env + ["--entry-file", str(entry_file), "--locales-file", str(LOCALES_FILE)])

        assert result == 1

    def test_missing_field(self, clean_env):
        """Test that an unknown field fails."""
        result = main(
            clean_env
            + ["--entry-file", str(ENTRY_FILE), "--locales-file", str(LOCALES_FILE), "--field", "body"]
        )

        assert result == 1

    def test_invalid_limit(self, clean_env):
        """Test that a non-positive limit is rejected."""
        result = main(
            clean_env
            + ["--entry-file", str(ENTRY_FILE), "--locales-file", str(LOCALES_FILE), "--limit-bytes", "0"]
        )

        assert result == 1

    def test_verbose_logs_sample(self, clean_env, caplog):
        """Test that verbose mode logs the content sample."""
        with caplog.at_level(logging.DEBUG):
            result = main(
                clean_env
                + ["--entry-file", str(ENTRY_FILE), "--locales-file", str(LOCALES_FILE), "--verbose"]
            )

        assert result == 0
        assert "Sample content for first 3 locales" in caplog.text
        assert "Entry entry123 fields: title, slug, content" in caplog.text


class TestApiMode:
    """Tests for fetching from the API."""

    def test_missing_environment_variables(self, clean_env, caplog):
        """Test that missing settings are listed."""
        result = main(clean_env)

        assert result == 1
        assert "CONTENTFUL_CMA_ACCESS_TOKEN" in caplog.text
        assert "CONTENTFUL_SPACE_ID" in caplog.text
        assert "CONTENTFUL_ENTRY_ID" in caplog.text

    def test_fetch_success(self, configured_env):
        """Test a successful fetch and analysis."""
        with patch("entry_size.cli.fetch_entry", return_value=fetched_fixture()) as mock_fetch:
            result = main(configured_env)

        assert result == 0
        settings = mock_fetch.call_args[0][0]
        assert settings.entry_id == "entry123"
        assert settings.environment_id == "master"

    def test_arguments_override_environment(self, configured_env):
        """Test that CLI flags take precedence over environment variables."""
        with patch("entry_size.cli.fetch_entry", return_value=fetched_fixture()) as mock_fetch:
            result = main(
                configured_env
                + ["--entry-id", "other", "--environment", "staging", "--field", "title"]
            )

        assert result == 0
        settings = mock_fetch.call_args[0][0]
        assert settings.entry_id == "other"
        assert settings.environment_id == "staging"
        assert settings.field_id == "title"

    def test_arguments_satisfy_required_settings(self, clean_env, monkeypatch):
        """Test that ids given as flags count as configured."""
        monkeypatch.setenv("CONTENTFUL_CMA_ACCESS_TOKEN", "token")

        with patch("entry_size.cli.fetch_entry", return_value=fetched_fixture()):
            result = main(clean_env + ["--space-id", "space123", "--entry-id", "entry123"])

        assert result == 0

    def test_api_error(self, configured_env, caplog):
        """Test that API errors are logged with status and body."""
        error = ContentfulError(404, "https://api.contentful.com/x", {"message": "not found"})

        with patch("entry_size.cli.fetch_entry", side_effect=error):
            result = main(configured_env)

        assert result == 1
        assert "Response status: 404" in caplog.text
        assert "not found" in caplog.text

    def test_network_error(self, configured_env):
        """Test that network failures after retries fail cleanly."""
        with patch("entry_size.cli.fetch_entry", side_effect=httpx.ConnectError("down")):
            result = main(configured_env)

        assert result == 1

    def test_dotenv_file_is_loaded(self, clean_env, tmp_path):
        """Test that settings can come from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "CONTENTFUL_CMA_ACCESS_TOKEN=token\n"
            "CONTENTFUL_SPACE_ID=space123\n"
            "CONTENTFUL_ENTRY_ID=entry123\n"
        )

        try:
            with patch("entry_size.cli.fetch_entry", return_value=fetched_fixture()) as mock_fetch:
                result = main(["--env-file", str(env_file)])
        finally:
            for variable in ("CONTENTFUL_CMA_ACCESS_TOKEN", "CONTENTFUL_SPACE_ID", "CONTENTFUL_ENTRY_ID"):
                os.environ.pop(variable, None)

        assert result == 0
        assert mock_fetch.call_args[0][0].space_id == "space123"


def test_help(capsys):
    """Test that --help prints usage."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert "usage:" in captured.out.lower()
    assert "--entry-file" in captured.out
