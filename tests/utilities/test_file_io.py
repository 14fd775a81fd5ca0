"""Tests for JSON file I/O utilities."""

import json
from pathlib import Path

from entry_size.utilities.file_io import read_json_file, write_json_file

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def test_read_json_file_success():
    """Test successful JSON file reading."""
    data = read_json_file(FIXTURES_DIR / "entry.json")

    assert isinstance(data, dict)
    assert "fields" in data
    assert "sys" in data


def test_read_json_file_missing_file():
    """Test reading non-existent JSON file returns default."""
    filepath = Path("/nonexistent/file.json")

    assert read_json_file(filepath) is None
    assert read_json_file(filepath, default={}) == {}


def test_read_json_file_corrupted_json(tmp_path, caplog):
    """Test reading corrupted JSON file returns default."""
    filepath = tmp_path / "corrupted.json"
    filepath.write_text("{ invalid json here }")

    assert read_json_file(filepath, default=[]) == []
    assert "Error parsing JSON" in caplog.text


def test_write_json_file(tmp_path):
    """Test writing JSON creates parent directories and keeps unicode."""
    filepath = tmp_path / "nested" / "report.json"

    assert write_json_file(filepath, {"name": "München"}) is True

    content = filepath.read_text(encoding="utf-8")
    assert "München" in content
    assert json.loads(content) == {"name": "München"}


def test_write_json_file_error(tmp_path, caplog):
    """Test that write errors are logged and reported."""
    blocker = tmp_path / "file"
    blocker.write_text("")

    assert write_json_file(blocker / "report.json", {}) is False
    assert "Error writing file" in caplog.text
