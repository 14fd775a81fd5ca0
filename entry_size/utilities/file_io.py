"""JSON file I/O utilities with error handling."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json_file(filepath: Path, default: Any = None) -> Any:
    """Read and parse a JSON file with error handling.

    Args:
        filepath: Path to the JSON file to read
        default: Value to return if file cannot be read or parsed

    Returns:
        Parsed JSON data, or default value on error
    """
    try:
        content = filepath.read_text(encoding="utf-8")
        return json.loads(content)
    except OSError as e:
        logger.error("Error reading file %s: %s", filepath, e)
        return default
    except json.JSONDecodeError as e:
        logger.error("Error parsing JSON from %s: %s", filepath, e)
        return default


def write_json_file(filepath: Path, data: Any, indent: int = 2) -> bool:
    """Write data as UTF-8 JSON, creating parent directories.

    Args:
        filepath: Destination path
        data: JSON-serializable data
        indent: JSON indentation (default: 2)

    Returns:
        True if the file was written, False on error
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        logger.error("Error writing file %s: %s", filepath, e)
        return False
    return True
