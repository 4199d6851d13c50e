"""Utilities for reading the JSON seed content the registry is built from."""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any


def read_json(path: Path | str) -> Any:
    """Parse a UTF-8 JSON file. Raises ValueError on unreadable content."""
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def require_object(data: Any, err: str = "Expected a JSON object.") -> dict:
    """Strict: must be an object, else raise."""
    if not isinstance(data, dict):
        raise ValueError(err)
    return data


def require_array(data: Any, err: str = "Expected a JSON array.") -> list:
    """Strict: must be an array, else raise."""
    if not isinstance(data, list):
        raise ValueError(err)
    return data
