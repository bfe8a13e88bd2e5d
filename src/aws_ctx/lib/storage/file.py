"""Local JSON file storage shared by the settings store and the memento."""

import json
from pathlib import Path
from typing import Any

from aws_ctx.lib.result import Err, Ok, Result


def read(path: Path) -> str | None:
    """Read file contents, or None if it doesn't exist."""
    if not path.exists():
        return None
    return path.read_text()


def write(path: Path, data: str) -> None:
    """Write data to file, creating parent dirs if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data)


def load_json_object(path: Path) -> Result[dict[str, Any], str]:
    """Load a JSON object from path. A missing file is an empty object."""
    try:
        raw = read(path)
    except (OSError, UnicodeDecodeError) as e:
        return Err(f"Cannot read {path}: {e}")
    if raw is None or not raw.strip():
        return Ok({})
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return Err(f"Invalid JSON in {path}: {e}")
    if not isinstance(data, dict):
        return Err(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return Ok(data)


def dump_json_object(path: Path, data: dict[str, Any]) -> None:
    """Write a JSON object to path, pretty printed."""
    write(path, json.dumps(data, indent=2, sort_keys=True) + "\n")
