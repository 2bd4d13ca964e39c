"""JSON IO helpers for phashkit artefacts."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from phashkit.errors import CorruptDataError, FingerprintIOError

__all__ = ["read_json", "write_json", "ensure_dir", "ensure_parent_dir"]


def read_json(path: str | Path) -> Dict[str, Any]:
    """Load a JSON object from ``path``.

    Raises :class:`FingerprintIOError` when the file can't be read and
    :class:`CorruptDataError` when it doesn't hold a JSON object.
    """

    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except UnicodeDecodeError as exc:
        raise CorruptDataError(f"JSON file '{file_path}' is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise FingerprintIOError(f"Failed to read JSON file '{file_path}': {exc}") from exc

    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as exc:
        # ValueError also covers integer literals past the int digit limit.
        raise CorruptDataError(f"Invalid JSON in '{file_path}': {exc}") from exc
    if not isinstance(data, dict):
        raise CorruptDataError(f"Expected a JSON object in '{file_path}', got {type(data).__name__}")
    return data


def ensure_dir(path: str | Path) -> Path:
    """Create ``path`` (and parents) if needed and return it."""

    dir_path = Path(path)
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FingerprintIOError(f"Failed to create directory '{dir_path}': {exc}") from exc
    return dir_path


def ensure_parent_dir(path: str | Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return the ``Path``."""

    file_path = Path(path)
    ensure_dir(file_path.parent)
    return file_path


def write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """Persist ``obj`` to ``path`` with deterministic formatting."""

    file_path = ensure_parent_dir(path)
    serialized = json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
    try:
        with file_path.open("w", encoding="utf-8") as handle:
            handle.write(serialized)
            handle.write("\n")
    except OSError as exc:
        raise FingerprintIOError(f"Failed to write JSON file '{file_path}': {exc}") from exc
