"""Append-only manifest helpers for the fingerprint store."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterator

from phashkit.errors import CorruptDataError, FingerprintIOError
from phashkit.utils.io import ensure_dir

MANIFEST_NAME = "_manifest.jsonl"

__all__ = ["MANIFEST_NAME", "append_manifest_line", "iter_manifest"]


def append_manifest_line(root: str | Path, row: Dict[str, object]) -> Path:
    """Append ``row`` to the manifest JSONL file under ``root``.

    The root directory is created when missing. Each row is written as one
    serialized JSON object followed by a newline; the manifest path is returned.
    """

    root_path = ensure_dir(root)
    manifest_path = root_path / MANIFEST_NAME
    serialized = json.dumps(row, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    try:
        with manifest_path.open("a", encoding="utf-8") as handle:
            handle.write(serialized)
            handle.write("\n")
    except OSError as exc:
        raise FingerprintIOError(f"Failed to append to manifest '{manifest_path}': {exc}") from exc
    return manifest_path


def iter_manifest(root: str | Path) -> Iterator[Dict[str, object]]:
    """Yield manifest entries stored under ``root``.

    Blank lines are skipped. Malformed lines raise :class:`CorruptDataError` so
    corruption surfaces early; a missing manifest yields nothing.
    """

    manifest_path = Path(root) / MANIFEST_NAME
    if not manifest_path.exists():
        return iter(())

    def _generator() -> Iterator[Dict[str, object]]:
        try:
            with manifest_path.open("r", encoding="utf-8") as handle:
                for lineno, line in enumerate(handle, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        row = json.loads(line)
                    except (ValueError, RecursionError) as exc:
                        raise CorruptDataError(
                            f"Malformed manifest line {lineno} in '{manifest_path}': {exc}"
                        ) from exc
                    if not isinstance(row, dict):
                        raise CorruptDataError(f"Manifest line {lineno} in '{manifest_path}' is not an object")
                    yield row
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"Manifest '{manifest_path}' is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise FingerprintIOError(f"Failed to read manifest '{manifest_path}': {exc}") from exc

    return _generator()
