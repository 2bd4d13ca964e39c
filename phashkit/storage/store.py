"""Append-only fingerprint store with a JSONL manifest.

Layout::

    <root>/_manifest.jsonl
    <root>/<algorithm_id>/<name>.phash.json

Manifest rows carry the canonical hex magnitude so that lookups can compute
distances without opening every record. Lookups are plain linear scans.
"""
from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from phashkit.errors import InvalidArgumentError
from phashkit.fingerprint.codec import decode_hex, encode_hex
from phashkit.fingerprint.distance import hamming_distance_fast
from phashkit.fingerprint.hash import Fingerprint
from phashkit.storage.manifest import append_manifest_line, iter_manifest
from phashkit.storage.persist import load, save
from phashkit.utils.io import ensure_dir

RECORD_SUFFIX = ".phash.json"

__all__ = [
    "RECORD_SUFFIX",
    "write_fingerprint",
    "query_index",
    "find_nearest",
    "load_entry",
]

log = logging.getLogger("phashkit.storage.store")


def write_fingerprint(
    root: str | Path,
    fingerprint: Fingerprint,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Persist ``fingerprint`` into the store and append a manifest row.

    ``name`` defaults to ``<algorithm_id>-<hex magnitude>``. The manifest row is
    returned.
    """

    magnitude_hex = encode_hex(fingerprint.magnitude)
    entry_name = name or f"{fingerprint.algorithm_id}-{magnitude_hex or '0'}"
    if "/" in entry_name or "\\" in entry_name or entry_name in {".", ".."}:
        raise InvalidArgumentError(f"Invalid store entry name '{entry_name}'")

    root_path = ensure_dir(root)
    partition = ensure_dir(root_path / str(fingerprint.algorithm_id))
    record_path = save(fingerprint, partition / f"{entry_name}{RECORD_SUFFIX}")

    row = {
        "name": entry_name,
        "algorithm_id": fingerprint.algorithm_id,
        "bit_length": fingerprint.bit_length,
        "kind": fingerprint.kind,
        "magnitude": magnitude_hex,
        "path": _relative_path(record_path, root_path),
        "created_at": dt.datetime.now(dt.timezone.utc).isoformat().replace("+00:00", "Z"),
    }
    append_manifest_line(root_path, row)
    log.info("Stored fingerprint '%s' under %s", entry_name, row["path"])
    return row


def query_index(root: str | Path, limit: Optional[int] = None, **filters: Any) -> List[Dict[str, Any]]:
    """Return manifest rows matching ``filters``.

    Recognised filters: algorithm_id, bit_length, kind, name. ``None`` values
    are ignored.
    """

    def _matches(row: Dict[str, Any]) -> bool:
        for key, value in filters.items():
            if value is None:
                continue
            if key not in row:
                return False
            if key in {"algorithm_id", "bit_length"}:
                try:
                    if int(row[key]) != int(value):
                        return False
                except (TypeError, ValueError):
                    return False
            elif str(row[key]) != str(value):
                return False
        return True

    matched = [row for row in iter_manifest(root) if _matches(row)]
    if limit is not None:
        matched = matched[: int(limit)]
    return matched


def find_nearest(
    root: str | Path,
    probe: Fingerprint,
    max_distance: Optional[int] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Return stored rows compatible with ``probe`` ordered by Hamming distance.

    Only rows with the probe's algorithm id are considered, so the fast
    distance is safe here. Each returned row gains a ``distance`` key.
    """

    results: List[Dict[str, Any]] = []
    for row in query_index(root, algorithm_id=probe.algorithm_id):
        candidate = decode_hex(str(row.get("magnitude", "")))
        distance = hamming_distance_fast(probe, candidate)
        if max_distance is not None and distance > max_distance:
            continue
        results.append({**row, "distance": distance})

    results.sort(key=lambda item: (item["distance"], str(item.get("name", ""))))
    if limit is not None:
        results = results[: int(limit)]
    return results


def load_entry(root: str | Path, row: Dict[str, Any]) -> Fingerprint:
    """Load the full fingerprint referenced by manifest ``row``."""

    return load(Path(root) / str(row["path"]))


def _relative_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
