"""Save and load whole fingerprints as tagged JSON records.

Every record carries a ``kind`` tag. Loading validates the record against the
bundled JSON Schema and then dispatches on the tag through a closed table, so
an unknown kind is reported as corrupt data rather than guessed at.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict

from phashkit.errors import CorruptDataError, InvalidArgumentError
from phashkit.fingerprint.codec import decode_hex, encode_hex
from phashkit.fingerprint.fuzzy import FuzzyFingerprint
from phashkit.fingerprint.hash import Fingerprint
from phashkit.utils.io import read_json, write_json
from phashkit.utils.validate import validate_record

RECORD_FORMAT = "phashkit.fingerprint"
RECORD_VERSION = 1

__all__ = ["RECORD_FORMAT", "RECORD_VERSION", "dumps_record", "loads_record", "save", "load"]

log = logging.getLogger("phashkit.storage.persist")


def dumps_record(fingerprint: Fingerprint) -> Dict[str, Any]:
    """Return the JSON-compatible record for ``fingerprint``."""

    record: Dict[str, Any] = {
        "format": RECORD_FORMAT,
        "version": RECORD_VERSION,
        "kind": fingerprint.kind,
        "algorithm_id": fingerprint.algorithm_id,
        "bit_length": fingerprint.bit_length,
        "magnitude": encode_hex(fingerprint.magnitude),
    }
    if isinstance(fingerprint, FuzzyFingerprint):
        record["bit_weights"] = list(fingerprint.bit_weights)
        record["merged_count"] = fingerprint.merged_count
    return record


def _load_plain(record: Dict[str, Any]) -> Fingerprint:
    return Fingerprint(decode_hex(record["magnitude"]), record["bit_length"], record["algorithm_id"])


def _load_fuzzy(record: Dict[str, Any]) -> Fingerprint:
    weights = record["bit_weights"]
    if len(weights) != record["bit_length"]:
        raise CorruptDataError(
            f"Fuzzy record has {len(weights)} weights for bit length {record['bit_length']}"
        )
    if record["merged_count"] == 0 and any(weight != 0 for weight in weights):
        raise CorruptDataError("Fuzzy record has bit weights but a merged count of 0")
    fuzzy = FuzzyFingerprint(weights, record["merged_count"], record["algorithm_id"])
    if fuzzy.magnitude != decode_hex(record["magnitude"]):
        raise CorruptDataError("Fuzzy record magnitude does not match its bit weights")
    return fuzzy


_LOADERS: Dict[str, Callable[[Dict[str, Any]], Fingerprint]] = {
    Fingerprint.kind: _load_plain,
    FuzzyFingerprint.kind: _load_fuzzy,
}


def loads_record(record: Any) -> Fingerprint:
    """Rebuild a fingerprint from a record produced by :func:`dumps_record`."""

    validate_record(record)
    kind = record["kind"]
    loader = _LOADERS.get(kind)
    if loader is None:
        raise CorruptDataError(f"Unknown fingerprint record kind '{kind}'")
    try:
        return loader(record)
    except InvalidArgumentError as exc:
        raise CorruptDataError(f"Invalid {kind} record: {exc.message}") from exc


def save(fingerprint: Fingerprint, destination: str | Path) -> Path:
    """Write ``fingerprint`` to ``destination`` and return the path.

    Raises :class:`~phashkit.errors.FingerprintIOError` on write failures; the
    write is not retried.
    """

    path = Path(destination)
    write_json(path, dumps_record(fingerprint))
    log.debug("Saved %s fingerprint (algorithm %s) to %s", fingerprint.kind, fingerprint.algorithm_id, path)
    return path


def load(source: str | Path) -> Fingerprint:
    """Read a fingerprint saved by :func:`save`.

    Raises :class:`~phashkit.errors.FingerprintIOError` when ``source`` can't be
    read and :class:`~phashkit.errors.CorruptDataError` when it isn't a valid
    record.
    """

    path = Path(source)
    fingerprint = loads_record(read_json(path))
    log.debug("Loaded %s fingerprint (algorithm %s) from %s", fingerprint.kind, fingerprint.algorithm_id, path)
    return fingerprint
