"""Schema validation helpers for persisted fingerprint records."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft7Validator

from phashkit.errors import CorruptDataError

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schema" / "fingerprint.schema.json"

__all__ = ["SCHEMA_PATH", "validate_record"]


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def _build_validator() -> Draft7Validator:
    return Draft7Validator(_load_schema())


def validate_record(record: Any) -> None:
    """Validate a persisted fingerprint ``record`` or raise :class:`CorruptDataError`."""

    validator = _build_validator()
    errors = sorted(validator.iter_errors(record), key=lambda err: [str(x) for x in err.path])
    if errors:
        formatted = "\n".join(_format_error(error) for error in errors)
        raise CorruptDataError(f"Fingerprint record failed validation:\n{formatted}")


def _format_error(error: Any) -> str:
    location = "/".join(str(x) for x in error.path)
    if not location:
        return error.message
    return f"{location}: {error.message}"
