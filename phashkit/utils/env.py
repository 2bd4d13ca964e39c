"""Environment-driven configuration."""
from __future__ import annotations

import os
from pathlib import Path

from phashkit.errors import InvalidArgumentError

STORE_ROOT_ENV = "PHASHKIT_STORE_ROOT"
BLOCK_SIZE_ENV = "PHASHKIT_BLOCK_SIZE"
LOG_LEVEL_ENV = "PHASHKIT_LOG_LEVEL"

DEFAULT_STORE_ROOT = "phash_store"
DEFAULT_BLOCK_SIZE = 10
DEFAULT_LOG_LEVEL = "WARNING"

__all__ = [
    "STORE_ROOT_ENV",
    "BLOCK_SIZE_ENV",
    "LOG_LEVEL_ENV",
    "get_store_root",
    "get_block_size",
    "get_log_level",
]


def get_store_root(override: str | Path | None = None) -> Path:
    """Return the fingerprint store root, preferring ``override`` over the environment."""

    if override:
        return Path(override)
    return Path(os.environ.get(STORE_ROOT_ENV) or DEFAULT_STORE_ROOT)


def get_block_size(override: int | None = None) -> int:
    """Return the render block size from ``override`` or ``PHASHKIT_BLOCK_SIZE``."""

    if override is not None:
        value = override
    else:
        raw = os.environ.get(BLOCK_SIZE_ENV)
        if not raw:
            return DEFAULT_BLOCK_SIZE
        try:
            value = int(raw)
        except ValueError as exc:
            raise InvalidArgumentError(f"{BLOCK_SIZE_ENV} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise InvalidArgumentError(f"Block size must be positive, got {value}")
    return value


def get_log_level(override: str | None = None) -> str:
    """Return the log level name from ``override`` or ``PHASHKIT_LOG_LEVEL``."""

    level = override or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return level.upper()
