"""Utility helpers for phashkit."""

from .env import get_block_size, get_log_level, get_store_root
from .io import ensure_dir, ensure_parent_dir, read_json, write_json
from .validate import validate_record

__all__ = [
    "get_block_size",
    "get_log_level",
    "get_store_root",
    "ensure_parent_dir",
    "ensure_dir",
    "read_json",
    "write_json",
    "validate_record",
]
