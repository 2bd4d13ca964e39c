"""Persistence for phashkit fingerprints: single records and the manifest store."""

from .persist import dumps_record, load, loads_record, save
from .store import find_nearest, load_entry, query_index, write_fingerprint

__all__ = [
    "save",
    "load",
    "dumps_record",
    "loads_record",
    "write_fingerprint",
    "query_index",
    "find_nearest",
    "load_entry",
]
