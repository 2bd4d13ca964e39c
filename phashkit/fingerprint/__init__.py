"""Fingerprint value types, distances and the canonical byte codec."""

from .codec import decode, encode
from .distance import (
    hamming_distance,
    hamming_distance_fast,
    is_compatible,
    normalized_hamming_distance,
    normalized_hamming_distance_fast,
)
from .fuzzy import FuzzyFingerprint
from .hash import Fingerprint, stable_algorithm_id

__all__ = [
    "Fingerprint",
    "FuzzyFingerprint",
    "stable_algorithm_id",
    "encode",
    "decode",
    "is_compatible",
    "hamming_distance",
    "hamming_distance_fast",
    "normalized_hamming_distance",
    "normalized_hamming_distance_fast",
]
