from __future__ import annotations

from typing import List, Sequence

from phashkit.fingerprint import Fingerprint

MEDIAN_HASH_14_ID = 552703146
MEDIAN_HASH_25_ID = 552733898


def fp(payload: str, algorithm_id: int = 1) -> Fingerprint:
    """Fingerprint whose payload reads like ``payload`` (most significant bit first)."""

    return Fingerprint.from_bits([char == "1" for char in payload], algorithm_id)


def bits_from_seed(seed: int, length: int) -> List[bool]:
    """Deterministic pseudo-random bits (64-bit LCG, high bit of the state)."""

    state = seed & 0xFFFFFFFFFFFFFFFF
    bits: List[bool] = []
    for _ in range(length):
        state = (state * 6364136223846793005 + 1442695040888963407) & 0xFFFFFFFFFFFFFFFF
        bits.append(bool(state >> 63))
    return bits


def sample_fingerprints(count: int, length: int, algorithm_id: int = 1) -> List[Fingerprint]:
    return [Fingerprint.from_bits(bits_from_seed(seed, length), algorithm_id) for seed in range(count)]


def flip(fingerprint: Fingerprint, positions: Sequence[int]) -> Fingerprint:
    """Copy of ``fingerprint`` with the payload bits at ``positions`` inverted."""

    magnitude = fingerprint.magnitude
    for position in positions:
        magnitude ^= 1 << position
    return Fingerprint(magnitude, fingerprint.bit_length, fingerprint.algorithm_id)
