"""Hamming distance helpers for phashkit fingerprints.

The checked functions refuse to compare fingerprints produced by different
algorithms (or different settings of one algorithm). The ``*_fast`` variants
skip that check for hot loops: comparing incompatible fingerprints through them
returns a number that has no meaning.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Union

from phashkit.errors import IncompatibleAlgorithmError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from phashkit.fingerprint.hash import Fingerprint

__all__ = [
    "is_compatible",
    "hamming_distance",
    "hamming_distance_fast",
    "normalized_hamming_distance",
    "normalized_hamming_distance_fast",
]


def is_compatible(a: "Fingerprint", b: "Fingerprint") -> bool:
    """Return ``True`` when ``a`` and ``b`` were produced by the same algorithm."""

    return a.algorithm_id == b.algorithm_id


def _require_compatible(a: "Fingerprint", b: "Fingerprint") -> None:
    if a.algorithm_id != b.algorithm_id:
        raise IncompatibleAlgorithmError(a.algorithm_id, b.algorithm_id)


def hamming_distance(a: "Fingerprint", b: "Fingerprint") -> int:
    """Number of differing bits between ``a`` and ``b``, in ``[0, bit_length]``.

    Lower values mean closer images. Identical images must score 0, but a score
    of 0 does not imply identical images.
    """

    _require_compatible(a, b)
    return hamming_distance_fast(a, b)


def hamming_distance_fast(a: "Fingerprint", b: Union["Fingerprint", int]) -> int:
    """Unchecked :func:`hamming_distance`; ``b`` may also be a raw magnitude."""

    other = b if isinstance(b, int) else b.magnitude
    return (a.magnitude ^ other).bit_count()


def normalized_hamming_distance(a: "Fingerprint", b: "Fingerprint") -> float:
    """Hamming distance divided by the bit length of ``a``; falls within ``[0, 1]``."""

    _require_compatible(a, b)
    return normalized_hamming_distance_fast(a, b)


def normalized_hamming_distance_fast(a: "Fingerprint", b: "Fingerprint") -> float:
    """Unchecked :func:`normalized_hamming_distance`."""

    # Both operands are expected to carry the same bit length.
    return hamming_distance_fast(a, b) / float(a.bit_length)
