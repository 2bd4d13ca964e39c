"""Fuzzy fingerprints: consensus hashes aggregated from several fingerprints.

A fuzzy fingerprint keeps one weight per bit in ``[-1, 1]``: the mean of ``+1``
for every merged fingerprint with the bit set and ``-1`` for every one with the
bit cleared. Its magnitude is the consensus (bit set iff the weight is
positive), so it can be compared like any other fingerprint, while the weights
allow a finer :meth:`FuzzyFingerprint.weighted_distance`.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from phashkit.errors import BitOutOfRangeError, IncompatibleAlgorithmError, InvalidArgumentError
from phashkit.fingerprint.hash import Fingerprint

__all__ = ["FuzzyFingerprint"]


def _consensus_magnitude(weights: Sequence[float]) -> int:
    magnitude = 1 << len(weights)
    for position, weight in enumerate(weights):
        if weight > 0:
            magnitude |= 1 << position
    return magnitude


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


class FuzzyFingerprint(Fingerprint):
    """Aggregate of fingerprints produced by one algorithm."""

    __slots__ = ("bit_weights", "merged_count")

    kind = "fuzzy"

    def __init__(self, bit_weights: Sequence[float], merged_count: int, algorithm_id: int) -> None:
        weights: Tuple[float, ...] = tuple(float(weight) for weight in bit_weights)
        for position, weight in enumerate(weights):
            if not -1.0 <= weight <= 1.0:
                raise InvalidArgumentError(f"Bit weight {position} outside [-1, 1]: {weight}")
        if merged_count < 0:
            raise InvalidArgumentError(f"Merged count must be non-negative, got {merged_count}")
        super().__init__(_consensus_magnitude(weights), len(weights), algorithm_id)
        object.__setattr__(self, "bit_weights", weights)
        object.__setattr__(self, "merged_count", int(merged_count))

    @classmethod
    def empty(cls, bit_length: int, algorithm_id: int) -> "FuzzyFingerprint":
        """A fuzzy fingerprint without any contribution yet."""

        if bit_length <= 0:
            raise InvalidArgumentError(f"Bit length must be positive, got {bit_length}")
        return cls((0.0,) * bit_length, 0, algorithm_id)

    @classmethod
    def from_fingerprints(cls, fingerprints: Iterable[Fingerprint]) -> "FuzzyFingerprint":
        """Aggregate ``fingerprints``; all of them must share one algorithm."""

        items = list(fingerprints)
        if not items:
            raise InvalidArgumentError("At least one fingerprint is required")
        first = items[0]
        return cls.empty(first.bit_length, first.algorithm_id).merge(*items)

    # ------------------------------------------------------------------
    # Aggregation

    def merge(self, *fingerprints: Fingerprint) -> "FuzzyFingerprint":
        """Return a new fuzzy fingerprint with ``fingerprints`` added."""

        for fingerprint in fingerprints:
            self._check(fingerprint)
        return self.merge_fast(*fingerprints)

    def merge_fast(self, *fingerprints: Fingerprint) -> "FuzzyFingerprint":
        """:meth:`merge` without algorithm or length checks."""

        if not fingerprints:
            return self
        count = self.merged_count + len(fingerprints)
        weights = []
        for position, weight in enumerate(self.bit_weights):
            total = weight * self.merged_count
            for fingerprint in fingerprints:
                total += 1.0 if fingerprint.bit_at_unsafe(position) else -1.0
            weights.append(_clamp(total / count))
        return type(self)(weights, count, self.algorithm_id)

    def subtract(self, fingerprint: Fingerprint) -> "FuzzyFingerprint":
        """Remove one previously merged ``fingerprint`` from the aggregate."""

        self._check(fingerprint)
        if self.merged_count == 0:
            raise InvalidArgumentError("Can't subtract from an empty fuzzy fingerprint")
        count = self.merged_count - 1
        if count == 0:
            return type(self).empty(self.bit_length, self.algorithm_id)
        weights = []
        for position, weight in enumerate(self.bit_weights):
            total = weight * self.merged_count
            total -= 1.0 if fingerprint.bit_at_unsafe(position) else -1.0
            weights.append(_clamp(total / count))
        return type(self)(weights, count, self.algorithm_id)

    def to_fingerprint(self) -> Fingerprint:
        """The consensus hash as a plain :class:`Fingerprint`."""

        return Fingerprint(self.magnitude, self.bit_length, self.algorithm_id)

    # ------------------------------------------------------------------
    # Queries

    def certainty(self, position: int) -> float:
        """How strongly the merged fingerprints agree on bit ``position`` (0 to 1)."""

        if position < 0 or position >= self.bit_length:
            raise BitOutOfRangeError(position, self.bit_length)
        return abs(self.bit_weights[position])

    def weighted_distance(self, fingerprint: Fingerprint) -> float:
        """Sum over bits of the distance between the bit and its set-probability."""

        self._check(fingerprint)
        return self.weighted_distance_fast(fingerprint)

    def weighted_distance_fast(self, fingerprint: Fingerprint) -> float:
        total = 0.0
        for position, weight in enumerate(self.bit_weights):
            probability = (weight + 1.0) / 2.0
            bit = 1.0 if fingerprint.bit_at_unsafe(position) else 0.0
            total += abs(probability - bit)
        return total

    def normalized_weighted_distance(self, fingerprint: Fingerprint) -> float:
        return self.weighted_distance(fingerprint) / float(self.bit_length)

    def _check(self, fingerprint: Fingerprint) -> None:
        if fingerprint.algorithm_id != self.algorithm_id:
            raise IncompatibleAlgorithmError(self.algorithm_id, fingerprint.algorithm_id)
        if fingerprint.bit_length != self.bit_length:
            raise InvalidArgumentError(
                f"Bit length mismatch: {fingerprint.bit_length} != {self.bit_length}"
            )

    def __repr__(self) -> str:
        return (
            f"FuzzyFingerprint(magnitude={self.magnitude:#x}, bit_length={self.bit_length}, "
            f"algorithm_id={self.algorithm_id}, merged_count={self.merged_count})"
        )

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (type(self), (self.bit_weights, self.merged_count, self.algorithm_id))
