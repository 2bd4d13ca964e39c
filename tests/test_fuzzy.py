from __future__ import annotations

import pytest

from phashkit.errors import BitOutOfRangeError, IncompatibleAlgorithmError, InvalidArgumentError
from phashkit.fingerprint import FuzzyFingerprint, hamming_distance

from tests.helpers import fp


def test_single_fingerprint_is_fully_certain() -> None:
    source = fp("1010", algorithm_id=5)
    fuzzy = FuzzyFingerprint.from_fingerprints([source])

    assert fuzzy.merged_count == 1
    assert fuzzy.bit_weights == (-1.0, 1.0, -1.0, 1.0)
    assert fuzzy.magnitude == source.magnitude
    assert fuzzy.weighted_distance(source) == 0.0
    assert all(fuzzy.certainty(i) == 1.0 for i in range(4))


def test_consensus_follows_majority() -> None:
    fuzzy = FuzzyFingerprint.from_fingerprints([fp("1100"), fp("1010"), fp("1001")])

    # Bit 3 set everywhere, the others are set once out of three.
    assert fuzzy.bit_weights[3] == pytest.approx(1.0)
    assert fuzzy.bit_weights[0] == pytest.approx(-1 / 3)
    assert fuzzy.payload_string() == "1000"
    assert fuzzy.certainty(0) == pytest.approx(1 / 3)
    assert hamming_distance(fuzzy.to_fingerprint(), fp("1000")) == 0


def test_weighted_distance_uses_bit_probabilities() -> None:
    fuzzy = FuzzyFingerprint.from_fingerprints([fp("11"), fp("10")])

    # p(bit1) = 1, p(bit0) = 0.5
    assert fuzzy.weighted_distance(fp("11")) == pytest.approx(0.5)
    assert fuzzy.weighted_distance(fp("00")) == pytest.approx(1.5)
    assert fuzzy.normalized_weighted_distance(fp("00")) == pytest.approx(0.75)


def test_merge_then_subtract_restores_previous_state() -> None:
    base = FuzzyFingerprint.from_fingerprints([fp("1100"), fp("1010")])
    extended = base.merge(fp("0111"))
    restored = extended.subtract(fp("0111"))

    assert extended.merged_count == 3
    assert restored.merged_count == 2
    assert restored.bit_weights == pytest.approx(base.bit_weights)
    assert restored == base


def test_subtracting_last_contribution_gives_empty() -> None:
    fuzzy = FuzzyFingerprint.from_fingerprints([fp("101")])
    empty = fuzzy.subtract(fp("101"))

    assert empty.merged_count == 0
    assert empty.bit_weights == (0.0, 0.0, 0.0)
    assert empty.payload_string() == "000"
    with pytest.raises(InvalidArgumentError):
        empty.subtract(fp("101"))


def test_merge_is_checked_and_merge_fast_is_not() -> None:
    fuzzy = FuzzyFingerprint.empty(4, 1)

    with pytest.raises(IncompatibleAlgorithmError):
        fuzzy.merge(fp("1010", algorithm_id=2))
    with pytest.raises(InvalidArgumentError):
        fuzzy.merge(fp("10101", algorithm_id=1))

    merged = fuzzy.merge_fast(fp("1010", algorithm_id=2))
    assert merged.merged_count == 1
    assert merged.algorithm_id == 1


def test_merge_returns_new_values() -> None:
    fuzzy = FuzzyFingerprint.empty(2, 1)
    merged = fuzzy.merge(fp("11"))

    assert fuzzy.merged_count == 0
    assert merged is not fuzzy
    assert fuzzy.merge() is fuzzy


def test_invalid_construction() -> None:
    with pytest.raises(InvalidArgumentError):
        FuzzyFingerprint.from_fingerprints([])
    with pytest.raises(InvalidArgumentError):
        FuzzyFingerprint([1.5, 0.0], 1, 1)
    with pytest.raises(InvalidArgumentError):
        FuzzyFingerprint([0.0], -1, 1)
    with pytest.raises(InvalidArgumentError):
        FuzzyFingerprint.empty(0, 1)
    with pytest.raises(BitOutOfRangeError):
        FuzzyFingerprint.empty(4, 1).certainty(4)
