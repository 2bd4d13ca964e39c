from __future__ import annotations

from pathlib import Path

import pytest

from phashkit.errors import CorruptDataError, InvalidArgumentError
from phashkit.fingerprint import FuzzyFingerprint
from phashkit.storage import find_nearest, load_entry, query_index, write_fingerprint
from phashkit.storage.manifest import MANIFEST_NAME, iter_manifest

from tests.helpers import flip, fp, sample_fingerprints


def test_write_fingerprint_creates_partition_and_manifest(tmp_path: Path) -> None:
    fingerprint = fp("10100110", algorithm_id=77)

    row = write_fingerprint(tmp_path, fingerprint, name="cat")

    record_path = tmp_path / "77" / "cat.phash.json"
    assert record_path.exists()
    assert row["path"] == "77/cat.phash.json"
    assert row["magnitude"] == fingerprint.to_bytes().hex()
    assert row["created_at"].endswith("Z")
    assert (tmp_path / MANIFEST_NAME).exists()
    assert load_entry(tmp_path, row) == fingerprint


def test_default_names_are_derived_from_the_hash(tmp_path: Path) -> None:
    fingerprint = fp("0001", algorithm_id=3)

    row = write_fingerprint(tmp_path, fingerprint)

    assert row["name"] == "3-11"


def test_invalid_entry_names_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError):
        write_fingerprint(tmp_path, fp("1"), name="../escape")


def test_query_index_filters(tmp_path: Path) -> None:
    for index, fingerprint in enumerate(sample_fingerprints(3, 16, algorithm_id=1)):
        write_fingerprint(tmp_path, fingerprint, name=f"a{index}")
    write_fingerprint(tmp_path, fp("1010", algorithm_id=2), name="b0")
    write_fingerprint(
        tmp_path, FuzzyFingerprint.from_fingerprints(sample_fingerprints(2, 16, algorithm_id=1)), name="f0"
    )

    assert len(query_index(tmp_path)) == 5
    assert [row["name"] for row in query_index(tmp_path, algorithm_id=2)] == ["b0"]
    assert [row["name"] for row in query_index(tmp_path, kind="fuzzy")] == ["f0"]
    assert len(query_index(tmp_path, algorithm_id=1, bit_length=16)) == 4
    assert len(query_index(tmp_path, limit=2)) == 2
    assert query_index(tmp_path, name="missing") == []


def test_find_nearest_orders_by_distance(tmp_path: Path) -> None:
    probe = sample_fingerprints(1, 64, algorithm_id=9)[0]
    write_fingerprint(tmp_path, flip(probe, [1, 2, 3]), name="three")
    write_fingerprint(tmp_path, flip(probe, [10]), name="one")
    write_fingerprint(tmp_path, probe, name="same")
    write_fingerprint(tmp_path, fp("1" * 64, algorithm_id=10), name="other-algorithm")

    rows = find_nearest(tmp_path, probe)

    assert [(row["name"], row["distance"]) for row in rows] == [("same", 0), ("one", 1), ("three", 3)]
    assert [row["name"] for row in find_nearest(tmp_path, probe, max_distance=1)] == ["same", "one"]
    assert len(find_nearest(tmp_path, probe, limit=1)) == 1


def test_empty_store(tmp_path: Path) -> None:
    assert list(iter_manifest(tmp_path)) == []
    assert query_index(tmp_path) == []
    assert find_nearest(tmp_path, fp("1")) == []


def test_malformed_manifest_line_is_corrupt(tmp_path: Path) -> None:
    write_fingerprint(tmp_path, fp("1010"), name="ok")
    with (tmp_path / MANIFEST_NAME).open("a", encoding="utf-8") as handle:
        handle.write("\n{broken\n")

    with pytest.raises(CorruptDataError):
        query_index(tmp_path)


@pytest.mark.parametrize("garbage", [b"\xff\xfe\n", b'{"bit_length": ' + b"9" * 5000 + b"}\n"])
def test_undecodable_manifest_is_corrupt(tmp_path: Path, garbage: bytes) -> None:
    write_fingerprint(tmp_path, fp("1010"), name="ok")
    with (tmp_path / MANIFEST_NAME).open("ab") as handle:
        handle.write(garbage)

    with pytest.raises(CorruptDataError):
        query_index(tmp_path)
