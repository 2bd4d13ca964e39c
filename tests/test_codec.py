from __future__ import annotations

import pytest

from phashkit.errors import CorruptDataError, InvalidArgumentError
from phashkit.fingerprint import Fingerprint, codec


def test_known_encodings() -> None:
    assert codec.encode(255) == b"\xff"
    assert codec.decode(b"\x00\xff") == 255
    assert codec.encode(128) == b"\x80"
    assert codec.decode(b"\x80") == 128
    assert codec.encode(127) == b"\x7f"
    assert codec.encode(256) == b"\x01\x00"


def test_zero_encodes_to_empty_bytes() -> None:
    assert codec.encode(0) == b""
    assert codec.decode(b"") == 0
    assert codec.decode(b"\x00") == 0


@pytest.mark.parametrize(
    "value",
    [0, 1, 0x7F, 0x80, 0xFF, 0x100, 0x8000, 0xFFFF, 2**63, 2**64 - 1, (1 << 257) | 0xDEADBEEF],
)
def test_decode_inverts_encode(value: int) -> None:
    encoded = codec.encode(value)

    assert codec.decode(encoded) == value
    # A re-prepended sign byte is accepted as well.
    assert codec.decode(b"\x00" + encoded) == value


def test_encoding_is_minimal() -> None:
    for value in [1, 0x80, 0xFFFF, 2**64 - 1]:
        encoded = codec.encode(value)
        assert encoded[0] != 0
        assert len(encoded) == (value.bit_length() + 7) // 8


def test_negative_magnitude_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        codec.encode(-1)


def test_hex_helpers() -> None:
    assert codec.encode_hex(0x1_80) == "0180"
    assert codec.decode_hex("0180") == 0x180
    assert codec.decode_hex("") == 0
    with pytest.raises(CorruptDataError):
        codec.decode_hex("zz")


def test_fingerprint_bytes_round_trip_with_out_of_band_metadata() -> None:
    fingerprint = Fingerprint((1 << 64) | 0x8000_0000_0000_0001, 64, 17)

    data = fingerprint.to_bytes()
    restored = Fingerprint.from_bytes(data, 64, 17)

    assert data[0] == 0x01  # guard bit
    assert restored == fingerprint
    assert restored.bit_length == 64
