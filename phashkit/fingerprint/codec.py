"""Canonical byte encoding for fingerprint magnitudes.

Magnitudes are written as the shortest unsigned big-endian byte sequence. The
two's-complement form of a non-negative value gains an artificial ``0x00`` sign
byte whenever its top byte has the high bit set; that byte carries no
information for hashes, which are never negative, and is stripped to save a
byte per stored hash. Decoding accepts both forms.

The bytes only describe the magnitude. ``bit_length`` and ``algorithm_id``
have to travel alongside them.
"""
from __future__ import annotations

from phashkit.errors import CorruptDataError, InvalidArgumentError

__all__ = ["encode", "decode", "encode_hex", "decode_hex"]


def encode(magnitude: int) -> bytes:
    """Return the canonical byte form of ``magnitude``."""

    if magnitude < 0:
        raise InvalidArgumentError(f"Magnitude must be non-negative, got {magnitude}")
    # Signed width: one extra bit for the sign, rounded up to whole bytes.
    length = magnitude.bit_length() // 8 + 1
    signed = magnitude.to_bytes(length, "big", signed=True)
    if signed[0] == 0:
        return signed[1:]
    return signed


def decode(data: bytes) -> int:
    """Return the magnitude stored in ``data`` (with or without a sign byte)."""

    return int.from_bytes(bytes(data), "big", signed=False)


def encode_hex(magnitude: int) -> str:
    """Return the canonical bytes of ``magnitude`` as lowercase hex text."""

    return encode(magnitude).hex()


def decode_hex(text: str) -> int:
    """Inverse of :func:`encode_hex`."""

    try:
        return decode(bytes.fromhex(text))
    except (TypeError, ValueError) as exc:
        raise CorruptDataError(f"Invalid hex magnitude {text!r}: {exc}") from exc
