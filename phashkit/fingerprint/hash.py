"""The immutable fingerprint value type.

Hashes are bit encoded values (``0101011101``) created from images by a hashing
algorithm. Every bit usually represents a section of the downscaled image
(hue, brightness, frequencies or gradients), which makes comparing two hashes a
cheap approximation of comparing the images themselves.

The bits live in an arbitrary-precision ``int``. Integers drop leading zero
bits, so the producing algorithm has to put a guard ``1`` bit immediately above
the payload (``0b1_0010`` for the payload ``0010``). This class trusts the
caller on that point and never re-pads: a magnitude without its guard bit
silently loses leading zeros.
"""
from __future__ import annotations

from hashlib import sha1
from typing import Any, Iterable, Tuple, Union

from phashkit.errors import BitOutOfRangeError, InvalidArgumentError
from phashkit.fingerprint import codec, distance

__all__ = ["Fingerprint", "stable_algorithm_id"]


def stable_algorithm_id(name: str, *settings: Any) -> int:
    """Return a signed 32-bit id for ``name`` configured with ``settings``.

    The value is derived from a SHA-1 digest and therefore stays the same
    across interpreter runs, unlike ``hash()`` of a string.
    """

    payload = "|".join([name, *(repr(setting) for setting in settings)]).encode("utf-8")
    return int.from_bytes(sha1(payload).digest()[:4], "big", signed=True)


class Fingerprint:
    """Perceptual hash of an image: ``(magnitude, bit_length, algorithm_id)``."""

    __slots__ = ("magnitude", "bit_length", "algorithm_id")

    kind = "fingerprint"

    def __init__(self, magnitude: int, bit_length: int, algorithm_id: int) -> None:
        if magnitude < 0:
            raise InvalidArgumentError(f"Magnitude must be non-negative, got {magnitude}")
        if bit_length <= 0:
            raise InvalidArgumentError(f"Bit length must be positive, got {bit_length}")
        object.__setattr__(self, "magnitude", int(magnitude))
        object.__setattr__(self, "bit_length", int(bit_length))
        object.__setattr__(self, "algorithm_id", int(algorithm_id))

    @classmethod
    def from_bits(cls, bits: Iterable[Union[bool, int]], algorithm_id: int) -> "Fingerprint":
        """Build a fingerprint from bits in the order an algorithm produces them.

        Starts from the guard bit and shifts every bit in from the right, so the
        first bit ends up at the highest payload position and the last at 0.
        """

        magnitude = 1
        length = 0
        for bit in bits:
            magnitude = (magnitude << 1) | (1 if bit else 0)
            length += 1
        return cls(magnitude, length, algorithm_id)

    @classmethod
    def from_bytes(cls, data: bytes, bit_length: int, algorithm_id: int) -> "Fingerprint":
        """Rebuild a fingerprint from its canonical bytes and out-of-band metadata."""

        return cls(codec.decode(data), bit_length, algorithm_id)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Bit access

    @property
    def bit_resolution(self) -> int:
        return self.bit_length

    def bit_at(self, position: int) -> bool:
        """Return whether bit ``position`` is set; position 0 is the rightmost bit."""

        if position < 0 or position >= self.bit_length:
            raise BitOutOfRangeError(position, self.bit_length)
        return self.bit_at_unsafe(position)

    def bit_at_unsafe(self, position: int) -> bool:
        """Like :meth:`bit_at` without the upper bound check.

        Positions above the highest set bit read as ``False``.
        """

        if position < 0:
            raise InvalidArgumentError(f"Bit position must be non-negative, got {position}")
        return bool((self.magnitude >> position) & 1)

    def bits(self) -> Tuple[bool, ...]:
        """Payload bits in index order, ``bits()[i] == bit_at(i)``."""

        return tuple(bool((self.magnitude >> i) & 1) for i in range(self.bit_length))

    # ------------------------------------------------------------------
    # Distances

    def hamming_distance(self, other: "Fingerprint") -> int:
        return distance.hamming_distance(self, other)

    def hamming_distance_fast(self, other: Union["Fingerprint", int]) -> int:
        return distance.hamming_distance_fast(self, other)

    def normalized_hamming_distance(self, other: "Fingerprint") -> float:
        return distance.normalized_hamming_distance(self, other)

    def normalized_hamming_distance_fast(self, other: "Fingerprint") -> float:
        return distance.normalized_hamming_distance_fast(self, other)

    # ------------------------------------------------------------------
    # Encodings

    def to_bytes(self) -> bytes:
        """Canonical bytes of the magnitude; see :mod:`phashkit.fingerprint.codec`."""

        return codec.encode(self.magnitude)

    def payload_string(self) -> str:
        """``bit_length`` binary digits of the payload, zero padded on the left."""

        payload = self.magnitude & ((1 << self.bit_length) - 1)
        return format(payload, f"0{self.bit_length}b")

    def __str__(self) -> str:
        return f"Hash: {self.payload_string()} [algoId: {self.algorithm_id}]"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(magnitude={self.magnitude:#x}, "
            f"bit_length={self.bit_length}, algorithm_id={self.algorithm_id})"
        )

    # ------------------------------------------------------------------
    # Value semantics

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Fingerprint):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self.algorithm_id == other.algorithm_id and self.magnitude == other.magnitude

    def __hash__(self) -> int:
        return hash((self.algorithm_id, self.magnitude))

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (type(self), (self.magnitude, self.bit_length, self.algorithm_id))
