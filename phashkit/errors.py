"""Error types raised by phashkit."""
from __future__ import annotations

__all__ = [
    "PhashkitError",
    "IncompatibleAlgorithmError",
    "BitOutOfRangeError",
    "InvalidArgumentError",
    "FingerprintIOError",
    "CorruptDataError",
]


class PhashkitError(Exception):
    """Base class for every error raised by the library."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IncompatibleAlgorithmError(PhashkitError, ValueError):
    """Raised when fingerprints produced by different algorithms are compared."""

    def __init__(self, algorithm_a: int, algorithm_b: int) -> None:
        super().__init__(
            "Can't compare two hash values created by different algorithms "
            f"({algorithm_a} != {algorithm_b})"
        )
        self.algorithm_a = algorithm_a
        self.algorithm_b = algorithm_b


class BitOutOfRangeError(PhashkitError, IndexError):
    """Raised by checked bit accessors for positions outside the hash."""

    def __init__(self, position: int, bit_length: int) -> None:
        super().__init__(f"Bit out of bounds: {position} not in [0, {bit_length - 1}]")
        self.position = position
        self.bit_length = bit_length


class InvalidArgumentError(PhashkitError, ValueError):
    """Raised for arguments that can never be valid (negative positions, block sizes...)."""


class FingerprintIOError(PhashkitError, OSError):
    """Raised when reading or writing a persisted fingerprint fails."""


class CorruptDataError(PhashkitError, ValueError):
    """Raised when persisted data can't be decoded into a fingerprint."""
