"""phashkit: perceptual image fingerprints as compact bit vectors."""

from .errors import (
    BitOutOfRangeError,
    CorruptDataError,
    FingerprintIOError,
    IncompatibleAlgorithmError,
    InvalidArgumentError,
    PhashkitError,
)
from .fingerprint import Fingerprint, FuzzyFingerprint, stable_algorithm_id
from .storage import load, save

__version__ = "0.1.0"

__all__ = [
    "Fingerprint",
    "FuzzyFingerprint",
    "stable_algorithm_id",
    "save",
    "load",
    "PhashkitError",
    "IncompatibleAlgorithmError",
    "BitOutOfRangeError",
    "InvalidArgumentError",
    "FingerprintIOError",
    "CorruptDataError",
    "__version__",
]
