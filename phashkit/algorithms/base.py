"""Hashing algorithm protocol and registry.

Concrete algorithms (difference, average, median, wavelet hashes...) live
outside this package. They hand fingerprints to the core and, when they lay
their bits out in a non-raster order, know how to reorder them for rendering.
"""
from __future__ import annotations

from typing import Callable, Dict, Protocol

from phashkit.fingerprint.hash import Fingerprint

__all__ = ["HashingAlgorithm", "REGISTRY", "register", "get_algorithm"]

AlgorithmFactory = Callable[[], "HashingAlgorithm"]


class HashingAlgorithm(Protocol):
    """Producer of fingerprints for one algorithm configuration."""

    name: str
    algorithm_id: int

    def raster_fingerprint(self, fingerprint: Fingerprint) -> Fingerprint:
        """Return ``fingerprint`` with its bits in column-major raster order."""


REGISTRY: Dict[str, AlgorithmFactory] = {}


def register(algorithm_cls: Callable[[], HashingAlgorithm]) -> Callable[[], HashingAlgorithm]:
    """Class decorator registering an algorithm implementation."""

    name = getattr(algorithm_cls, "name", None)
    if not name:
        raise ValueError("Algorithms must define a 'name' attribute for registration")
    REGISTRY[name] = algorithm_cls  # type: ignore[assignment]
    return algorithm_cls


def get_algorithm(name: str) -> HashingAlgorithm:
    """Return an instantiated algorithm by ``name``."""

    if name not in REGISTRY:
        raise KeyError(f"Unknown algorithm '{name}'. Registered: {', '.join(sorted(REGISTRY))}")
    return REGISTRY[name]()
