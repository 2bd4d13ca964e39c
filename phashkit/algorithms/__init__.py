"""Hashing algorithm protocol and registry exports."""
from .base import REGISTRY, HashingAlgorithm, get_algorithm, register

__all__ = ["HashingAlgorithm", "REGISTRY", "get_algorithm", "register"]
