"""Command-line interfaces for phashkit."""

from .main import app, run

__all__ = ["app", "run"]
