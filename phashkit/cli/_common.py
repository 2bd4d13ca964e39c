"""Helpers shared by the phashkit CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer

from phashkit.errors import PhashkitError
from phashkit.fingerprint.hash import Fingerprint
from phashkit.storage.persist import load

log = logging.getLogger("phashkit.cli")


def fail(message: str) -> NoReturn:
    """Print ``message`` as an error and exit with status 1."""

    typer.secho(f"[ERROR] {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def load_fingerprint(path: Path) -> Fingerprint:
    """Load a fingerprint file or exit with a readable error."""

    try:
        return load(path)
    except PhashkitError as exc:
        log.debug("Loading %s failed", path, exc_info=True)
        fail(f"Failed to load fingerprint '{path}': {exc.message}")
