"""CLI for adding fingerprints to the store."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from phashkit.cli._common import fail, load_fingerprint
from phashkit.errors import PhashkitError
from phashkit.storage.store import write_fingerprint
from phashkit.utils.env import get_store_root

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Add a fingerprint file to the fingerprint store.",
)


@app.callback()
def ingest(
    hash_file: Path = typer.Option(..., "--hash", exists=True, dir_okay=False, readable=True, help="Fingerprint file"),
    root: Optional[str] = typer.Option(None, help="Store root (default: $PHASHKIT_STORE_ROOT or phash_store)"),
    name: Optional[str] = typer.Option(None, help="Entry name (default: derived from the hash)"),
) -> None:
    """Copy ``hash_file`` into the store and index it."""

    fingerprint = load_fingerprint(hash_file)
    store_root = get_store_root(root)
    try:
        row = write_fingerprint(store_root, fingerprint, name=name)
    except PhashkitError as exc:
        fail(exc.message)

    typer.secho(f"Stored '{row['name']}' at {store_root / row['path']}", fg=typer.colors.GREEN)


__all__ = ["app", "ingest"]
