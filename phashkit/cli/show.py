"""CLI for inspecting a stored fingerprint."""
from __future__ import annotations

from pathlib import Path

import typer

from phashkit.cli._common import load_fingerprint
from phashkit.fingerprint.fuzzy import FuzzyFingerprint

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Print a fingerprint in human readable form.",
)


@app.callback()
def show(
    hash_file: Path = typer.Option(..., "--hash", exists=True, dir_okay=False, readable=True, help="Fingerprint file"),
) -> None:
    """Show the bits, kind and canonical bytes of ``hash_file``."""

    fingerprint = load_fingerprint(hash_file)

    typer.echo(str(fingerprint))
    typer.echo(f"Kind: {fingerprint.kind}")
    typer.echo(f"Bit length: {fingerprint.bit_length}")
    typer.echo(f"Canonical bytes: {fingerprint.to_bytes().hex() or '(empty)'}")
    if isinstance(fingerprint, FuzzyFingerprint):
        mean_certainty = sum(abs(w) for w in fingerprint.bit_weights) / fingerprint.bit_length
        typer.echo(f"Merged: {fingerprint.merged_count}, mean certainty: {mean_certainty:.3f}")


__all__ = ["app", "show"]
