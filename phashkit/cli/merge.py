"""CLI for aggregating fingerprints into a fuzzy fingerprint."""
from __future__ import annotations

from pathlib import Path
from typing import List

import typer

from phashkit.cli._common import fail, load_fingerprint
from phashkit.errors import PhashkitError
from phashkit.fingerprint.fuzzy import FuzzyFingerprint
from phashkit.storage.persist import save

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Merge fingerprints of one algorithm into a fuzzy fingerprint.",
)


@app.callback()
def merge(
    hashes: List[Path] = typer.Option(
        ..., "--hash", exists=True, dir_okay=False, readable=True, help="Fingerprint file (repeat for each input)"
    ),
    out: Path = typer.Option(..., "--out", help="Destination fuzzy fingerprint file"),
) -> None:
    """Merge ``hashes`` and save the result to ``out``."""

    fingerprints = [load_fingerprint(path) for path in hashes]
    try:
        fuzzy = FuzzyFingerprint.from_fingerprints(fingerprints)
        save(fuzzy, out)
    except PhashkitError as exc:
        fail(exc.message)

    typer.secho(f"Fuzzy fingerprint of {fuzzy.merged_count} hashes written to {out}", fg=typer.colors.GREEN)


__all__ = ["app", "merge"]
