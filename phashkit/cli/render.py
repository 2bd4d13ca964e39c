"""CLI for rendering fingerprints as block images."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from phashkit.cli._common import fail, load_fingerprint
from phashkit.errors import PhashkitError
from phashkit.fingerprint.fuzzy import FuzzyFingerprint
from phashkit.utils.env import get_block_size
from phashkit.viz.blocks import render_fingerprint, render_fuzzy, save_image
from phashkit.viz.palette import DEFAULT_PALETTE, load_palette

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Render a fingerprint as a grid of coloured blocks.",
)


@app.callback()
def render(
    hash_file: Path = typer.Option(..., "--hash", exists=True, dir_okay=False, readable=True, help="Fingerprint file"),
    out: Path = typer.Option(..., "--out", help="Destination image (PNG, BMP, ...)"),
    block_size: Optional[int] = typer.Option(
        None, "--block-size", help="Pixels per bit along each axis (default: $PHASHKIT_BLOCK_SIZE or 10)"
    ),
    palette: Optional[Path] = typer.Option(
        None, "--palette", exists=True, dir_okay=False, readable=True, help="YAML palette; entries 0 and 1 are used"
    ),
    weights: bool = typer.Option(False, "--weights", help="Render fuzzy fingerprints by bit certainty"),
    levels: int = typer.Option(5, "--levels", min=2, help="Grey levels used with --weights"),
) -> None:
    """Render ``hash_file`` into ``out``."""

    fingerprint = load_fingerprint(hash_file)

    try:
        size = get_block_size(block_size)
        if weights:
            if not isinstance(fingerprint, FuzzyFingerprint):
                fail("--weights requires a fuzzy fingerprint")
            buffer = render_fuzzy(fingerprint, size, levels=levels)
        else:
            colors = load_palette(palette) if palette is not None else list(DEFAULT_PALETTE)
            buffer = render_fingerprint(fingerprint, size, palette=colors)
        save_image(buffer, out)
    except PhashkitError as exc:
        fail(exc.message)

    height, width = buffer.shape[:2]
    typer.secho(f"Image written to {out} ({width}x{height})", fg=typer.colors.GREEN)


__all__ = ["app", "render"]
