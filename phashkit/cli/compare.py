"""CLI for comparing two fingerprints."""
from __future__ import annotations

from pathlib import Path

import typer

from phashkit.cli._common import fail, load_fingerprint
from phashkit.errors import IncompatibleAlgorithmError
from phashkit.fingerprint import distance

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compute the Hamming distance between two fingerprints.",
)


@app.callback()
def compare(
    a: Path = typer.Option(..., "--a", exists=True, dir_okay=False, readable=True, help="First fingerprint"),
    b: Path = typer.Option(..., "--b", exists=True, dir_okay=False, readable=True, help="Second fingerprint"),
    fast: bool = typer.Option(False, "--fast", help="Skip the algorithm compatibility check"),
    normalized: bool = typer.Option(False, "--normalized", help="Divide by the bit length of --a"),
) -> None:
    """Compare fingerprints ``a`` and ``b``."""

    fp_a = load_fingerprint(a)
    fp_b = load_fingerprint(b)

    try:
        if normalized:
            measure = distance.normalized_hamming_distance_fast if fast else distance.normalized_hamming_distance
            typer.echo(f"Normalized distance: {measure(fp_a, fp_b):.4f}")
        else:
            measure = distance.hamming_distance_fast if fast else distance.hamming_distance
            typer.echo(f"Distance: {measure(fp_a, fp_b)}")
    except IncompatibleAlgorithmError as exc:
        fail(exc.message)

    if not distance.is_compatible(fp_a, fp_b):
        typer.secho(
            f"[WARN] algorithm ids differ ({fp_a.algorithm_id} != {fp_b.algorithm_id}); the distance is not meaningful",
            fg=typer.colors.YELLOW,
            err=True,
        )


def run() -> None:
    """Entrypoint for ``python -m phashkit.cli.compare`` usage."""

    app()


__all__ = ["app", "compare", "run"]
