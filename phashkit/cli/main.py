"""Root CLI entry point for phashkit."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from phashkit.logging_ import setup_logging
from phashkit.utils.env import get_log_level

from . import compare as compare_cli
from . import ingest as ingest_cli
from . import ls as ls_cli
from . import merge as merge_cli
from . import render as render_cli
from . import show as show_cli

app = typer.Typer(add_completion=False, help="phashkit command line interface")
app.add_typer(show_cli.app, name="show", help="Print a fingerprint in human readable form")
app.add_typer(compare_cli.app, name="compare", help="Compare two fingerprints")
app.add_typer(render_cli.app, name="render", help="Render a fingerprint as a block image")
app.add_typer(merge_cli.app, name="merge", help="Merge fingerprints into a fuzzy fingerprint")
app.add_typer(ingest_cli.app, name="ingest", help="Add a fingerprint to the store")
app.add_typer(ls_cli.app, name="ls", help="List stored fingerprints or find near matches")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: $PHASHKIT_LOG_LEVEL or WARNING)"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write log records to this file"),
) -> None:
    """Configure logging for every sub-command."""

    setup_logging(get_log_level(log_level), log_file=log_file)


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
