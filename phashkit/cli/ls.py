"""CLI for listing stored fingerprints."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import json

import typer

from phashkit.cli._common import fail, load_fingerprint
from phashkit.errors import PhashkitError
from phashkit.storage.store import find_nearest, query_index
from phashkit.utils.env import get_store_root

app = typer.Typer(help="List stored fingerprints from the manifest", add_completion=False, invoke_without_command=True)


@app.callback()
def ls(  # type: ignore[override]
    root: Optional[str] = typer.Option(None, help="Store root (default: $PHASHKIT_STORE_ROOT or phash_store)"),
    algorithm_id: Optional[int] = typer.Option(None, "--algorithm-id", help="Filter by algorithm id"),
    kind: Optional[str] = typer.Option(None, help="Filter by record kind (fingerprint, fuzzy)"),
    near: Optional[Path] = typer.Option(
        None, "--near", exists=True, dir_okay=False, readable=True, help="List entries closest to this fingerprint"
    ),
    max_distance: Optional[int] = typer.Option(None, "--max-distance", min=0, help="Maximum distance with --near"),
    limit: Optional[int] = typer.Option(50, help="Maximum rows to display"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """List stored fingerprints applying optional filters."""

    store_root = get_store_root(root)

    try:
        if near is not None:
            probe = load_fingerprint(near)
            rows = find_nearest(store_root, probe, max_distance=max_distance)
            if kind is not None:
                rows = [row for row in rows if row.get("kind") == kind]
            if limit is not None:
                rows = rows[:limit]
        else:
            rows = query_index(store_root, limit=limit, algorithm_id=algorithm_id, kind=kind)
    except PhashkitError as exc:
        fail(exc.message)

    if json_output:
        typer.echo(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    if not rows:
        typer.echo("No fingerprints matched the provided filters.")
        return

    typer.echo(_format_table(rows, with_distance=near is not None))


def _format_table(rows: List[Dict[str, Any]], with_distance: bool) -> str:
    header = ["name", "algorithm_id", "bits", "kind", "magnitude"]
    if with_distance:
        header.append("distance")
    lines = [" | ".join(header)]
    lines.append("-" * len(lines[0]))
    for row in rows:
        cells = [
            str(row.get("name", "")),
            str(row.get("algorithm_id", "")),
            str(row.get("bit_length", "")),
            str(row.get("kind", "")),
            str(row.get("magnitude", "")),
        ]
        if with_distance:
            cells.append(str(row.get("distance", "")))
        lines.append(" | ".join(cells))
    return "\n".join(lines)


__all__ = ["app"]
