"""Visualization helpers for phashkit fingerprints."""
from __future__ import annotations

from .blocks import grid_side, render_blocks, render_fingerprint, render_fuzzy, save_image, to_image
from .palette import DEFAULT_PALETTE, grey_ramp, load_palette

__all__ = [
    "DEFAULT_PALETTE",
    "grid_side",
    "grey_ramp",
    "load_palette",
    "render_blocks",
    "render_fingerprint",
    "render_fuzzy",
    "save_image",
    "to_image",
]
