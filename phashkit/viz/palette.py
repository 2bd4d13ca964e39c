"""Colour palettes for block renderings.

Palette files are YAML, either a plain list or a mapping with a ``colors`` key.
Entries are ``[r, g, b]`` triples or ``"#rrggbb"`` strings::

    colors:
      - "#ffffff"
      - [200, 30, 30]
      - "#000000"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence, Tuple

import yaml

from phashkit.errors import CorruptDataError, FingerprintIOError, InvalidArgumentError

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
DEFAULT_PALETTE: Tuple[Color, Color] = (WHITE, BLACK)

__all__ = [
    "Color",
    "WHITE",
    "BLACK",
    "DEFAULT_PALETTE",
    "parse_color",
    "load_palette",
    "grey_ramp",
]


def parse_color(value: Any) -> Color:
    """Return an RGB triple for ``value`` (``"#rrggbb"`` or a 3-item sequence)."""

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            text = text[1:]
        if len(text) != 6:
            raise InvalidArgumentError(f"Expected '#rrggbb', got {value!r}")
        try:
            return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid hex colour {value!r}") from exc

    if isinstance(value, Sequence) and len(value) == 3:
        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidArgumentError(f"Colour channels must be integers in [0, 255], got {value!r}")
            channels.append(channel)
        return (channels[0], channels[1], channels[2])

    raise InvalidArgumentError(f"Unsupported colour value {value!r}")


def load_palette(path: str | Path) -> List[Color]:
    """Read a palette YAML file."""

    palette_path = Path(path)
    try:
        with palette_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except UnicodeDecodeError as exc:
        raise CorruptDataError(f"Palette '{palette_path}' is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise FingerprintIOError(f"Failed to read palette '{palette_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise CorruptDataError(f"Invalid YAML in palette '{palette_path}': {exc}") from exc

    if isinstance(data, dict):
        data = data.get("colors")
    if not isinstance(data, list) or not data:
        raise CorruptDataError(f"Palette '{palette_path}' must contain a non-empty list of colours")

    try:
        return [parse_color(entry) for entry in data]
    except InvalidArgumentError as exc:
        raise CorruptDataError(f"Palette '{palette_path}': {exc.message}") from exc


def grey_ramp(levels: int) -> List[Color]:
    """``levels`` greys running from white (index 0) to black (last index)."""

    if levels < 2:
        raise InvalidArgumentError(f"A grey ramp needs at least 2 levels, got {levels}")
    ramp = []
    for index in range(levels):
        value = round(255 * (1 - index / (levels - 1)))
        ramp.append((value, value, value))
    return ramp
