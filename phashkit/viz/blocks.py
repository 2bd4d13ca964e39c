"""Block renderings of fingerprints.

Each bit of a fingerprint usually stands for one cell of the downscaled image
the hash was computed from. The renderers map bits back onto a square grid of
``side = isqrt(bit_length)`` cells and paint every cell as a
``block_size x block_size`` square, which gives a quick visual check of what a
hash encodes.

Cells are filled column-major: bit ``i`` lands at ``x = i // side`` and
``y = i % side``. When ``bit_length`` is not a perfect square only the first
``side * side`` bits are drawn; the remaining bits are not shown.

Buffers are ``numpy.ndarray`` objects of shape ``(height, width, 3)`` and dtype
``uint8``; :func:`to_image` and :func:`save_image` hand them to Pillow.
"""
from __future__ import annotations

import logging
from math import isqrt
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image

from phashkit.algorithms.base import HashingAlgorithm
from phashkit.errors import FingerprintIOError, InvalidArgumentError
from phashkit.fingerprint.fuzzy import FuzzyFingerprint
from phashkit.fingerprint.hash import Fingerprint
from phashkit.viz.palette import DEFAULT_PALETTE, Color, grey_ramp

__all__ = [
    "grid_side",
    "render_blocks",
    "render_fingerprint",
    "render_fuzzy",
    "to_image",
    "save_image",
]

log = logging.getLogger("phashkit.viz.blocks")


def grid_side(bit_length: int) -> int:
    """Side length of the square grid used for ``bit_length`` bits."""

    return isqrt(bit_length)


def render_blocks(
    color_index: Sequence[int],
    palette: Sequence[Color],
    side: int,
    block_size: int,
) -> np.ndarray:
    """Paint ``side * side`` cells coloured by ``palette[color_index[i]]``.

    ``color_index`` lists cells in column-major order; entries past
    ``side * side`` are ignored.
    """

    if block_size <= 0:
        raise InvalidArgumentError(f"Block size must be positive, got {block_size}")
    if side <= 0:
        raise InvalidArgumentError(f"Grid side must be positive, got {side}")

    try:
        colors = np.asarray(palette, dtype=np.int64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Palette must be a sequence of RGB triples: {exc}") from exc
    if colors.ndim != 2 or colors.shape[1] != 3 or colors.shape[0] == 0:
        raise InvalidArgumentError("Palette must be a non-empty sequence of RGB triples")
    if colors.min() < 0 or colors.max() > 255:
        raise InvalidArgumentError("Palette channels must lie in [0, 255]")

    cells = side * side
    indices = np.asarray(color_index, dtype=np.int64).reshape(-1)
    if indices.size < cells:
        raise InvalidArgumentError(f"Need {cells} colour indices for a {side}x{side} grid, got {indices.size}")
    indices = indices[:cells]
    if indices.min() < 0 or indices.max() >= colors.shape[0]:
        raise InvalidArgumentError(f"Colour index outside palette of {colors.shape[0]} colours")

    # Rows of the reshaped array are columns of the picture.
    grid = indices.reshape(side, side).T
    cell_image = colors.astype(np.uint8)[grid]
    return np.repeat(np.repeat(cell_image, block_size, axis=0), block_size, axis=1)


def render_fingerprint(
    fingerprint: Fingerprint,
    block_size: int,
    *,
    palette: Sequence[Color] = DEFAULT_PALETTE,
    algorithm: Optional[HashingAlgorithm] = None,
) -> np.ndarray:
    """Render ``fingerprint`` with unset bits as ``palette[0]`` and set bits as ``palette[1]``.

    Algorithms that store their bits in a non-raster order can be passed as
    ``algorithm``; the fingerprint is reordered through
    :meth:`HashingAlgorithm.raster_fingerprint` first.
    """

    if block_size <= 0:
        raise InvalidArgumentError(f"Block size must be positive, got {block_size}")
    if algorithm is not None:
        fingerprint = algorithm.raster_fingerprint(fingerprint)

    side = grid_side(fingerprint.bit_length)
    _warn_truncation(fingerprint.bit_length, side)
    color_index = [1 if fingerprint.bit_at(i) else 0 for i in range(side * side)]
    log.debug("Rendering %d bits as %dx%d grid, block size %d", fingerprint.bit_length, side, side, block_size)
    return render_blocks(color_index, palette, side, block_size)


def render_fuzzy(fuzzy: FuzzyFingerprint, block_size: int, levels: int = 5) -> np.ndarray:
    """Render ``fuzzy`` on a grey ramp: confident ones dark, confident zeros light."""

    ramp = grey_ramp(levels)
    side = grid_side(fuzzy.bit_length)
    _warn_truncation(fuzzy.bit_length, side)
    color_index = [
        int(round((weight + 1.0) / 2.0 * (levels - 1))) for weight in fuzzy.bit_weights[: side * side]
    ]
    return render_blocks(color_index, ramp, side, block_size)


def to_image(buffer: np.ndarray) -> Image.Image:
    """Wrap an RGB render buffer in a Pillow image."""

    return Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))


def save_image(buffer: np.ndarray, path: str | Path) -> Path:
    """Write ``buffer`` to ``path``; the format follows the file extension."""

    out_path = Path(path)
    image = to_image(buffer)
    try:
        image.save(out_path)
    except ValueError as exc:
        raise InvalidArgumentError(f"Can't save image as '{out_path}': {exc}") from exc
    except OSError as exc:
        raise FingerprintIOError(f"Failed to write image '{out_path}': {exc}") from exc
    return out_path


def _warn_truncation(bit_length: int, side: int) -> None:
    dropped = bit_length - side * side
    if dropped:
        log.warning("Bit length %d is not a perfect square; %d trailing bits are not rendered", bit_length, dropped)
