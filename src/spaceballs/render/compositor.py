# src/spaceballs/render/compositor.py

from __future__ import annotations

from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from spaceballs.utils.math_utils import round_half_away

if TYPE_CHECKING:
    from spaceballs.core.shapes import Shape

BLACK = np.array([0, 0, 0, 255], dtype=np.uint8)


def new_canvas(width: int, height: int) -> np.ndarray:
    """Opaque black RGBA canvas of shape (height, width, 4)."""
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[...] = BLACK
    return canvas


def sprite_origin(pos: Sequence[float], half_size: int, half_extent: Sequence[float]) -> tuple[int, int]:
    """
    Top-left pixel (col, row) of a sprite centred on world position pos.

    World y points up, image rows point down.
    """
    col = round_half_away(half_extent[0] + pos[0] - half_size)
    row = round_half_away(half_extent[1] - pos[1] - half_size)
    return col, row


def blit(canvas: np.ndarray, sprite: np.ndarray, col: int, row: int) -> None:
    """
    Paste the non-transparent pixels of sprite onto canvas at (col, row),
    clipping whatever hangs over the canvas edges.
    """
    H, W = canvas.shape[:2]
    h, w = sprite.shape[:2]
    x0, y0 = max(col, 0), max(row, 0)
    x1, y1 = min(col + w, W), min(row + h, H)
    if x0 >= x1 or y0 >= y1:
        return

    src = sprite[y0 - row:y1 - row, x0 - col:x1 - col]
    dst = canvas[y0:y1, x0:x1]
    mask = src[..., 3] > 0
    dst[mask] = src[mask]


def composite(canvas: np.ndarray, shapes: Iterable["Shape"], half_extent: Sequence[float]) -> np.ndarray:
    """Clear canvas to black and draw every shape's sprite in iteration order."""
    canvas[...] = BLACK
    for s in shapes:
        half_size = s.sprite.shape[0] // 2
        if half_size == 0:
            continue
        col, row = sprite_origin(s.pos, half_size, half_extent)
        blit(canvas, s.sprite, col, row)
    return canvas
