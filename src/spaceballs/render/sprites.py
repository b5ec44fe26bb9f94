from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict, List, Tuple

import numpy as np
from PIL import Image, ImageDraw

from spaceballs.core.shapes import ShapeKind
from spaceballs.utils.math_utils import round_half_away


WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)

# equilateral with unit base: apex sits sqrt(3)/2 above the base at y = -0.5
TRIANGLE_TEMPLATE: Tuple[Tuple[float, float], ...] = (
    (-0.5, -0.5),
    (0.5, -0.5),
    (0.0, 0.36602540378443865),
)


def triangle_vertices(r: int) -> List[Tuple[int, int]]:
    """
    Pixel vertices of the triangle sprite for integer radius r:
    template scaled by r, translated to the buffer centre (r, r), rounded.
    """
    return [
        (round_half_away(vx * r + r), round_half_away(vy * r + r))
        for vx, vy in TRIANGLE_TEMPLATE
    ]


def _draw_circle(draw: ImageDraw.ImageDraw, r: int, filled: bool) -> None:
    box = [0, 0, 2 * r - 1, 2 * r - 1]
    if filled:
        draw.ellipse(box, fill=WHITE)
    else:
        draw.ellipse(box, outline=WHITE, width=1)


def _draw_square(draw: ImageDraw.ImageDraw, r: int, filled: bool) -> None:
    box = [0, 0, 2 * r - 1, 2 * r - 1]
    if filled:
        draw.rectangle(box, fill=WHITE)
    else:
        draw.rectangle(box, outline=WHITE, width=1)


def _draw_triangle(draw: ImageDraw.ImageDraw, r: int, filled: bool) -> None:
    pts = triangle_vertices(r)
    if filled:
        draw.polygon(pts, fill=WHITE)
    else:
        draw.polygon(pts, outline=WHITE)


def _draw_hexagon(draw: ImageDraw.ImageDraw, r: int, filled: bool) -> None:
    # no rasterizer yet; the sprite stays fully transparent
    return None


RASTERIZERS: Dict[ShapeKind, Callable[[ImageDraw.ImageDraw, int, bool], None]] = {
    ShapeKind.CIRCLE: _draw_circle,
    ShapeKind.SQUARE: _draw_square,
    ShapeKind.TRIANGLE: _draw_triangle,
    ShapeKind.HEXAGON: _draw_hexagon,
}


@lru_cache(maxsize=256)
def _rasterize(kind: ShapeKind, r: int, filled: bool) -> np.ndarray:
    if r <= 0:
        img = np.zeros((0, 0, 4), dtype=np.uint8)
    else:
        canvas = Image.new("RGBA", (2 * r, 2 * r), TRANSPARENT)
        RASTERIZERS[kind](ImageDraw.Draw(canvas), r, filled)
        img = np.array(canvas, dtype=np.uint8)
    img.setflags(write=False)
    return img


class SpriteRenderer:
    """
    Rasterizes shapes into square RGBA uint8 buffers of side 2*round(radius).

    Output depends only on (kind, round(radius), filled). Rasterized buffers are
    memoized, but every call returns a fresh copy so shapes never share pixels.
    """

    def __init__(self, filled: bool = True):
        self.filled = filled

    def render(self, kind: ShapeKind, radius: float) -> np.ndarray:
        if kind not in RASTERIZERS:
            raise ValueError(f"Unknown shape kind: {kind!r}")
        r = round_half_away(radius)
        return _rasterize(kind, r, self.filled).copy()
