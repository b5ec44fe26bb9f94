# src/spaceballs/core/shapes.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from spaceballs.utils.math_utils import round_half_away


class ShapeKind(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    HEXAGON = "hexagon"  # declared, never spawned or drawn


@dataclass
class Shape:
    """
    A drifting, shrinking shape.

    - pos / vel: world-space position (origin at canvas centre, y up) & velocity
    - radius: wrap margin and sprite half-size; shrinks every tick
    - sprite: RGBA uint8 buffer of side 2*round(radius), owned by this shape
    - sprite_radius: the rounded radius the sprite was last rendered for
    """
    pos: np.ndarray           # shape (2,)
    vel: np.ndarray           # shape (2,)
    radius: float
    kind: ShapeKind
    sprite: np.ndarray = field(default_factory=lambda: np.zeros((0, 0, 4), dtype=np.uint8), repr=False)
    sprite_radius: int = 0
    id: int | None = None

    @property
    def pixel_radius(self) -> int:
        return round_half_away(self.radius)


def create_shape(
    pos: np.ndarray,
    vel: np.ndarray,
    radius: float,
    kind: ShapeKind,
    renderer=None,
) -> Shape:
    """Helper to create a Shape with its initial sprite already rasterized."""
    shape = Shape(
        pos=np.asarray(pos, dtype=float).copy(),
        vel=np.asarray(vel, dtype=float).copy(),
        radius=float(radius),
        kind=kind,
    )
    if renderer is not None:
        shape.sprite = renderer.render(kind, shape.radius)
        shape.sprite_radius = shape.pixel_radius
    return shape
