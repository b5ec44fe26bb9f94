# src/spaceballs/core/config.py

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Tuple

from .shapes import ShapeKind


@dataclass(frozen=True)
class SimConfig:
    width: int = 700
    height: int = 500
    title: str = "Spaceballs"
    fps: int = 60
    max_shapes: int = 50              # spawn allowed while n_shapes <= max_shapes
    spawn_scale: float = 0.75         # spawn positions are pulled towards the centre
    max_speed: float = 225.0          # per-axis velocity in [-max_speed, max_speed]
    min_radius: float = 3.0
    max_radius: float = 20.0
    shrink_rate: float = 0.1          # radius units per second
    removal_threshold: float = 0.0    # removed once round(radius) <= this
    spawn_kinds: Tuple[ShapeKind, ...] = field(
        default_factory=lambda: (ShapeKind.CIRCLE, ShapeKind.TRIANGLE, ShapeKind.SQUARE)
    )
    filled: bool = True
    seed: int | None = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.max_shapes < 0:
            raise ValueError(f"max_shapes must be >= 0, got {self.max_shapes}")
        if self.min_radius >= self.max_radius:
            raise ValueError(
                f"min_radius ({self.min_radius}) must be smaller than max_radius ({self.max_radius})"
            )
        if not self.spawn_kinds:
            raise ValueError("spawn_kinds must not be empty")
        if ShapeKind.HEXAGON in self.spawn_kinds:
            raise ValueError("HEXAGON cannot be spawned: it has no rasterizer")

    @property
    def half_extent(self) -> Tuple[float, float]:
        return self.width / 2.0, self.height / 2.0

    @classmethod
    def from_args(cls, args) -> "SimConfig":
        kwargs = {}
        for f in fields(cls):
            if hasattr(args, f.name):
                kwargs[f.name] = getattr(args, f.name)
        return cls(**kwargs)
