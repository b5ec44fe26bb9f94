# src/spaceballs/core/boundary.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

import numpy as np

from .shapes import Shape
from .events import WrapEvent, BaseEvent


class Boundary(ABC):
    @abstractmethod
    def resolve(self, shape: Shape, t: float) -> List[BaseEvent]:
        """
        Mutate the shape's position if it has left the domain.
        Return any events describing what happened.
        """
        ...

    @abstractmethod
    def sample_position(self, rng: np.random.Generator, scale: float = 1.0) -> np.ndarray:
        """Sample a spawn position inside the domain."""
        ...


@dataclass
class WrapBoundary(Boundary):
    """
    Toroidal canvas centred on the origin.

    A shape that has fully left one edge (by more than its radius) reappears
    just outside the opposite edge. Velocity is never touched.
    """
    width: float
    height: float

    @property
    def half_extent(self) -> np.ndarray:
        return np.array([self.width / 2.0, self.height / 2.0])

    def resolve(self, shape: Shape, t: float) -> List[BaseEvent]:
        events: List[BaseEvent] = []
        half = self.half_extent
        r = shape.radius
        pos = shape.pos
        # at most one wrap per axis per tick, even if dt overshoots
        for axis in (0, 1):
            limit = half[axis] + r
            if pos[axis] < -limit:
                pos[axis] = limit
            elif pos[axis] > limit:
                pos[axis] = -limit
            else:
                continue
            events.append(WrapEvent(t=t, shape_id=shape.id, axis=axis, new_coord=float(pos[axis])))
        return events

    def sample_position(self, rng: np.random.Generator, scale: float = 1.0) -> np.ndarray:
        # both axes are offset by half the height, so spawns lean left on wide canvases
        half_h = self.height / 2.0
        x = (rng.random() * self.width - half_h) * scale
        y = (rng.random() * self.height - half_h) * scale
        return np.array([x, y], dtype=float)
