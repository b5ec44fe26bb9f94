# src/spaceballs/core/__init__.py

from .shapes import Shape, ShapeKind, create_shape
from .config import SimConfig
from .boundary import Boundary, WrapBoundary
from .events import BaseEvent, WrapEvent, SpawnEvent, DestroyEvent
from .world import World, make_world, run_simulation

__all__ = [
    "Shape",
    "ShapeKind",
    "create_shape",
    "SimConfig",
    "Boundary",
    "WrapBoundary",
    "BaseEvent",
    "WrapEvent",
    "SpawnEvent",
    "DestroyEvent",
    "World",
    "make_world",
    "run_simulation",
]
