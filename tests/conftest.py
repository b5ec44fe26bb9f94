from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from spaceballs.core import SimConfig, ShapeKind, create_shape, make_world
from spaceballs.render.sprites import SpriteRenderer


class CountingRenderer(SpriteRenderer):
    """SpriteRenderer that records every render call."""

    def __init__(self, filled: bool = True):
        super().__init__(filled=filled)
        self.calls: list[tuple[ShapeKind, float]] = []

    def render(self, kind, radius):
        self.calls.append((kind, radius))
        return super().render(kind, radius)


@pytest.fixture
def renderer() -> CountingRenderer:
    return CountingRenderer()


@pytest.fixture
def config() -> SimConfig:
    return SimConfig(seed=1234)


@pytest.fixture
def world(config, renderer):
    return make_world(config, renderer=renderer)


@pytest.fixture
def add_shape(world, renderer):
    """Insert a hand-placed shape and return it."""

    def _add(pos=(0.0, 0.0), vel=(0.0, 0.0), radius=10.0, kind=ShapeKind.CIRCLE):
        shape = create_shape(pos=np.array(pos), vel=np.array(vel), radius=radius, kind=kind, renderer=renderer)
        world.add_shape(shape)
        return shape

    return _add
