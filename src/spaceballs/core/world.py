# src/spaceballs/core/world.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Tuple

import numpy as np

from .boundary import WrapBoundary
from .config import SimConfig
from .events import BaseEvent, DestroyEvent, SpawnEvent
from .shapes import Shape, create_shape
from spaceballs.utils.random import make_rng

if TYPE_CHECKING:
    from spaceballs.render.sprites import SpriteRenderer

logger = logging.getLogger(__name__)


@dataclass
class World:
    config: SimConfig
    boundary: WrapBoundary
    rng: np.random.Generator
    renderer: SpriteRenderer
    time: float = 0.0
    _shapes: List[Shape] = field(default_factory=list)
    _next_id: int = 0

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """Shapes in spawn order (= draw order)."""
        return tuple(self._shapes)

    @property
    def n_shapes(self) -> int:
        return len(self._shapes)

    def new_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def add_shape(self, shape: Shape) -> None:
        if shape.id is None:
            shape.id = self.new_id()
        self._shapes.append(shape)

    def update(self, dt: float) -> List[BaseEvent]:
        """
        Advance the world by dt seconds:
        - move, wrap around the canvas edges, shrink
        - refresh sprites whose rounded radius changed
        - drop shapes whose rounded radius reached the removal threshold
        Non-positive dt freezes motion and shrink but the pass still runs.
        """
        dt = max(float(dt), 0.0)
        t = self.time + dt
        events: List[BaseEvent] = []
        keep: List[Shape] = []

        for s in self._shapes:
            s.pos += s.vel * dt
            events.extend(self.boundary.resolve(s, t))
            s.radius -= self.config.shrink_rate * dt

            r = s.pixel_radius
            if r <= self.config.removal_threshold:
                events.append(DestroyEvent(t=t, shape_id=s.id))
                continue
            if r != s.sprite_radius:
                s.sprite = self.renderer.render(s.kind, s.radius)
                s.sprite_radius = r
            keep.append(s)

        self._shapes = keep
        self.time = t
        for e in events:
            logger.debug("%s %s %s", type(e).__name__, e.shape_id, e.to_payload_dict())
        return events

    def spawn(self, event: Any = None) -> SpawnEvent | None:
        """
        Spawn one random shape. The triggering event is ignored: any key will do.

        Spawning is allowed while n_shapes <= max_shapes, so the population
        tops out at max_shapes + 1.
        """
        cfg = self.config
        if self.n_shapes > cfg.max_shapes:
            logger.debug("Population cap reached (%d shapes), spawn ignored", self.n_shapes)
            return None

        pos = self.boundary.sample_position(self.rng, scale=cfg.spawn_scale)
        vel = self.rng.random(2) * (2.0 * cfg.max_speed) - cfg.max_speed
        radius = self.rng.random() * (cfg.max_radius - cfg.min_radius) + cfg.min_radius
        kind = cfg.spawn_kinds[int(self.rng.integers(len(cfg.spawn_kinds)))]

        shape = create_shape(pos=pos, vel=vel, radius=radius, kind=kind, renderer=self.renderer)
        self.add_shape(shape)
        ev = SpawnEvent(t=self.time, shape_id=shape.id, kind=kind.value, radius=shape.radius)
        logger.debug("SpawnEvent %s %s", shape.id, ev.to_payload_dict())
        return ev


def make_world(config: SimConfig | None = None, rng: np.random.Generator | None = None,
               renderer: SpriteRenderer | None = None) -> World:
    from spaceballs.render.sprites import SpriteRenderer

    config = config or SimConfig()
    return World(
        config=config,
        boundary=WrapBoundary(width=config.width, height=config.height),
        rng=rng if rng is not None else make_rng(config.seed, "spawn"),
        renderer=renderer if renderer is not None else SpriteRenderer(filled=config.filled),
    )


def run_simulation(
    world: World,
    n_steps: int,
    dt: float,
    spawn_every: int = 0,
    log_interval: int = 600,
) -> List[BaseEvent]:
    """
    Step the world forward n_steps without a window, optionally spawning a
    shape every `spawn_every` steps. Returns every event produced.
    """
    all_events: List[BaseEvent] = []
    for step in range(n_steps):
        if spawn_every and step % spawn_every == 0:
            ev = world.spawn()
            if ev is not None:
                all_events.append(ev)
        all_events.extend(world.update(dt))
        if (step + 1) % log_interval == 0:
            logger.info("Simulated %.3f seconds / %.3f seconds, %d shapes",
                        world.time, n_steps * dt, world.n_shapes)
    return all_events
