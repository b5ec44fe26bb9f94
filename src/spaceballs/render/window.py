# src/spaceballs/render/window.py

from __future__ import annotations

import logging
import time
from typing import Callable, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .compositor import composite, new_canvas
from spaceballs.utils.render_utils import fig_inches_from_pixels

if TYPE_CHECKING:
    from spaceballs.core.world import World

logger = logging.getLogger(__name__)


class SpaceballsWindow:
    """
    Matplotlib front end: one figure the size of the canvas, an imshow artist
    refreshed on a timer, and a key handler that spawns shapes.

    Each timer tick calls World.update with the wall-clock time since the
    previous tick; each key press calls World.spawn.
    """

    def __init__(self, world: World, dpi: int = 100, clock: Callable[[], float] = time.perf_counter):
        self.world = world
        self.dpi = dpi
        self.clock = clock
        cfg = world.config
        self.canvas = new_canvas(cfg.width, cfg.height)
        self.half_extent = cfg.half_extent
        self.fig = None
        self.ax = None
        self._image = None
        self._anim = None
        self._last_t: float | None = None

    def _init_figure(self) -> None:
        cfg = self.world.config
        fig = plt.figure(
            figsize=fig_inches_from_pixels(width_px=cfg.width, height_px=cfg.height, dpi=self.dpi),
            dpi=self.dpi,
        )
        fig.patch.set_facecolor("black")
        manager = fig.canvas.manager
        if manager is not None:
            manager.set_window_title(cfg.title)
            # matplotlib binds keys like 'q' and 's'; every key should spawn instead
            handler_id = getattr(manager, "key_press_handler_id", None)
            if handler_id is not None:
                fig.canvas.mpl_disconnect(handler_id)

        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        ax.set_axis_off()
        self._image = ax.imshow(self.canvas, interpolation="nearest")
        fig.canvas.mpl_connect("key_press_event", self._on_key)
        self.fig, self.ax = fig, ax

    def _on_key(self, event) -> None:
        self.world.spawn(event)

    def _on_frame(self, frame_idx: int):
        now = self.clock()
        dt = 0.0 if self._last_t is None else now - self._last_t
        self._last_t = now
        self.world.update(dt)
        composite(self.canvas, self.world.shapes, self.half_extent)
        self._image.set_data(self.canvas)
        return (self._image,)

    def show(self) -> None:
        if self.fig is None:
            self._init_figure()
        self._anim = FuncAnimation(
            self.fig,
            self._on_frame,
            interval=1000.0 / self.world.config.fps,
            blit=True,
            cache_frame_data=False,
        )
        logger.info("Opening %dx%d window '%s'", self.world.config.width,
                    self.world.config.height, self.world.config.title)
        plt.show()
        logger.info("Window closed with %d shapes alive", self.world.n_shapes)

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
