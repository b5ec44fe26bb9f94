# src/spaceballs/app.py

from __future__ import annotations

import logging

from spaceballs.core import SimConfig, make_world
from spaceballs.render.window import SpaceballsWindow
from spaceballs.utils.cli import build_parser
from spaceballs.utils.log import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    sim_config = SimConfig.from_args(args)
    logger.info("Starting with seed=%s", sim_config.seed)

    world = make_world(sim_config)
    window = SpaceballsWindow(world)
    window.show()


if __name__ == "__main__":
    main()
