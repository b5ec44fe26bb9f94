# src/spaceballs/utils/log.py

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_configured = False


def setup_logging(level: str | int = "INFO") -> None:
    """
    Install a single stderr handler on the package logger.

    Idempotent: repeated calls only change the level.
    """
    global _configured
    logger = logging.getLogger("spaceballs")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
