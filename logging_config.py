"""Centralized logging configuration for the simulation and its pygame shell."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure application logging.

    Args:
        level: Optional explicit log level. Falls back to ``BUFFET_LOG_LEVEL``
            env var or INFO when not provided.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The root logger of the simulation core (``world``).
    """
    raw_level = level if level is not None else os.getenv("BUFFET_LOG_LEVEL")
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    for name in ("world", "race"):
        logging.getLogger(name).setLevel(resolved_level)

    core_logger = logging.getLogger("world")
    core_logger.debug("Logging configured at %s", resolved_level)
    return core_logger
