"""Logging configuration for Chrono World."""

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
    """Configure logging for the simulation.

    Args:
        level: Optional explicit log level. Falls back to the
            ``CHRONO_WORLD_LOG_LEVEL`` env var, then INFO. DEBUG shows per-entry
            schedule checks and every activation.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``chrono_world``).
    """
    raw_level = level if level is not None else os.getenv("CHRONO_WORLD_LOG_LEVEL")
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("chrono_world")
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
