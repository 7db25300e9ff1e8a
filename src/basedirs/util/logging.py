"""Logging configuration for basedirs."""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "basedirs"


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging for basedirs.

    Args:
        verbosity: 0 = WARNING, 1 = INFO, 2+ = DEBUG.
    """
    level_map = {0: logging.WARNING, 1: logging.INFO}
    level = level_map.get(verbosity, logging.DEBUG)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(levelname)s %(name)s: %(message)s")
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the basedirs namespace.

    Module names that already live in the package (``basedirs.core.dirs``)
    are not prefixed twice.

    Args:
        name: Module name, typically __name__.

    Returns:
        A logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
