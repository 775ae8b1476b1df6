"""Logging setup for applications built on latticeview.

The library itself only creates module loggers; it never attaches
handlers.  Call :func:`setup_logging` from an application entry point.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configure the ``latticeview`` logger.

    Existing handlers on the logger are replaced, so calling this twice
    does not duplicate output.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path to also write logs to.

    Returns:
        The configured ``latticeview`` logger.
    """
    logger = logging.getLogger("latticeview")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialised.")
    return logger
