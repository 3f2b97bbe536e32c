"""Logging setup for the shpgeom package."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "shpgeom"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(verbose: bool = False, level: Optional[str] = None) -> int:
    """Resolve the effective log level.

    An explicit level name wins over the verbose flag.

    Args:
        verbose: If True and no level is given, use DEBUG; otherwise INFO.
        level: One of LOG_LEVELS, case-insensitive.

    Returns:
        The numeric logging level.
    """
    if level is None:
        return logging.DEBUG if verbose else logging.INFO

    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {LOG_LEVELS}")
    return logging.getLevelName(name)


def setup_logging(
    verbose: bool = False,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Records go to stderr by default so decoded output on stdout stays
    machine-readable. Calling this again replaces the previous handler.

    Args:
        verbose: Log at DEBUG instead of INFO.
        level: Explicit level name overriding verbose.
        stream: Handler stream (default: sys.stderr at call time).

    Returns:
        The package logger.
    """
    log_level = resolve_level(verbose, level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the specified module, always under the package logger."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
