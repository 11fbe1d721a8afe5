"""Logging for pathfinder.

Every module logs through `get_logger(__name__)`, so all records flow into the
``pathfinder`` logger. That logger is configured lazily on first use with a
single stdout handler. Searches only emit one DEBUG summary each, so raising
the level to DEBUG is the way to see what `PathFinder.find_path` did:

    from pathfinder.logging import set_global_log_level

    set_global_log_level("debug")
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "pathfinder"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

#: A numeric logging level or its case-insensitive name (e.g. "debug").
LogLevel = Union[int, str]

_ROOT_LOGGER_CONFIGURED = False


def _to_level(level: LogLevel) -> int:
    """Return the numeric logging level for `level`.

    Raises:
        ValueError: If `level` is a name the logging module does not know.
    """
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def setup_root_logger(
    level: LogLevel = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``pathfinder`` logger.

    Only the first call has an effect until `reset_logging()` is called.

    Args:
        level: Level for the package logger (default: INFO).
        format_string: Record format (default: `DEFAULT_FORMAT`).
        handler: Handler to attach (default: StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_to_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees our records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that defers its level to the ``pathfinder`` logger."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: LogLevel) -> None:
    """Set the level of the ``pathfinder`` logger and its handlers.

    Args:
        level: Numeric level or level name, e.g. ``logging.DEBUG`` or "debug".

    Raises:
        ValueError: If `level` is an unknown level name.
    """
    numeric = _to_level(level)
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def reset_logging() -> None:
    """Drop the package handler so `setup_root_logger()` can run again."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
