"""Centralized logging configuration for querybuilder.

Every module logs through a child of the ``querybuilder`` logger so applications can
tune the whole library with a single logger.
"""

import logging
import sys
from typing import Optional

__all__ = (
    "DEFAULT_FORMAT",
    "configure_logging",
    "get_logger",
)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance under the querybuilder namespace.

    Args:
        name: Logger name. If not provided, returns the root querybuilder logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("querybuilder")

    if not name.startswith("querybuilder"):
        name = f"querybuilder.{name}"

    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_string: str = DEFAULT_FORMAT,
    log_to_file: Optional[str] = None,
    extra_handlers: Optional[list[logging.Handler]] = None,
) -> None:
    """Configure logging for the entire querybuilder library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Format used by every handler attached here
        log_to_file: Optional file path to log to
        extra_handlers: Additional handlers to add
    """
    root_logger = get_logger()
    root_logger.setLevel(getattr(logging, level.upper()))

    root_logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if extra_handlers:
        for handler in extra_handlers:
            root_logger.addHandler(handler)

    # Don't propagate to the root Python logger
    root_logger.propagate = False

    root_logger.debug("querybuilder logging configured (level=%s, handlers=%d)", level, len(root_logger.handlers))
