"""Logging configuration for the command-line tool."""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    Args:
        verbose: Log at DEBUG instead of WARNING

    Returns:
        The configured "todos" logger
    """
    logger = logging.getLogger("todos")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove handlers from earlier calls to avoid duplicates.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(handler)

    return logger
