"""
Logging configuration.

The package logger only carries a NullHandler; the host decides where
records go. The CLI attaches a stderr handler for the duration of a run.
"""
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

LOGGER_NAME = "provider_linux"

# Create logger
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for a module name."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logger.getChild(name)


@contextmanager
def console_logging(verbose: bool = False) -> Iterator[logging.Handler]:
    """Send package log records to stderr while the block runs.

    stdout is reserved for report output. The handler is removed and the
    previous level restored on exit.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    previous_level = logger.level

    logger.addHandler(console_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    try:
        yield console_handler
    finally:
        logger.removeHandler(console_handler)
        logger.setLevel(previous_level)
