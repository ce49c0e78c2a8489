"""Logging utilities for diff_object_comparer package."""

import logging
import sys

# Create global logger instance
logger = logging.getLogger("Diff-Object-Comparer")


def setup_diff_object_comparer_logging(level: int | str = logging.INFO) -> None:
    """
    Setup logging with a clean format for the diff_object_comparer package.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG" (default: INFO)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Use stdout stream handler to ensure logs are dumped to stdout
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[Diff Object Comparer] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_diff_object_comparer_logging",
]
