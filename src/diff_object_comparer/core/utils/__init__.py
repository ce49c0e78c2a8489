from .logging import logger, setup_diff_object_comparer_logging

__all__ = [
    "logger",
    "setup_diff_object_comparer_logging",
]
