"""Core modules for Diff Object Comparer."""

from .utils.logging import setup_diff_object_comparer_logging

__all__ = [
    "setup_diff_object_comparer_logging",
]
