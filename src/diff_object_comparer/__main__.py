"""CLI entry point for running as a module.

Usage:
    python -m diff_object_comparer <left.json> <right.json> [options]
"""

from __future__ import annotations

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
