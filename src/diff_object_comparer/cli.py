"""Command-line interface for comparing two JSON documents."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from diff_object_comparer.core.comparison import DiffObjectComparer
from diff_object_comparer.core.utils.logging import logger, setup_diff_object_comparer_logging
from diff_object_comparer.exceptions import ComparisonError
from diff_object_comparer.types import ComparerConfig, ComparisonOutcome

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    except RecursionError as e:
        raise ValueError(f"JSON in {path} is too deeply nested to load") from e


def _format_outcome(outcome: ComparisonOutcome, verbose: bool = False) -> str:
    """Format a ComparisonOutcome for display.

    Args:
        outcome: The comparison outcome.
        verbose: If True, show every divergence as JSON including both values.

    Returns:
        Formatted string for display.
    """
    if verbose:
        payload = {
            "equal": outcome.equal,
            "results": [result.model_dump(mode="json") for result in outcome.results],
        }
        return json.dumps(payload, indent=2)
    return outcome.summary()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="diff-object-comparer",
        description="Compare two JSON documents and report every divergence with its path",
    )
    parser.add_argument("left", type=Path, help="Path to the left JSON document")
    parser.add_argument("right", type=Path, help="Path to the right JSON document")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output with full JSON details",
    )
    parser.add_argument(
        "--root-name",
        dest="root_name",
        default=None,
        help="Path name of the root documents (default: DIFF_COMPARER_ROOT_NAME env var or Root)",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (default: DIFF_COMPARER_LOG_LEVEL env var or WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        0 when the documents are equal, 1 when they differ, 2 on error.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        overrides = {"root_name": args.root_name, "log_level": args.log_level}
        settings = ComparerConfig.from_env().model_dump()
        settings.update({key: value for key, value in overrides.items() if value})
        config = ComparerConfig(**settings)
        setup_diff_object_comparer_logging(config.log_level)

        logger.debug(f"Comparing {args.left} with {args.right}")
        outcome = DiffObjectComparer(config).compare(_load_json(args.left), _load_json(args.right))
    except (ValueError, ComparisonError) as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(_format_outcome(outcome, args.verbose))
    return EXIT_EQUAL if outcome.equal else EXIT_DIFFERENT


if __name__ == "__main__":
    sys.exit(main())
