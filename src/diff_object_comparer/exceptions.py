"""Exceptions raised by diff_object_comparer.

Expected divergences (null accordance, inequality, length mismatch) are never
raised; they are returned as ``ComparisonResult`` records. The errors below
cover broken preconditions and explicit assertions only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diff_object_comparer.types.comparison import ComparisonOutcome


class ComparisonError(Exception):
    """Base class for all comparison errors."""


class ShapeMismatchError(ComparisonError):
    """The right value cannot be walked the way the left value is (different declared shapes)."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Property '{path}' has a different shape in instances: {reason}")


class ComparisonDepthError(ComparisonError):
    """Traversal exceeded the interpreter recursion limit (cyclic or very deep input)."""

    def __init__(self, root_name: str) -> None:
        self.root_name = root_name
        super().__init__(
            f"Maximum recursion depth exceeded while comparing '{root_name}'; "
            "the input is too deep or contains a reference cycle"
        )


class ObjectsNotEqualError(ComparisonError, AssertionError):
    """Raised by ``assert_equal`` when at least one divergence was found."""

    def __init__(self, outcome: ComparisonOutcome) -> None:
        self.outcome = outcome
        super().__init__(outcome.summary())


__all__ = [
    "ComparisonDepthError",
    "ComparisonError",
    "ObjectsNotEqualError",
    "ShapeMismatchError",
]
