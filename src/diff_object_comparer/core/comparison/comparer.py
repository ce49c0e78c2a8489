"""Deep, order-preserving comparison of two values of the same shape.

The comparer walks both object graphs depth-first and records every
divergence it finds instead of stopping at the first one. Each pair of values
is classified by the runtime type of its left value:

- null pairs are equal, half-null pairs diverge on null accordance
- scalars are compared by ordering where available, then by equality
- sequences are walked in lockstep; a length difference is reported once, at
  the sequence path, when one side runs out before the other
- composites are compared field by field

Reference cycles are not detected. A cyclic input recurses until the
interpreter limit is hit and a ``ComparisonDepthError`` is raised.
"""

from __future__ import annotations

from typing import Any

from diff_object_comparer.core.utils.logging import logger
from diff_object_comparer.exceptions import ComparisonDepthError, ObjectsNotEqualError, ShapeMismatchError
from diff_object_comparer.types.comparison import ComparisonOutcome, ComparisonResult, DivergenceKind
from diff_object_comparer.types.config import ComparerConfig

from .classifier import ValueKind, classify, iterate_sequence
from .fields import field_names
from .messages import collection_length_message, equality_message, null_accordancy_message
from .scalar import scalars_equal

_EXHAUSTED = object()


class DiffObjectComparer:
    """Compares two values and reports every divergence with its path.

    Example:
        >>> comparer = DiffObjectComparer()
        >>> equal, results = comparer.compare([1, 2, 3], [1, 9, 3])
        >>> equal
        False
        >>> results[0].path
        'Root[1]'
    """

    def __init__(self, config: ComparerConfig | None = None) -> None:
        self.config = config or ComparerConfig()

    def compare(self, left: Any, right: Any) -> ComparisonOutcome:
        """Compare two values of the same declared shape.

        Args:
            left: Left root value.
            right: Right root value.

        Returns:
            ComparisonOutcome whose ``equal`` is True iff ``results`` is empty. ``results``
            lists the divergent pairs in depth-first, left-to-right order.

        Raises:
            ShapeMismatchError: If the right value cannot be walked like the left one.
            ComparisonDepthError: If the traversal exceeds the interpreter recursion limit.
        """
        results: list[ComparisonResult] = []
        root = ComparisonResult(left_value=left, right_value=right, path=self.config.root_name)

        try:
            equal = self._compare_pair(root, results)
        except RecursionError as e:
            raise ComparisonDepthError(self.config.root_name) from e

        logger.debug(f"Compared '{root.path}': {len(results)} divergence(s)")
        return ComparisonOutcome(equal=equal, results=tuple(results))

    def assert_equal(self, left: Any, right: Any) -> None:
        """Raise ``ObjectsNotEqualError`` listing every divergence if the values differ."""
        outcome = self.compare(left, right)
        if not outcome.equal:
            raise ObjectsNotEqualError(outcome)

    def _compare_pair(self, pair: ComparisonResult, results: list[ComparisonResult]) -> bool:
        left, right = pair.left_value, pair.right_value

        if left is None and right is None:
            return True

        # must run before classification, an absent value has no type
        if (left is None) != (right is None):
            message = null_accordancy_message(pair.path, left, right, self.config.null_placeholder)
            return self._record(pair, DivergenceKind.NULL_ACCORDANCY, message, results)

        kind = classify(left)
        if kind is ValueKind.SCALAR:
            return self._compare_scalars(pair, results)
        if kind is ValueKind.SEQUENCE:
            return self._compare_sequences(pair, results)
        return self._compare_composites(pair, results)

    def _compare_scalars(self, pair: ComparisonResult, results: list[ComparisonResult]) -> bool:
        if scalars_equal(pair.left_value, pair.right_value):
            return True

        message = equality_message(pair.path, pair.left_value, pair.right_value)
        return self._record(pair, DivergenceKind.EQUALITY, message, results)

    def _compare_sequences(self, pair: ComparisonResult, results: list[ComparisonResult]) -> bool:
        left_items = iterate_sequence(pair.left_value)
        try:
            right_items = iterate_sequence(pair.right_value)
        except TypeError as e:
            reason = f"'{type(pair.right_value).__name__}' is not iterable"
            raise ShapeMismatchError(pair.path, reason) from e

        equal = True
        index = 0
        while True:
            left_item = next(left_items, _EXHAUSTED)
            right_item = next(right_items, _EXHAUSTED)

            if (left_item is _EXHAUSTED) != (right_item is _EXHAUSTED):
                return self._record(
                    pair, DivergenceKind.COLLECTION_LENGTH, collection_length_message(pair.path), results
                )

            if left_item is _EXHAUSTED:
                return equal

            element = pair.child(left_item, right_item, f"{pair.path}[{index}]")
            if not self._compare_pair(element, results):
                equal = False
            index += 1

    def _compare_composites(self, pair: ComparisonResult, results: list[ComparisonResult]) -> bool:
        equal = True
        for name in field_names(pair.left_value):
            try:
                right_value = getattr(pair.right_value, name)
            except AttributeError as e:
                reason = f"'{type(pair.right_value).__name__}' has no readable field '{name}'"
                raise ShapeMismatchError(f"{pair.path}.{name}", reason) from e

            field = pair.child(getattr(pair.left_value, name), right_value, f"{pair.path}.{name}")
            if not self._compare_pair(field, results):
                equal = False

        return equal

    def _record(
        self,
        pair: ComparisonResult,
        kind: DivergenceKind,
        message: str,
        results: list[ComparisonResult],
    ) -> bool:
        logger.debug(message)
        results.append(pair.diverged(kind, message))
        return False


def compare(left: Any, right: Any, config: ComparerConfig | None = None) -> ComparisonOutcome:
    """Compare two values with a fresh ``DiffObjectComparer``. See ``DiffObjectComparer.compare``."""
    return DiffObjectComparer(config).compare(left, right)


def assert_equal(left: Any, right: Any, config: ComparerConfig | None = None) -> None:
    """Raise ``ObjectsNotEqualError`` listing every divergence if the values differ."""
    DiffObjectComparer(config).assert_equal(left, right)


__all__ = [
    "DiffObjectComparer",
    "assert_equal",
    "compare",
]
