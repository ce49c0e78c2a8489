"""Diff Object Comparer - structural deep comparison reporting every divergence"""

from diff_object_comparer.core.comparison import (
    DiffObjectComparer,
    assert_equal,
    compare,
    register_scalar_type,
    unregister_scalar_type,
)
from diff_object_comparer.core.utils import logger, setup_diff_object_comparer_logging
from diff_object_comparer.exceptions import (
    ComparisonDepthError,
    ComparisonError,
    ObjectsNotEqualError,
    ShapeMismatchError,
)
from diff_object_comparer.types import ComparerConfig, ComparisonOutcome, ComparisonResult, DivergenceKind

__all__ = [
    "ComparerConfig",
    "ComparisonDepthError",
    "ComparisonError",
    "ComparisonOutcome",
    "ComparisonResult",
    "DiffObjectComparer",
    "DivergenceKind",
    "ObjectsNotEqualError",
    "ShapeMismatchError",
    "assert_equal",
    "compare",
    "logger",
    "register_scalar_type",
    "setup_diff_object_comparer_logging",
    "unregister_scalar_type",
]
