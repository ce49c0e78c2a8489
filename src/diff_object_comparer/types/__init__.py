"""Type definitions for Diff Object Comparer."""

from .comparison import ComparisonOutcome, ComparisonResult, DivergenceKind
from .config import ComparerConfig

__all__ = [
    "ComparerConfig",
    "ComparisonOutcome",
    "ComparisonResult",
    "DivergenceKind",
]
