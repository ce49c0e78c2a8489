from .classifier import ValueKind, classify
from .comparer import DiffObjectComparer, assert_equal, compare
from .fields import field_names
from .scalar import ScalarCapability, register_scalar_type, scalar_capability, unregister_scalar_type

__all__ = [
    "DiffObjectComparer",
    "ScalarCapability",
    "ValueKind",
    "assert_equal",
    "classify",
    "compare",
    "field_names",
    "register_scalar_type",
    "scalar_capability",
    "unregister_scalar_type",
]
