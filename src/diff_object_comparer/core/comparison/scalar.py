"""Scalar comparison capabilities.

Every scalar type gets exactly one capability, resolved once and cached:

- ``ORDERABLE`` types are compared with a three-way comparison first and fall
  back to ``==`` when the right value cannot be ordered against the left one.
- ``EQUATABLE`` types are compared with ``==`` only.

Types without a capability are not scalars. Callers can declare their own
value types with ``register_scalar_type``.

NaN values (float, complex and Decimal, quiet or signaling) are equal to
each other, so comparing a value with itself never reports a divergence.

Capabilities are cached in a bounded LRU cache keyed by type. A cached type
stays referenced until it is evicted or the cache is cleared.
"""

from __future__ import annotations

import cmath
import datetime
import decimal
import enum
import functools
import numbers
import uuid
from enum import StrEnum
from pathlib import PurePath
from typing import Any


class ScalarCapability(StrEnum):
    """How values of a scalar type are compared."""

    ORDERABLE = "orderable"
    EQUATABLE = "equatable"


# bool, Fraction and IntEnum are numbers.Real
ORDERABLE_TYPES: tuple[type, ...] = (
    numbers.Real,
    decimal.Decimal,
    str,
    bytes,
    bytearray,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    PurePath,
)

EQUATABLE_TYPES: tuple[type, ...] = (
    numbers.Number,
    enum.Enum,
    range,
    type(None),
)

TYPE_CACHE_SIZE = 1024

_registered_types: dict[type, ScalarCapability] = {}


def register_scalar_type(value_type: type, *, orderable: bool = False) -> None:
    """Declare ``value_type`` (and its subclasses) as a scalar.

    Args:
        value_type: Type to compare directly instead of walking it.
        orderable: Use a three-way comparison before falling back to equality.
    """
    _registered_types[value_type] = ScalarCapability.ORDERABLE if orderable else ScalarCapability.EQUATABLE
    scalar_capability.cache_clear()


def unregister_scalar_type(value_type: type) -> None:
    """Remove a type declared with ``register_scalar_type``."""
    _registered_types.pop(value_type, None)
    scalar_capability.cache_clear()


@functools.lru_cache(maxsize=TYPE_CACHE_SIZE)
def scalar_capability(value_type: type) -> ScalarCapability | None:
    """Return the capability of ``value_type``, or None if it is not a scalar."""
    # registrations win and the most derived one applies
    for base in value_type.__mro__:
        if base in _registered_types:
            return _registered_types[base]

    if issubclass(value_type, ORDERABLE_TYPES):
        return ScalarCapability.ORDERABLE
    if issubclass(value_type, EQUATABLE_TYPES):
        return ScalarCapability.EQUATABLE
    return None


def is_nan(value: Any) -> bool:
    """Check if ``value`` is a float, complex or Decimal NaN without signaling."""
    if isinstance(value, decimal.Decimal):
        return value.is_nan()
    if isinstance(value, (float, complex)):
        return cmath.isnan(value)
    return False


def three_way_compare(left: Any, right: Any) -> int | None:
    """Order ``left`` against ``right``.

    Returns -1, 0 or 1, or None when the two values cannot be ordered against
    each other. NaN sorts below every number and equal to another NaN.
    """
    left_nan, right_nan = is_nan(left), is_nan(right)
    if left_nan or right_nan:
        if left_nan and right_nan:
            return 0
        return -1 if left_nan else 1

    try:
        if left < right:
            return -1
        if left > right:
            return 1
    except (TypeError, ArithmeticError):
        return None
    return 0


def scalars_equal(left: Any, right: Any) -> bool:
    """Check two scalar values for equality.

    First match wins: both absent, both NaN, zero three-way comparison
    (orderable types only), plain equality. Equality that signals (Decimal
    sNaN against a number) counts as unequal.
    """
    if left is None and right is None:
        return True

    if is_nan(left) and is_nan(right):
        return True

    if scalar_capability(type(left)) is ScalarCapability.ORDERABLE and three_way_compare(left, right) == 0:
        return True

    try:
        return bool(left == right)
    except ArithmeticError:
        return False


__all__ = [
    "EQUATABLE_TYPES",
    "ORDERABLE_TYPES",
    "TYPE_CACHE_SIZE",
    "ScalarCapability",
    "is_nan",
    "register_scalar_type",
    "scalar_capability",
    "scalars_equal",
    "three_way_compare",
    "unregister_scalar_type",
]
