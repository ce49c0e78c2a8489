"""Classification of compared values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import StrEnum
from typing import Any

from .fields import has_declared_fields
from .scalar import scalar_capability


class ValueKind(StrEnum):
    """Comparison strategy applied to a value."""

    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    COMPOSITE = "composite"


def classify_type(value_type: type) -> ValueKind:
    """Classify a present value by its runtime type.

    Precedence: scalar, declared record (pydantic models are iterable but are
    compared field by field), iterable sequence, composite.
    """
    if scalar_capability(value_type) is not None:
        return ValueKind.SCALAR
    if has_declared_fields(value_type):
        return ValueKind.COMPOSITE
    if issubclass(value_type, Iterable):
        return ValueKind.SEQUENCE
    return ValueKind.COMPOSITE


def classify(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    return classify_type(type(value))


def iterate_sequence(value: Any) -> Iterator[Any]:
    """Iterate a sequence value; mappings yield ``(key, value)`` pairs in insertion order."""
    if isinstance(value, Mapping):
        return iter(value.items())
    return iter(value)


__all__ = [
    "ValueKind",
    "classify",
    "classify_type",
    "iterate_sequence",
]
