"""Field enumeration for composite values.

A composite's comparable fields are its readable, public, non-static
attributes. Declared fields are resolved once per type and cached:

- pydantic models: ``model_fields`` followed by ``model_computed_fields``,
  then the public extra fields of the instance (``extra="allow"``)
- dataclasses: ``dataclasses.fields`` followed by public properties
- other classes: public ``__slots__`` entries, the public instance
  attributes of the value, then public properties

Names starting with an underscore are private and skipped. Methods, class
attributes, static and class methods are never fields.

Per-type tables live in bounded LRU caches. A cached type stays referenced
until it is evicted.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
from typing import Any

from pydantic import BaseModel

from .scalar import TYPE_CACHE_SIZE


def is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_readable_property(attribute: Any) -> bool:
    if isinstance(attribute, property):
        return attribute.fget is not None
    return isinstance(attribute, functools.cached_property)


def _slot_names(value_type: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(value_type.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if is_public(slot) and slot not in names)
    return names


@functools.lru_cache(maxsize=TYPE_CACHE_SIZE)
def _property_names(value_type: type) -> tuple[str, ...]:
    names: list[str] = []
    # base classes first, each in definition order
    for klass in reversed(value_type.__mro__):
        for name in vars(klass):
            if not is_public(name) or name in names:
                continue
            # the most derived definition decides whether the name is still a property
            if _is_readable_property(inspect.getattr_static(value_type, name)):
                names.append(name)
    return tuple(names)


@functools.lru_cache(maxsize=TYPE_CACHE_SIZE)
def declared_field_names(value_type: type) -> tuple[str, ...]:
    """Return the fields of ``value_type`` that do not depend on a particular instance."""
    if issubclass(value_type, BaseModel):
        names = [*value_type.model_fields, *value_type.model_computed_fields]
        return tuple(name for name in names if is_public(name))

    if dataclasses.is_dataclass(value_type):
        names = [field.name for field in dataclasses.fields(value_type) if is_public(field.name)]
    else:
        names = _slot_names(value_type)

    names.extend(name for name in _property_names(value_type) if name not in names)
    return tuple(names)


def has_declared_fields(value_type: type) -> bool:
    """Check if ``value_type`` is a record type whose shape is declared on the class."""
    return issubclass(value_type, BaseModel) or dataclasses.is_dataclass(value_type)


def field_names(value: Any) -> list[str]:
    """Return the comparable field names of ``value`` in enumeration order."""
    if value is None:
        return []

    value_type = type(value)
    declared = declared_field_names(value_type)
    if isinstance(value, BaseModel):
        extra = value.model_extra or {}
        return [*declared, *(name for name in extra if is_public(name) and name not in declared)]
    if has_declared_fields(value_type):
        return list(declared)

    # plain objects: instance attributes come before properties
    properties = _property_names(value_type)
    names = [name for name in declared if name not in properties]
    names.extend(
        name
        for name in getattr(value, "__dict__", {})
        if is_public(name) and name not in names and name not in properties
    )
    names.extend(properties)
    return names


__all__ = [
    "declared_field_names",
    "field_names",
    "has_declared_fields",
    "is_public",
]
