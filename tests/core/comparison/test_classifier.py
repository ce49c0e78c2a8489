"""Unit tests for value classification."""

from collections import OrderedDict
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from diff_object_comparer.core.comparison.classifier import ValueKind, classify, iterate_sequence


@dataclass
class Point:
    x: int
    y: int


@dataclass
class IterablePoint:
    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))


class Label(BaseModel):
    text: str


class Bag:
    def __init__(self):
        self.items = []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ValueKind.NULL),
        (0, ValueKind.SCALAR),
        ("text", ValueKind.SCALAR),
        (b"bytes", ValueKind.SCALAR),
        (bytearray(b"ba"), ValueKind.SCALAR),
        ([1], ValueKind.SEQUENCE),
        ((1,), ValueKind.SEQUENCE),
        ({1, 2}, ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.SEQUENCE),
        (iter([]), ValueKind.SEQUENCE),
        (Point(1, 2), ValueKind.COMPOSITE),
        (IterablePoint(1, 2), ValueKind.COMPOSITE),
        (Label(text="x"), ValueKind.COMPOSITE),
        (Bag(), ValueKind.COMPOSITE),
        (object(), ValueKind.COMPOSITE),
    ],
    ids=[
        "none",
        "int",
        "str",
        "bytes",
        "bytearray",
        "list",
        "tuple",
        "set",
        "dict",
        "iterator",
        "dataclass",
        "iterable_dataclass",
        "pydantic_model",
        "plain_object",
        "bare_object",
    ],
)
def test_classify(value, expected):
    assert classify(value) is expected


def test_iterate_mapping_yields_items_in_order():
    mapping = OrderedDict([("b", 2), ("a", 1)])

    assert list(iterate_sequence(mapping)) == [("b", 2), ("a", 1)]


def test_iterate_sequence_yields_elements():
    assert list(iterate_sequence((3, 4))) == [3, 4]
