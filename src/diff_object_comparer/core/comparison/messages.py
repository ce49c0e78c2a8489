"""Divergence message formats."""

from typing import Any

NULL_ACCORDANCY_MESSAGE = (
    "Null accordance of property '{path}' is different in instances: left value = '{left}', right value = '{right}'"
)
COLLECTION_LENGTH_MESSAGE = "Property '{path}' has different lengths"
EQUALITY_MESSAGE = "Property '{path}' is not equal in instances: left value = '{left}', right value = '{right}'"


def null_accordancy_message(path: str, left: Any, right: Any, null_placeholder: str = "NULL") -> str:
    return NULL_ACCORDANCY_MESSAGE.format(
        path=path,
        left=null_placeholder if left is None else str(left),
        right=null_placeholder if right is None else str(right),
    )


def collection_length_message(path: str) -> str:
    # lengths differ, so values are left out
    return COLLECTION_LENGTH_MESSAGE.format(path=path)


def equality_message(path: str, left: Any, right: Any) -> str:
    return EQUALITY_MESSAGE.format(path=path, left=str(left), right=str(right))


__all__ = [
    "COLLECTION_LENGTH_MESSAGE",
    "EQUALITY_MESSAGE",
    "NULL_ACCORDANCY_MESSAGE",
    "collection_length_message",
    "equality_message",
    "null_accordancy_message",
]
