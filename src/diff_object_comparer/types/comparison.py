"""Comparison result type definitions for Diff Object Comparer."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class DivergenceKind(StrEnum):
    """Reason a compared pair was recorded as divergent."""

    NULL_ACCORDANCY = "null_accordancy"
    COLLECTION_LENGTH = "collection_length"
    EQUALITY = "equality"


class ComparisonResult(BaseModel):
    """A pair of values visited at one path of the compared object graphs.

    A pair that is never recorded stands for an equal subtree and carries no
    message. Recorded pairs are copies with ``message`` and ``kind`` set.

    Attributes:
        left_value: Value found at ``path`` in the left object graph.
        right_value: Value found at ``path`` in the right object graph.
        path: Dotted/bracketed location, e.g. ``Root.Items[2].Name``.
        message: Human-readable divergence description (recorded pairs only).
        kind: Divergence category (recorded pairs only).
    """

    model_config = ConfigDict(frozen=True)

    left_value: Any = Field(default=None, description="Value at path in the left object graph")
    right_value: Any = Field(default=None, description="Value at path in the right object graph")
    path: str = Field(min_length=1, description="Dotted/bracketed location of the values")
    message: str | None = Field(default=None, description="Divergence description, unset for equal pairs")
    kind: DivergenceKind | None = Field(default=None, description="Divergence category, unset for equal pairs")

    @property
    def is_divergence(self) -> bool:
        """Check if this pair was recorded as a divergence."""
        return self.message is not None

    def child(self, left_value: Any, right_value: Any, path: str) -> ComparisonResult:
        """Create a fresh, unrecorded pair for a nested location."""
        return ComparisonResult(left_value=left_value, right_value=right_value, path=path)

    def diverged(self, kind: DivergenceKind, message: str) -> ComparisonResult:
        """Return a recorded copy of this pair."""
        return self.model_copy(update={"kind": kind, "message": message})

    def __str__(self) -> str:
        return self.message if self.message is not None else f"Property '{self.path}' is equal"


class ComparisonOutcome(NamedTuple):
    """Result of one top-level comparison, unpackable as ``(equal, results)``."""

    equal: bool
    results: tuple[ComparisonResult, ...]

    @property
    def messages(self) -> list[str]:
        return [result.message for result in self.results if result.message is not None]

    @property
    def paths(self) -> list[str]:
        return [result.path for result in self.results]

    def summary(self) -> str:
        """Render all divergences as a multi-line report."""
        if self.equal:
            return "Instances are equal"
        lines = [f"Instances differ in {len(self.results)} place(s):"]
        lines.extend(f"  - {message}" for message in self.messages)
        return "\n".join(lines)


__all__ = [
    "ComparisonOutcome",
    "ComparisonResult",
    "DivergenceKind",
]
