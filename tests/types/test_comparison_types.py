import pytest
from pydantic import ValidationError

from diff_object_comparer.types import ComparisonOutcome, ComparisonResult, DivergenceKind


def test_result_is_frozen():
    result = ComparisonResult(left_value=1, right_value=2, path="Root")

    with pytest.raises(ValidationError):
        result.message = "changed"


def test_result_requires_non_empty_path():
    with pytest.raises(ValidationError):
        ComparisonResult(left_value=1, right_value=1, path="")


def test_diverged_returns_recorded_copy():
    pair = ComparisonResult(left_value=[1], right_value=[2], path="Root")

    recorded = pair.diverged(DivergenceKind.EQUALITY, "different")

    assert recorded is not pair
    assert pair.message is None and not pair.is_divergence
    assert recorded.message == "different"
    assert recorded.kind == DivergenceKind.EQUALITY
    assert recorded.left_value is pair.left_value


def test_child_is_fresh_unrecorded_pair():
    parent = ComparisonResult(left_value=1, right_value=2, path="Root").diverged(DivergenceKind.EQUALITY, "x")

    child = parent.child("a", "b", "Root.Name")

    assert child.path == "Root.Name"
    assert child.message is None
    assert child.kind is None


def test_result_str():
    pair = ComparisonResult(path="Root.A")

    assert str(pair) == "Property 'Root.A' is equal"
    assert str(pair.diverged(DivergenceKind.COLLECTION_LENGTH, "lengths")) == "lengths"


def test_result_serializes_kind_as_string():
    recorded = ComparisonResult(left_value=1, right_value=None, path="Root").diverged(
        DivergenceKind.NULL_ACCORDANCY, "null"
    )

    assert recorded.model_dump(mode="json") == {
        "left_value": 1,
        "right_value": None,
        "path": "Root",
        "message": "null",
        "kind": "null_accordancy",
    }


def test_outcome_unpacks_and_summarizes():
    first = ComparisonResult(path="Root.A").diverged(DivergenceKind.EQUALITY, "A differs")
    second = ComparisonResult(path="Root.B").diverged(DivergenceKind.EQUALITY, "B differs")
    outcome = ComparisonOutcome(equal=False, results=(first, second))

    equal, results = outcome

    assert equal is False
    assert results == (first, second)
    assert outcome.messages == ["A differs", "B differs"]
    assert outcome.paths == ["Root.A", "Root.B"]
    assert outcome.summary() == "Instances differ in 2 place(s):\n  - A differs\n  - B differs"


def test_equal_outcome_summary():
    assert ComparisonOutcome(equal=True, results=()).summary() == "Instances are equal"
