"""Tests for plain-Python conversion of error trees."""

from __future__ import annotations

from typing import Any

import pytest

from errshape.exceptions import InvalidArgument, MaxDepthExceeded
from errshape.model import Leaf, Mapping, Scalar, Sequence, from_python, to_python


def test_from_python_builds_tagged_nodes() -> None:
    node = from_python({"name": ["Required"], "rows": [{}, {"id": [1, None]}], "flag": True})

    assert node == Mapping(
        (
            ("name", Sequence((Leaf("Required"),))),
            ("rows", Sequence((Mapping(), Mapping((("id", Sequence((Scalar(1), Scalar(None)))),))))),
            ("flag", Scalar(True)),
        )
    )


def test_from_python_accepts_tuples_as_sequences() -> None:
    assert from_python(("a", "b")) == Sequence((Leaf("a"), Leaf("b")))


def test_from_python_rejects_unsupported_types() -> None:
    with pytest.raises(InvalidArgument, match="unsupported error value type: set"):
        from_python({"name": {"Required"}})


def test_from_python_rejects_non_string_keys() -> None:
    with pytest.raises(InvalidArgument, match="mapping keys must be strings"):
        from_python({0: ["Required"]})


def test_from_python_enforces_max_depth() -> None:
    assert from_python([[["x"]]], max_depth=3) == Sequence((Sequence((Sequence((Leaf("x"),)),)),))

    with pytest.raises(MaxDepthExceeded) as excinfo:
        from_python([[[["x"]]]], max_depth=3)
    assert excinfo.value.max_depth == 3


@pytest.mark.parametrize(
    "value",
    [
        pytest.param({}, id="empty-mapping"),
        pytest.param([], id="empty-sequence"),
        pytest.param({"a": [{}, [], {"b": ["c", 1, 2.5, False, None]}]}, id="nested"),
    ],
)
def test_to_python_restores_plain_data(value: Any) -> None:
    assert to_python(from_python(value)) == value


def test_to_python_keeps_key_order() -> None:
    assert list(to_python(from_python({"z": [], "a": []}))) == ["z", "a"]  # type: ignore[arg-type]


def test_to_python_rejects_non_nodes() -> None:
    with pytest.raises(InvalidArgument):
        to_python({"a": []})  # type: ignore[arg-type]


def _deep_list(levels: int) -> list[Any]:
    """Build ``levels`` plain lists nested inside each other around one message."""
    value: list[Any] = ["deep"]
    for _ in range(levels - 1):
        value = [value]
    return value


def test_deep_trees_do_not_hit_recursion_limit() -> None:
    node = from_python(_deep_list(5000), max_depth=10_000)

    plain = to_python(node)
    levels = 0
    while isinstance(plain, list):
        levels += 1
        (plain,) = plain
    assert levels == 5000
    assert plain == "deep"


def test_cyclic_input_stops_at_max_depth() -> None:
    cyclic: list[Any] = []
    cyclic.append(cyclic)

    with pytest.raises(MaxDepthExceeded):
        from_python(cyclic, max_depth=50)
