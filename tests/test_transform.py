"""Tests for the top-level error transformer."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from errshape.config import TransformOptions
from errshape.exceptions import InvalidArgument, MaxDepthExceeded
from errshape.model import Leaf, Mapping, Scalar, Sequence, from_python
from errshape.transform import transform_error_dict, transform_errors

ALNUM = "Only alphanumeric characters are allowed"
URL_OPTIONS = TransformOptions(preserve_structure_for_keys=frozenset({"url", "urls"}))


def test_transform_full_api_document(api_errors: dict[str, Any], api_errors_expected: dict[str, Any]) -> None:
    result = transform_error_dict(api_errors, URL_OPTIONS)

    assert result == api_errors_expected
    assert list(result) == list(api_errors)


def test_no_recurring_errors_without_preserve_keys() -> None:
    errors = {
        "name": {"first": [ALNUM], "last": [ALNUM]},
        "names": [{}, {"first": [ALNUM], "last": [ALNUM]}, {}],
    }

    assert transform_error_dict(errors) == {"name": f"{ALNUM}.", "names": f"{ALNUM}."}


def test_preserve_keys_only_match_top_level() -> None:
    nested = {"site": {"code": ["C"], "id": ["D"]}}
    errors = {"url": nested, "tags": nested, "form": {"url": {"x": ["E"]}}}

    assert transform_error_dict(errors, URL_OPTIONS) == {
        "url": {"site": {"code": "C.", "id": "D."}},
        "tags": "C. D.",
        "form": "E.",
    }


def test_non_container_fields_are_dropped(caplog: pytest.LogCaptureFixture) -> None:
    tree = Mapping(
        (
            ("detail", Leaf("Not found")),
            ("code", Scalar(404)),
            ("name", Sequence((Leaf("Required"),))),
        )
    )

    with caplog.at_level(logging.DEBUG, logger="errshape.transform"):
        result = transform_errors(tree)

    assert result == Mapping((("name", Leaf("Required.")),))
    assert "Dropping non-container error for field 'detail'" in caplog.text


def test_transform_error_dict_drops_unsupported_scalars() -> None:
    assert transform_error_dict({"detail": "Not found", "when": object(), "name": []}) == {"name": []}


def test_empty_fields_stay_empty_containers() -> None:
    options = TransformOptions(preserve_structure_for_keys=frozenset({"kept"}))

    assert transform_error_dict({"flat": {}, "kept": {}, "rows": []}, options) == {
        "flat": [],
        "kept": {},
        "rows": [],
    }


@pytest.mark.parametrize(
    "errors",
    [
        pytest.param({}, id="empty"),
        pytest.param({"a": "x", "b": 1, "c": None}, id="all-dropped"),
        pytest.param({"a": ["x"], "b": {"c": ["d"]}, "e": "f"}, id="mixed"),
        pytest.param({"url": [{}, {"a": ["b"]}], "urls": [[]]}, id="preserved"),
    ],
)
def test_output_keys_are_subset_of_input_keys(errors: dict[str, Any]) -> None:
    assert set(transform_error_dict(errors, URL_OPTIONS)) <= set(errors)


def test_input_is_not_modified(api_errors: dict[str, Any]) -> None:
    snapshot = copy.deepcopy(api_errors)

    transform_error_dict(api_errors, URL_OPTIONS)

    assert api_errors == snapshot


@pytest.mark.parametrize(
    "value",
    [
        pytest.param({"a": ["b"]}, id="python-dict"),
        pytest.param(Sequence(), id="sequence"),
        pytest.param(Leaf("a"), id="leaf"),
    ],
)
def test_transform_errors_requires_mapping(value: object) -> None:
    with pytest.raises(InvalidArgument, match="errors must be a Mapping"):
        transform_errors(value)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [pytest.param([], id="list"), pytest.param("x", id="str")])
def test_transform_error_dict_requires_dict(value: object) -> None:
    with pytest.raises(InvalidArgument, match="errors must be a dict"):
        transform_error_dict(value)


def test_max_depth_applies_to_every_field() -> None:
    options = TransformOptions(preserve_structure_for_keys=frozenset({"kept"}), max_depth=2)
    tree = from_python({"flat": [[["x"]]], "kept": [[["x"]]]}, max_depth=10)

    with pytest.raises(MaxDepthExceeded):
        transform_errors(Mapping((("flat", tree.get("flat")),)), options)  # type: ignore[union-attr, arg-type]
    with pytest.raises(MaxDepthExceeded):
        transform_errors(Mapping((("kept", tree.get("kept")),)), options)  # type: ignore[union-attr, arg-type]


def _deep_list(levels: int) -> list[Any]:
    """Build ``levels`` plain lists nested inside each other around one message."""
    value: list[Any] = ["deep"]
    for _ in range(levels - 1):
        value = [value]
    return value


def test_deep_flattened_field_within_max_depth() -> None:
    options = TransformOptions(max_depth=5000)

    assert transform_error_dict({"f": _deep_list(3000)}, options) == {"f": "deep."}


def test_deep_preserved_field_within_max_depth() -> None:
    options = TransformOptions(preserve_structure_for_keys=frozenset({"f"}), max_depth=5000)

    result: Any = transform_error_dict({"f": _deep_list(3000)}, options)["f"]

    levels = 0
    while isinstance(result, list):
        levels += 1
        (result,) = result
    assert levels == 2999
    assert result == "deep."


def test_deep_field_beyond_max_depth_raises() -> None:
    with pytest.raises(MaxDepthExceeded):
        transform_error_dict({"f": _deep_list(3000)}, TransformOptions(max_depth=2999))
