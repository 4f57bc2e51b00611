"""Conversion between plain Python data and error-tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from errshape.constants.config import DEFAULT_MAX_DEPTH
from errshape.exceptions import InvalidArgument, MaxDepthExceeded
from errshape.model.nodes import ErrorNode, Leaf, Mapping, Scalar, Sequence, child_nodes, is_container
from errshape.types import JsonValue

_PLAIN_CONTAINERS = (dict, list, tuple)


@dataclass
class _Frame:
    """A container being converted, with the children converted so far."""

    source: object
    depth: int
    pending: tuple[object, ...]
    done: list = field(default_factory=list)


def from_python(value: object, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ErrorNode:
    """Build an error tree from dicts, lists, strings and JSON scalars.

    Conversion uses an explicit stack, so only ``max_depth`` bounds how deep
    the input may nest. Cyclic input stops at that bound too.

    Raises:
        InvalidArgument: for unsupported types or non-string mapping keys.
        MaxDepthExceeded: when containers nest deeper than ``max_depth``.
    """
    if not isinstance(value, _PLAIN_CONTAINERS):
        return _node_terminal(value)
    stack = [_plain_frame(value, 1, max_depth)]
    while True:
        frame = stack[-1]
        if len(frame.done) < len(frame.pending):
            child = frame.pending[len(frame.done)]
            if isinstance(child, _PLAIN_CONTAINERS):
                stack.append(_plain_frame(child, frame.depth + 1, max_depth))
            else:
                frame.done.append(_node_terminal(child))
            continue

        stack.pop()
        if isinstance(frame.source, dict):
            built: ErrorNode = Mapping(tuple(zip(frame.source.keys(), frame.done, strict=True)))
        else:
            built = Sequence(tuple(frame.done))
        if not stack:
            return built
        stack[-1].done.append(built)


def to_python(node: ErrorNode) -> JsonValue:
    """Convert an error tree back into plain dicts, lists and scalars."""
    if not is_container(node):
        return _plain_terminal(node)
    stack = [_Frame(node, 1, child_nodes(node))]  # type: ignore[arg-type]
    while True:
        frame = stack[-1]
        if len(frame.done) < len(frame.pending):
            child = frame.pending[len(frame.done)]
            if is_container(child):
                stack.append(_Frame(child, frame.depth + 1, child_nodes(child)))  # type: ignore[arg-type]
            else:
                frame.done.append(_plain_terminal(child))
            continue

        stack.pop()
        match frame.source:
            case Mapping():
                built: JsonValue = dict(zip(frame.source.keys(), frame.done, strict=True))
            case _:
                built = list(frame.done)
        if not stack:
            return built
        stack[-1].done.append(built)


def _plain_frame(value: dict | list | tuple, depth: int, max_depth: int) -> _Frame:
    if depth > max_depth:
        raise MaxDepthExceeded(max_depth)
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise InvalidArgument(f"mapping keys must be strings, got {type(key).__name__}")
        return _Frame(value, depth, tuple(value.values()))
    return _Frame(value, depth, tuple(value))


def _node_terminal(value: object) -> ErrorNode:
    match value:
        case str():
            return Leaf(value)
        case bool() | int() | float() | None:
            return Scalar(value)
    raise InvalidArgument(f"unsupported error value type: {type(value).__name__}")


def _plain_terminal(node: object) -> JsonValue:
    match node:
        case Leaf(message=message):
            return message
        case Scalar(value=value):
            return value
    raise InvalidArgument(f"expected an error node, got {type(node).__name__}")
