"""Collapse a whole error tree into one deduplicated message."""

from __future__ import annotations

from collections.abc import Iterator

from errshape.constants.config import DEFAULT_MAX_DEPTH
from errshape.exceptions import InvalidArgument
from errshape.model import Container, ErrorNode, Leaf, Mapping, Scalar, Sequence, child_nodes
from errshape.normalize.depth import check_depth
from errshape.normalize.messages import join_messages


def iter_terminals(error: Container, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Leaf | Scalar]:
    """Yield every terminal node of ``error`` depth-first, left to right.

    Uses an explicit stack, so deep trees are bounded by ``max_depth``
    rather than by the interpreter's recursion limit.
    """
    check_depth(1, max_depth)
    stack: list[tuple[ErrorNode, int]] = [(child, 1) for child in reversed(child_nodes(error))]
    while stack:
        node, parent_depth = stack.pop()
        match node:
            case Leaf() | Scalar():
                yield node
            case Sequence() | Mapping():
                depth = parent_depth + 1
                check_depth(depth, max_depth)
                stack.extend((child, depth) for child in reversed(child_nodes(node)))


def iter_messages(error: Container, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[str]:
    """Yield the rendered text of every terminal of ``error`` in traversal order."""
    for node in iter_terminals(error, max_depth=max_depth):
        yield node.render()


def flatten_error(error: Container, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Leaf | Sequence:
    """Flatten ``error`` into one joined string of its distinct messages.

    Messages are deduplicated before formatting and keep the order of their
    first occurrence. A message and a scalar with the same text stay
    distinct. A tree without any messages flattens to an empty ``Sequence``.

    Raises:
        InvalidArgument: if ``error`` is not a ``Sequence`` or ``Mapping``.
        MaxDepthExceeded: if ``error`` nests deeper than ``max_depth``.
    """
    if not isinstance(error, (Sequence, Mapping)):
        raise InvalidArgument(f"expected Sequence or Mapping, got {type(error).__name__}")
    unique = dict.fromkeys(
        (isinstance(node, Scalar), node.render()) for node in iter_terminals(error, max_depth=max_depth)
    )
    return join_messages(Sequence(tuple(Leaf(message) for _, message in unique)))
