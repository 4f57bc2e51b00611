"""Join message lists while keeping the surrounding tree shape."""

from __future__ import annotations

from dataclasses import dataclass, field

from errshape.constants.config import DEFAULT_MAX_DEPTH
from errshape.model import Container, ErrorNode, Sequence, child_nodes, is_container, rebuild
from errshape.normalize.depth import check_depth
from errshape.normalize.messages import join_messages


@dataclass
class _Frame:
    """A container being rebuilt, with the children processed so far."""

    node: Container
    depth: int
    pending: tuple[ErrorNode, ...]
    done: list[ErrorNode] = field(default_factory=list)


def _is_message_list(node: object) -> bool:
    return isinstance(node, Sequence) and node.is_message_list


def process_structured_error(error: ErrorNode, *, max_depth: int = DEFAULT_MAX_DEPTH) -> ErrorNode:
    """Replace every message list in ``error`` with its joined string.

    Mappings and mixed sequences keep their shape, and each child is
    processed the same way. Only a list's direct messages are joined,
    without deduplication. Terminal values are returned unchanged.

    Raises:
        MaxDepthExceeded: if ``error`` nests deeper than ``max_depth``.
    """
    if not is_container(error):
        return error
    check_depth(1, max_depth)
    if _is_message_list(error):
        return join_messages(error)

    stack = [_Frame(error, 1, child_nodes(error))]
    while True:
        frame = stack[-1]
        if len(frame.done) < len(frame.pending):
            child = frame.pending[len(frame.done)]
            if not is_container(child):
                frame.done.append(child)
                continue
            check_depth(frame.depth + 1, max_depth)
            if _is_message_list(child):
                frame.done.append(join_messages(child))
            else:
                stack.append(_Frame(child, frame.depth + 1, child_nodes(child)))
            continue

        stack.pop()
        rebuilt = rebuild(frame.node, frame.done)
        if not stack:
            return rebuilt
        stack[-1].done.append(rebuilt)
