"""Join leaf error messages into a single display string."""

from __future__ import annotations

from errshape.constants.formatting import MESSAGE_SEPARATOR, MESSAGE_TERMINATOR
from errshape.exceptions import InvalidArgument
from errshape.model import Leaf, Sequence


def join_messages(messages: Sequence) -> Leaf | Sequence:
    """Terminate every message with a period and join them with single spaces.

    An empty sequence is returned as-is so callers can tell "no errors"
    apart from an empty message.

    Raises:
        InvalidArgument: if ``messages`` is not a ``Sequence`` of ``Leaf`` nodes.
    """
    if not isinstance(messages, Sequence):
        raise InvalidArgument(f"expected a Sequence of messages, got {type(messages).__name__}")
    if not messages.items:
        return messages
    if not messages.is_message_list:
        raise InvalidArgument("message list must contain only Leaf nodes")
    return Leaf(MESSAGE_SEPARATOR.join(f"{leaf.message}{MESSAGE_TERMINATOR}" for leaf in messages))
