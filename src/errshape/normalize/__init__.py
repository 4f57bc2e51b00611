"""Tree walkers that turn nested error trees into display messages."""

from .flatten import flatten_error, iter_messages, iter_terminals
from .messages import join_messages
from .structure import process_structured_error

__all__ = [
    "flatten_error",
    "iter_messages",
    "iter_terminals",
    "join_messages",
    "process_structured_error",
]
