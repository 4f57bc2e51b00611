"""Exceptions raised when an error tree violates a structural precondition."""

from __future__ import annotations

from errshape.exceptions.base import ErrShapeError


class InvalidArgument(ErrShapeError, TypeError):
    """Raised when a function receives a value of the wrong structural kind."""


class MaxDepthExceeded(InvalidArgument):
    """Raised when an error tree nests deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"error tree exceeds maximum nesting depth of {max_depth}")
