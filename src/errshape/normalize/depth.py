"""Nesting-depth guard shared by the tree walkers."""

from __future__ import annotations

from errshape.exceptions import MaxDepthExceeded


def check_depth(depth: int, max_depth: int) -> None:
    """Raise ``MaxDepthExceeded`` when a container sits below ``max_depth`` levels."""
    if depth > max_depth:
        raise MaxDepthExceeded(max_depth)
