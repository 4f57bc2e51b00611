"""Root exception for errshape."""

from __future__ import annotations


class ErrShapeError(Exception):
    """Base class for all errshape errors."""
