"""Configuration-related exceptions."""

from __future__ import annotations

from errshape.exceptions.base import ErrShapeError


class ConfigError(ErrShapeError, ValueError):
    """Raised when transform configuration is invalid."""
