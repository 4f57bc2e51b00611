"""Shared exception hierarchy for errshape."""

from __future__ import annotations

from .arguments import InvalidArgument, MaxDepthExceeded
from .base import ErrShapeError
from .config import ConfigError
from .validation import ConfigIssue, format_issues, sort_issues

__all__ = [
    "ConfigError",
    "ConfigIssue",
    "ErrShapeError",
    "InvalidArgument",
    "MaxDepthExceeded",
    "format_issues",
    "sort_issues",
]
