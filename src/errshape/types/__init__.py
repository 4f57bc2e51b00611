"""Shared type aliases for errshape."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
