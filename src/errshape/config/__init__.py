"""Configuration loading, validation, and normalization for errshape."""

from __future__ import annotations

from errshape.config.loader import load_options
from errshape.config.model import TransformOptions
from errshape.config.validator import _suggest_key, validate_config_file

__all__ = [
    "TransformOptions",
    "_suggest_key",
    "load_options",
    "validate_config_file",
]
