"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "errshape.yaml"
DEFAULT_MAX_DEPTH: int = 100
DEFAULT_PRESERVE_STRUCTURE_KEYS: tuple[str, ...] = ()
