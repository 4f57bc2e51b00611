"""File format and temp-file naming constants."""

from __future__ import annotations

JSON_SUFFIXES: frozenset[str] = frozenset({".json"})
YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})

OUTPUT_TEMP_PREFIX: str = ".errshape-"
OUTPUT_TEMP_SUFFIX: str = ".json.tmp"
DEFAULT_JSON_INDENT: int = 2
