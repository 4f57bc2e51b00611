"""Options loading and normalization from ``errshape.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from errshape.config.model import TransformOptions
from errshape.constants.config import CONFIG_FILENAME, DEFAULT_MAX_DEPTH
from errshape.constants.validation import ALLOWED_CONFIG_KEYS
from errshape.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_options(root: Path, config_path: Path | None = None) -> TransformOptions:
    """Load and validate transform options from ``errshape.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return TransformOptions()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    max_depth = raw.get("max_depth", DEFAULT_MAX_DEPTH)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth <= 0:
        raise ConfigError("max_depth must be a positive integer")

    keys = _ensure_string_list(raw.get("preserve_structure_for_keys", []), "preserve_structure_for_keys")
    if any(not key.strip() for key in keys):
        raise ConfigError("preserve_structure_for_keys must not contain blank keys")
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise ConfigError(f"preserve_structure_for_keys contains duplicate key(s): {', '.join(duplicates)}")

    options = TransformOptions(
        preserve_structure_for_keys=frozenset(keys),
        max_depth=max_depth,
    )
    logger.debug(
        "Loaded options from %s: preserve=%s max_depth=%d",
        path,
        sorted(options.preserve_structure_for_keys),
        options.max_depth,
    )
    return options


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
