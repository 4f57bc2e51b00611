"""Config file validation for errshape."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from errshape.constants.config import CONFIG_FILENAME
from errshape.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from errshape.exceptions import ConfigIssue


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ConfigIssue]:
    """Validate an errshape.yaml file and return every issue found.

    Unlike :func:`errshape.config.load_options` this never raises; all
    problems are collected as :class:`ConfigIssue` instances.
    """
    issues: list[ConfigIssue] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            issues.append(
                ConfigIssue(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return issues

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        issues.append(ConfigIssue(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return issues

    if raw is None:
        return issues

    if not isinstance(raw, dict):
        issues.append(
            ConfigIssue(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return issues

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            issues.append(
                ConfigIssue(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "max_depth" in raw:
        val = raw["max_depth"]
        if isinstance(val, bool) or not isinstance(val, int):
            issues.append(
                ConfigIssue(
                    code=CFG005,
                    path=path_str,
                    field="max_depth",
                    message="invalid type for `max_depth`",
                    hint="expected a positive integer",
                )
            )
        elif val <= 0:
            issues.append(
                ConfigIssue(
                    code=CFG007,
                    path=path_str,
                    field="max_depth",
                    message=f"`max_depth` must be a positive integer, got {val}",
                )
            )

    _validate_preserve_keys(raw.get("preserve_structure_for_keys"), path_str, issues)
    return issues


def _validate_preserve_keys(value: object, path_str: str, issues: list[ConfigIssue]) -> None:
    field = "preserve_structure_for_keys"
    if value is None:
        return
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        issues.append(
            ConfigIssue(
                code=CFG005,
                path=path_str,
                field=field,
                message=f"invalid type for `{field}`",
                hint="expected a list of strings",
            )
        )
        return

    if any(not item.strip() for item in value):
        issues.append(
            ConfigIssue(
                code=CFG006,
                path=path_str,
                field=field,
                message=f"`{field}` contains a blank key",
            )
        )
    duplicates = sorted({item for item in value if value.count(item) > 1})
    if duplicates:
        issues.append(
            ConfigIssue(
                code=CFG006,
                path=path_str,
                field=field,
                message=f"duplicate key(s) in `{field}`: {', '.join(duplicates)}",
                hint="list each key once",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
