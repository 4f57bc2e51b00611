"""Error-document loading and atomic JSON persistence."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

import yaml

from errshape.constants.io import DEFAULT_JSON_INDENT, JSON_SUFFIXES, YAML_SUFFIXES
from errshape.exceptions import InvalidArgument


def load_error_document(path: Path) -> object:
    """Parse a JSON or YAML error document, choosing the format by suffix.

    Raises:
        InvalidArgument: if the file cannot be read or parsed.
    """
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise InvalidArgument(f"unsupported error document type: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidArgument(f"cannot read error document {path}: {exc}") from exc

    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except json.JSONDecodeError as exc:
        raise InvalidArgument(f"invalid JSON in {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise InvalidArgument(f"invalid YAML in {path}: {exc}") from exc
    except RecursionError as exc:
        raise InvalidArgument(f"error document {path} is too deeply nested to parse") from exc


def dump_json(payload: object, *, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize ``payload`` keeping key order and non-ASCII messages intact.

    Raises:
        InvalidArgument: if ``payload`` nests too deeply to serialize.
    """
    try:
        return json.dumps(payload, indent=indent, ensure_ascii=False)
    except RecursionError as exc:
        raise InvalidArgument("result is too deeply nested to serialize as JSON") from exc


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
    indent: int = DEFAULT_JSON_INDENT,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(dump_json(payload, indent=indent))
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
