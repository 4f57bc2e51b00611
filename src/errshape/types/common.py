"""Cross-module type aliases."""

from __future__ import annotations

from typing import TypeAlias

JsonScalar: TypeAlias = int | float | bool | None
JsonValue: TypeAlias = str | JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
