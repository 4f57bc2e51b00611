"""Immutable error-tree node types."""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from errshape.exceptions import InvalidArgument
from errshape.types import JsonScalar


@dataclass(frozen=True)
class Leaf:
    """A terminal error message."""

    message: str

    def render(self) -> str:
        return self.message


@dataclass(frozen=True)
class Scalar:
    """A non-string terminal value (number, boolean or null)."""

    value: JsonScalar

    def render(self) -> str:
        """Render the value as JSON would, with integral floats written as integers."""
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return json.dumps(self.value)


@dataclass(frozen=True)
class Sequence:
    """An ordered list of error nodes."""

    items: tuple[ErrorNode, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ErrorNode]:
        return iter(self.items)

    @property
    def is_message_list(self) -> bool:
        """True when every element is a ``Leaf``; the empty sequence qualifies."""
        return all(isinstance(item, Leaf) for item in self.items)


@dataclass(frozen=True)
class Mapping:
    """Keyed error nodes; keys are unique and keep insertion order."""

    entries: tuple[tuple[str, ErrorNode], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, _ in self.entries:
            if not isinstance(key, str):
                raise InvalidArgument(f"mapping keys must be strings, got {type(key).__name__}")
            if key in seen:
                raise InvalidArgument(f"duplicate mapping key: {key!r}")
            seen.add(key)

    @classmethod
    def from_dict(cls, values: dict[str, ErrorNode]) -> Mapping:
        return cls(tuple(values.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)

    def values(self) -> tuple[ErrorNode, ...]:
        return tuple(value for _, value in self.entries)

    def get(self, key: str) -> ErrorNode | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return None


Container: TypeAlias = Sequence | Mapping
ErrorNode: TypeAlias = Leaf | Scalar | Sequence | Mapping


def is_container(node: object) -> bool:
    """Return whether ``node`` is a ``Sequence`` or ``Mapping``."""
    return isinstance(node, (Sequence, Mapping))


def child_nodes(node: Container) -> tuple[ErrorNode, ...]:
    """Return the direct children of a container in their natural order."""
    match node:
        case Sequence(items=items):
            return items
        case Mapping():
            return node.values()
    raise InvalidArgument(f"expected Sequence or Mapping, got {type(node).__name__}")


def rebuild(node: Container, children: list[ErrorNode]) -> Container:
    """Return a container of the same kind as ``node`` holding ``children``."""
    match node:
        case Sequence():
            return Sequence(tuple(children))
        case Mapping():
            return Mapping(tuple(zip(node.keys(), children, strict=True)))
    raise InvalidArgument(f"expected Sequence or Mapping, got {type(node).__name__}")
