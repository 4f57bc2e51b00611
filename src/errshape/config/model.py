"""Options model for error transformation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from errshape.constants.config import DEFAULT_MAX_DEPTH, DEFAULT_PRESERVE_STRUCTURE_KEYS


@dataclass(frozen=True)
class TransformOptions:
    """Resolved transform options."""

    preserve_structure_for_keys: frozenset[str] = frozenset(DEFAULT_PRESERVE_STRUCTURE_KEYS)
    max_depth: int = DEFAULT_MAX_DEPTH

    def with_preserved_keys(self, *keys: str) -> TransformOptions:
        """Return a copy that also preserves structure for ``keys``."""
        return replace(self, preserve_structure_for_keys=self.preserve_structure_for_keys | frozenset(keys))

    def preserves(self, key: str) -> bool:
        """Whether the top-level field ``key`` keeps its nested shape."""
        return key in self.preserve_structure_for_keys
