"""Transform a field → error-tree mapping into display-ready errors.

Each top-level field is either flattened into a single sentence or, for
fields listed in ``preserve_structure_for_keys``, kept in its nested shape
with only the innermost message lists joined.
"""

from __future__ import annotations

import logging

from errshape.config import TransformOptions
from errshape.exceptions import InvalidArgument
from errshape.model import ErrorNode, Mapping, from_python, is_container, to_python
from errshape.normalize import flatten_error, process_structured_error
from errshape.types import JsonObject

logger = logging.getLogger(__name__)


def transform_errors(errors: Mapping, options: TransformOptions | None = None) -> Mapping:
    """Normalize every field of ``errors`` according to ``options``.

    Fields whose value is not a ``Mapping`` or ``Sequence`` are dropped.
    Output keys keep their input order and are always a subset of the input keys.

    Raises:
        InvalidArgument: if ``errors`` is not a ``Mapping``.
        MaxDepthExceeded: if a field nests deeper than ``options.max_depth``.
    """
    if not isinstance(errors, Mapping):
        raise InvalidArgument(f"errors must be a Mapping, got {type(errors).__name__}")
    options = options or TransformOptions()

    transformed: list[tuple[str, ErrorNode]] = []
    for key, value in errors.entries:
        if not is_container(value):
            logger.debug("Dropping non-container error for field %r", key)
            continue
        if options.preserves(key):
            transformed.append((key, process_structured_error(value, max_depth=options.max_depth)))
        else:
            transformed.append((key, flatten_error(value, max_depth=options.max_depth)))
    return Mapping(tuple(transformed))


def transform_error_dict(errors: object, options: TransformOptions | None = None) -> JsonObject:
    """Plain-``dict`` counterpart of :func:`transform_errors`."""
    if not isinstance(errors, dict):
        raise InvalidArgument(f"errors must be a dict, got {type(errors).__name__}")
    options = options or TransformOptions()
    # Dropped before conversion so unsupported scalar types never reach from_python.
    tree = Mapping(
        tuple(
            (key, from_python(value, max_depth=options.max_depth))
            for key, value in errors.items()
            if isinstance(value, (dict, list, tuple))
        )
    )
    dropped = len(errors) - len(tree)
    if dropped:
        logger.debug("Dropped %d non-container field(s) before transform", dropped)
    result = to_python(transform_errors(tree, options))
    assert isinstance(result, dict)
    return result
