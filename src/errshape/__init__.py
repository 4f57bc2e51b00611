"""Normalize nested validation-error trees for display."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from errshape.config import TransformOptions, load_options
from errshape.exceptions import ConfigError, ErrShapeError, InvalidArgument, MaxDepthExceeded
from errshape.model import ErrorNode, Leaf, Mapping, Scalar, Sequence, from_python, to_python
from errshape.normalize import flatten_error, join_messages, process_structured_error
from errshape.transform import transform_error_dict, transform_errors

__all__ = [
    "ConfigError",
    "ErrShapeError",
    "ErrorNode",
    "InvalidArgument",
    "Leaf",
    "Mapping",
    "MaxDepthExceeded",
    "Scalar",
    "Sequence",
    "TransformOptions",
    "__version__",
    "flatten_error",
    "from_python",
    "join_messages",
    "load_options",
    "process_structured_error",
    "to_python",
    "transform_error_dict",
    "transform_errors",
]

try:
    __version__ = version("errshape")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
