"""Error-tree data model for errshape."""

from .convert import from_python, to_python
from .nodes import (
    Container,
    ErrorNode,
    Leaf,
    Mapping,
    Scalar,
    Sequence,
    child_nodes,
    is_container,
    rebuild,
)

__all__ = [
    "Container",
    "ErrorNode",
    "Leaf",
    "Mapping",
    "Scalar",
    "Sequence",
    "child_nodes",
    "from_python",
    "is_container",
    "rebuild",
    "to_python",
]
