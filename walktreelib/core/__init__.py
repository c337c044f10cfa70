"""Core abstractions for WalkTreeLib.

This package contains the traversal states, the children accessors and the
walkers every higher-level operation is built on.
"""

from .state import TraversalState, TraversalStrategy, END
from .adapter import (
    ChildrenGetter,
    ChildrenSetter,
    default_get_children,
    default_set_children,
    valid_children,
)
from .walker import (
    TreeWalker,
    DepthFirstWalker,
    BreadthFirstWalker,
    create_walker,
    resolve_walker,
)

__all__ = [
    "TraversalState",
    "TraversalStrategy",
    "END",
    "ChildrenGetter",
    "ChildrenSetter",
    "default_get_children",
    "default_set_children",
    "valid_children",
    "TreeWalker",
    "DepthFirstWalker",
    "BreadthFirstWalker",
    "create_walker",
    "resolve_walker",
]
