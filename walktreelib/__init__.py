"""WalkTreeLib - Resumable Tree Walking Library.

WalkTreeLib traverses any in-memory tree of application-defined nodes. The
only thing it needs to know about a node is how to get its children.

Step by step:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from walktreelib import DepthFirstWalker, TraversalState
    walker = DepthFirstWalker(root)
    while walker.next() is not TraversalState.END:
        print(walker.state, walker.current, walker.get_parents())

With callbacks:
    from walktreelib import walk
    walk(root, visit=on_leaf, pre_visit=on_enter, post_visit=on_leave)

As a container:
    from walktreelib import Tree
    Tree(root).map(transform).reduce(combine)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.3.0"

from .core import (
    TraversalState,
    TraversalStrategy,
    END,
    TreeWalker,
    DepthFirstWalker,
    BreadthFirstWalker,
    create_walker,
    default_get_children,
    default_set_children,
)
from .config import WalkOptions, TreeAccessors
from .api import walk, iter_walk, VisitContext
from .tree import Tree
from .query import compile_query, parse_selector, Selector
from .errors import (
    WalkTreeError,
    ConfigurationError,
    UnimplementedCapabilityError,
    InvalidChildrenError,
    QuerySyntaxError,
)

__all__ = [
    "__version__",
    # Core
    "TraversalState",
    "TraversalStrategy",
    "END",
    "TreeWalker",
    "DepthFirstWalker",
    "BreadthFirstWalker",
    "create_walker",
    "default_get_children",
    "default_set_children",
    # Config
    "WalkOptions",
    "TreeAccessors",
    # API
    "walk",
    "iter_walk",
    "VisitContext",
    "Tree",
    # Queries
    "compile_query",
    "parse_selector",
    "Selector",
    # Errors
    "WalkTreeError",
    "ConfigurationError",
    "UnimplementedCapabilityError",
    "InvalidChildrenError",
    "QuerySyntaxError",
]
