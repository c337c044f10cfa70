"""Traversal states reported by tree walkers."""

from enum import Enum


class TraversalState(Enum):
    """Represents the type of the current node for walkers.

    PRE:  The current node has children, before visiting them.
    LEAF: The current node has no children.
    POST: The current node has children, after visiting them.
    END:  The traversal has finished. ``next()`` returns this member itself,
          so a falsy node value is never mistaken for the end of traversal.
    """
    PRE = "pre"
    LEAF = "leaf"
    POST = "post"
    END = "end"

    @property
    def is_node_state(self) -> bool:
        """True for states that classify a node (everything except END)."""
        return self is not TraversalState.END

    def __repr__(self) -> str:
        return f"TraversalState.{self.name}"


END = TraversalState.END


class TraversalStrategy(Enum):
    """Order in which a walker visits the tree."""
    DEPTH_FIRST = "dfs"     # Descendants before later siblings
    BREADTH_FIRST = "bfs"   # Whole level before the next one
