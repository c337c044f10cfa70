"""Tree walkers for WalkTreeLib.

A walker is a cursor over a tree that the caller advances one step at a time
with ``next()``. After each step ``state`` tells whether the node just
returned is entered before its children (PRE), has no children (LEAF), or is
left after its children (POST). ``get_parents()`` returns the ancestor chain
of the current node.

Walkers are single-use: they are bound to one root and never reset.
"""

import logging
from typing import Any, Iterator, List, Optional, Sequence, Type, Union

from ..errors import UnimplementedCapabilityError
from .adapter import ChildrenGetter, default_get_children, valid_children
from .state import TraversalState, TraversalStrategy

logger = logging.getLogger(__name__)


class TreeWalker:
    """Base class for tree walkers.

    Concrete walkers provide ``next()`` and ``get_parents()`` and keep
    ``current`` and ``state`` up to date.

    Attributes:
        get_children: Accessor returning the children of a node, or a
            falsy value when the node is a leaf
    """

    def __init__(self, root: Any, get_children: Optional[ChildrenGetter] = None):
        """Initialize walker.

        Args:
            root: Root node of the tree
            get_children: Children accessor (defaults to the ``children`` field)
        """
        self.root = root
        self.get_children = get_children or default_get_children
        self._state = TraversalState.LEAF

    @property
    def state(self) -> TraversalState:
        """State of the current node. Meaningless before the first ``next()``."""
        return self._state

    @property
    def current(self) -> Any:
        """The node returned by the last ``next()`` call."""
        raise UnimplementedCapabilityError(
            f"{self.__class__.__name__} does not implement current"
        )

    def next(self) -> Any:
        """Move to the next node and return it.

        Returns:
            The next node, or TraversalState.END once the traversal is over
        """
        raise UnimplementedCapabilityError(
            f"{self.__class__.__name__} does not implement next()"
        )

    def get_parents(self) -> List[Any]:
        """Return the ancestors of the current node, root first."""
        raise UnimplementedCapabilityError(
            f"{self.__class__.__name__} does not implement get_parents()"
        )

    def _children_of(self, node: Any) -> Optional[Sequence]:
        return valid_children(self.get_children(node), node)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        node = self.next()
        if node is TraversalState.END:
            raise StopIteration
        return node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state!r})"


class _WalkFrame:
    """Singly linked work-list cell used by the depth-first walker."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional["_WalkFrame"] = None):
        self.value = value
        self.next = next


class DepthFirstWalker(TreeWalker):
    """Depth-first walker reporting PRE, LEAF and POST for every node.

    Children of a PRE node are read again when the walker descends into it,
    so a caller may add or remove children of the node it has just been
    given before calling ``next()``.
    """

    def __init__(self, root: Any, get_children: Optional[ChildrenGetter] = None):
        super().__init__(root, get_children)
        self._frame = _WalkFrame(None, _WalkFrame(root))
        self._stack: List[_WalkFrame] = []

    @property
    def current(self) -> Any:
        if self._state is TraversalState.END:
            return None
        return self._frame.value

    def get_parents(self) -> List[Any]:
        return [frame.value for frame in self._stack]

    def next(self) -> Any:
        state = self._state
        if state is TraversalState.END:
            return TraversalState.END

        frame = self._frame
        if state is TraversalState.PRE:
            children = self._children_of(frame.value)
            if children is None:
                # Children disappeared since the node was entered
                self._state = TraversalState.POST
                return frame.value
            self._stack.append(frame)
            first = None
            for child in reversed(children):
                first = _WalkFrame(child, first)
            return self._enter(first)

        # LEAF or POST
        if frame.next is not None:
            return self._enter(frame.next)
        if self._stack:
            self._frame = self._stack.pop()
            self._state = TraversalState.POST
            return self._frame.value
        self._state = TraversalState.END
        return TraversalState.END

    def _enter(self, frame: _WalkFrame) -> Any:
        children = self._children_of(frame.value)
        self._frame = frame
        self._state = TraversalState.PRE if children else TraversalState.LEAF
        return frame.value


class _QueueFrame:
    """Linked queue cell used by the breadth-first walker.

    ``parent`` is a back-reference used only to rebuild the ancestor chain.
    ``post`` marks the synthetic re-visit that reports POST for a node.
    """

    __slots__ = ("value", "parent", "post", "children", "next")

    def __init__(self, value: Any, parent: Optional["_QueueFrame"] = None,
                 post: bool = False):
        self.value = value
        self.parent = parent
        self.post = post
        self.children: Optional[Sequence] = None
        self.next: Optional["_QueueFrame"] = None


class BreadthFirstWalker(TreeWalker):
    """Breadth-first walker reporting PRE, LEAF and POST for every node.

    All nodes of one level are returned before any node of the next level.
    The POST step of a node is queued right after its children, so it comes
    once everything queued ahead of it has been visited.

    A node's children are read once, when the node is reached. Changes made
    to them afterwards are not seen by this walker.
    """

    def __init__(self, root: Any, get_children: Optional[ChildrenGetter] = None):
        super().__init__(root, get_children)
        self._head = _QueueFrame(None)
        self._head.next = _QueueFrame(root)
        self._frame: Optional[_QueueFrame] = self._head
        self._last = self._head.next

    @property
    def current(self) -> Any:
        if self._frame is None:
            return None
        return self._frame.value

    def get_parents(self) -> List[Any]:
        if self._frame is None:
            return []
        parents = []
        frame = self._frame.parent
        while frame is not None:
            parents.append(frame.value)
            frame = frame.parent
        parents.reverse()
        return parents

    def next(self) -> Any:
        frame = self._frame
        if frame is None:
            return TraversalState.END

        if not frame.post and frame.children:
            tail = self._last
            for child in frame.children:
                tail.next = _QueueFrame(child, parent=frame)
                tail = tail.next
            tail.next = _QueueFrame(frame.value, parent=frame.parent, post=True)
            self._last = tail.next
            frame.children = None

        following = frame.next
        if following is None:
            self._frame = None
            self._state = TraversalState.END
            return TraversalState.END

        self._frame = following
        if following.post:
            self._state = TraversalState.POST
        else:
            following.children = self._children_of(following.value)
            self._state = (TraversalState.PRE if following.children
                           else TraversalState.LEAF)
        return following.value


WalkerSpec = Union[TraversalStrategy, str, Type[TreeWalker]]

_WALKERS = {
    'dfs': DepthFirstWalker,
    'depth_first': DepthFirstWalker,
    'bfs': BreadthFirstWalker,
    'breadth_first': BreadthFirstWalker,
}


def resolve_walker(spec: Optional[WalkerSpec]) -> Type[TreeWalker]:
    """Turn a walker specification into a walker class.

    Args:
        spec: A TreeWalker subclass, a TraversalStrategy, a strategy name
            (dfs, depth_first, bfs, breadth_first) or None for depth-first

    Returns:
        TreeWalker subclass

    Raises:
        ValueError: If the specification is not recognized
    """
    if spec is None:
        return DepthFirstWalker
    if isinstance(spec, type) and issubclass(spec, TreeWalker):
        return spec
    if isinstance(spec, TraversalStrategy):
        spec = spec.value
    if isinstance(spec, str) and spec.lower() in _WALKERS:
        return _WALKERS[spec.lower()]
    raise ValueError(
        f"Unknown walker: {spec!r}. "
        f"Choose a TreeWalker subclass or one of: {', '.join(_WALKERS.keys())}"
    )


def create_walker(spec: Optional[WalkerSpec], root: Any,
                  get_children: Optional[ChildrenGetter] = None) -> TreeWalker:
    """Create a walker over ``root`` from a walker specification.

    Args:
        spec: See resolve_walker
        root: Root node of the tree
        get_children: Children accessor

    Returns:
        A fresh walker positioned before the root
    """
    walker_class = resolve_walker(spec)
    logger.debug("Creating %s over %r", walker_class.__name__, root)
    return walker_class(root, get_children)
