"""Tree container for WalkTreeLib.

A Tree holds a root node together with the functions that read and write
children. Every operation is expressed through the walk driver, so any node
shape works as long as the accessors understand it.
"""

import copy
import logging
from typing import Any, Callable, Iterator, List, Optional

from .api import VisitContext, walk
from .config import TreeAccessors, WalkOptions
from .core.adapter import ChildrenGetter, ChildrenSetter
from .core.state import TraversalState
from .core.walker import DepthFirstWalker, WalkerSpec, create_walker
from .query import Matcher, Query, compile_query

logger = logging.getLogger(__name__)

_NO_SEED = object()
_DROPPED = object()

Reducer = Callable[[Any, Any, VisitContext], Any]


class Tree:
    """Container for a tree structure.

    Attributes:
        root: The root node
        accessors: TreeAccessors used to read and write children
        matcher: Callable compiling a query into a predicate over
            ``parents + [node]`` (see walktreelib.query)
    """

    def __init__(self, root: Any,
                 get_children: Optional[ChildrenGetter] = None,
                 set_children: Optional[ChildrenSetter] = None,
                 matcher: Optional[Callable[[Query], Matcher]] = None):
        """Initialize tree.

        Args:
            root: The root node
            get_children: Returns a node's children, or a falsy value for a
                leaf (defaults to the ``children`` field)
            set_children: Attaches children to a node; only used to build
                new trees (defaults to the ``children`` field)
            matcher: Query compiler used by get_node
        """
        defaults = TreeAccessors()
        self.root = root
        self.accessors = TreeAccessors(
            get_children=get_children or defaults.get_children,
            set_children=set_children or defaults.set_children,
        )
        self.matcher = matcher or compile_query

    @property
    def node(self) -> Any:
        """The root node (alias of ``root``)."""
        return self.root

    @property
    def get_children(self) -> ChildrenGetter:
        return self.accessors.get_children

    @property
    def set_children(self) -> ChildrenSetter:
        return self.accessors.set_children

    def _derive(self, root: Any, accessors: TreeAccessors) -> 'Tree':
        return Tree(root, *accessors.as_tuple(), matcher=self.matcher)

    def walk(self, options=None, **kwargs) -> None:
        """Walk through this tree.

        Takes the same arguments as ``walktreelib.walk``. The tree's own
        children accessor is used unless one is given.
        """
        if (kwargs.get('get_children') is None
                and not (isinstance(options, WalkOptions) and options.get_children is not None)):
            kwargs['get_children'] = self.get_children
        walk(self.root, options, **kwargs)

    def map(self, mapping_function: Callable[[Any], Any],
            get_children: Optional[ChildrenGetter] = None,
            set_children: Optional[ChildrenSetter] = None) -> 'Tree':
        """Create a new tree with the same shape and mapped nodes.

        ``mapping_function`` is called exactly once per node, children before
        their parent. Children are attached to the mapped nodes with the new
        setter; nodes of this tree are never modified.

        Args:
            mapping_function: Creates the new node from an original node
            get_children: Children getter of the new tree
            set_children: Children setter of the new tree. Give both or
                neither; by default the new tree uses this tree's accessors.

        Returns:
            The mapped Tree

        Raises:
            ConfigurationError: If only one accessor is given
        """
        accessors = TreeAccessors.resolve(get_children, set_children, self.accessors)
        logger.debug("Mapping tree rooted at %r", self.root)

        def reducer(children, node, context):
            mapped = mapping_function(node)
            if not context.is_on_leaf:
                accessors.set_children(mapped, children)
            return mapped

        return self._derive(self.reduce(reducer, None), accessors)

    def reduce(self, reducer: Reducer, initial: Any = _NO_SEED) -> Any:
        """Compute a single value from this tree.

        The reducer is called as ``reducer(children, node, context)`` where
        ``children`` are the results already computed for the node's
        children, left to right. It is called once per non-leaf node. Leaves
        are only reduced when ``initial`` is given (``reducer(initial, leaf,
        context)``); otherwise the leaf itself stands in as its own result.

        Args:
            reducer: Combines a node with its children's results
            initial: Seed passed as ``children`` for leaves (None is a
                valid seed)

        Returns:
            The result for the root
        """
        stack: List[List[Any]] = [[]]
        has_seed = initial is not _NO_SEED

        def visit(node, context):
            stack[-1].append(reducer(initial, node, context) if has_seed else node)

        def pre_visit(node, context):
            stack.append([])

        def post_visit(node, context):
            children = stack.pop()
            stack[-1].append(reducer(children, node, context))

        self.walk(visit=visit, pre_visit=pre_visit, post_visit=post_visit)
        return stack[0][0]

    def filter(self, predicate: Callable[[Any, VisitContext], bool],
               get_children: Optional[ChildrenGetter] = None,
               set_children: Optional[ChildrenSetter] = None) -> Optional['Tree']:
        """Create a new tree keeping only the nodes accepted by ``predicate``.

        A rejected node is removed together with its whole subtree. Kept
        leaves are shared with this tree; kept non-leaf nodes are shallow
        copies carrying the filtered children. The predicate is called once
        for every node, children before their parent.

        Args:
            predicate: Called as ``predicate(node, context)``
            get_children: Children getter of the new tree
            set_children: Children setter used to attach the filtered
                children. Give both or neither, as for map.

        Returns:
            The filtered Tree, or None when the root is rejected

        Raises:
            ConfigurationError: If only one accessor is given
        """
        accessors = TreeAccessors.resolve(get_children, set_children, self.accessors)
        setter = accessors.set_children
        logger.debug("Filtering tree rooted at %r", self.root)

        def reducer(children, node, context):
            if not predicate(node, context):
                return _DROPPED
            if context.is_on_leaf:
                return node
            kept = [child for child in children if child is not _DROPPED]
            duplicate = copy.copy(node)
            setter(duplicate, kept)
            return duplicate

        root = self.reduce(reducer, [])
        if root is _DROPPED:
            return None
        return self._derive(root, accessors)

    def get_node(self, query: Query) -> Any:
        """Get the first node matching ``query`` in depth-first order.

        Args:
            query: Selector string (see walktreelib.query) or a predicate
                over ``parents + [node]``

        Returns:
            The first matching node, or None when nothing matches (a
            matching None node therefore reads as no match)
        """
        matches = self.matcher(query)
        walker = DepthFirstWalker(self.root, self.get_children)
        while walker.next() is not TraversalState.END:
            if matches([*walker.get_parents(), walker.current]):
                return walker.current
        return None

    def get_node_as_tree(self, query: Query) -> Optional['Tree']:
        """Get the first node matching ``query`` as a Tree.

        The new tree shares this tree's accessors and matcher. As with
        get_node, a matching node whose value is None is indistinguishable
        from no match; step a DepthFirstWalker directly when trees may hold
        None nodes. Other falsy nodes (0, '', empty containers) are found.

        Returns:
            Tree rooted at the match, or None when nothing matches
        """
        node = self.get_node(query)
        if node is None:
            return None
        return self._derive(node, self.accessors)

    def nodes(self, walker: Optional[WalkerSpec] = None) -> Iterator[Any]:
        """Iterate over every node once, parents before children.

        Args:
            walker: Walker class, TraversalStrategy or strategy name
                (depth-first by default)
        """
        cursor = create_walker(walker, self.root, self.get_children)
        for node in cursor:
            if cursor.state is not TraversalState.POST:
                yield node

    def leaves(self) -> Iterator[Any]:
        """Iterate over the leaf nodes, depth-first, left to right."""
        walker = DepthFirstWalker(self.root, self.get_children)
        for node in walker:
            if walker.state is TraversalState.LEAF:
                yield node

    def __iter__(self) -> Iterator[Any]:
        return self.leaves()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"
