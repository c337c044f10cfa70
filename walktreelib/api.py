"""High-level traversal API for WalkTreeLib.

``walk`` is the single loop every higher-level operation is built on: it
drives a walker until the end of the traversal and dispatches each step to
the matching callback. ``iter_walk`` exposes the same steps as a generator.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple, Union

from .config import Visitor, WalkOptions
from .core.adapter import ChildrenGetter
from .core.state import TraversalState
from .core.walker import WalkerSpec, create_walker
from .errors import ConfigurationError


@dataclass(frozen=True)
class VisitContext:
    """Information passed to visitors along with the node.

    Attributes:
        parents: Ancestors of the node, root first (empty for the root)
        is_on_leaf: True if and only if the node is a leaf
    """
    parents: List[Any]
    is_on_leaf: bool

    @property
    def depth(self) -> int:
        """Depth of the node where root = 0."""
        return len(self.parents)


def _build_options(options: Union[Visitor, WalkOptions, None], **kwargs) -> WalkOptions:
    """Normalize the ``options`` argument of ``walk`` into WalkOptions."""
    if options is None:
        options = WalkOptions()
    elif isinstance(options, WalkOptions):
        pass
    elif callable(options):
        options = WalkOptions.from_callable(options)
    else:
        raise ConfigurationError(
            f"walk options must be a callable or WalkOptions, "
            f"not {type(options).__name__}"
        )

    options = options.override(**kwargs)
    errors = options.validate()
    if errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}"
        )
    return options


def walk(root: Any, options: Union[Visitor, WalkOptions, None] = None, **kwargs) -> None:
    """Traverse a tree, calling visitors for every step.

    Args:
        root: Root node of the tree
        options: A leaf visitor, a WalkOptions, or None
        **kwargs: WalkOptions fields (get_children, pre_visit, post_visit,
            visit, walker); they override fields of ``options``

    Raises:
        ConfigurationError: If the options are invalid

    Example:
        >>> names = []
        >>> walk({'name': 'root', 'children': [{'name': 'a'}]},
        ...      lambda node, ctx: names.append(node['name']))
        >>> names
        ['a']
    """
    options = _build_options(options, **kwargs)
    walker = create_walker(options.walker, root, options.get_children)
    callbacks = {
        TraversalState.LEAF: options.visit,
        TraversalState.PRE: options.pre_visit,
        TraversalState.POST: options.post_visit,
    }

    while True:
        node = walker.next()
        state = walker.state
        if state is TraversalState.END:
            break
        context = VisitContext(
            parents=walker.get_parents(),
            is_on_leaf=state is TraversalState.LEAF,
        )
        callbacks[state](node, context)


def iter_walk(root: Any,
              get_children: Optional[ChildrenGetter] = None,
              walker: Optional[WalkerSpec] = None) -> Iterator[Tuple[Any, TraversalState, VisitContext]]:
    """Iterate over every traversal step.

    The walker only advances when the consumer asks for the next step, so
    breaking out of the loop abandons the traversal.

    Args:
        root: Root node of the tree
        get_children: Children accessor
        walker: Walker class, TraversalStrategy or strategy name

    Yields:
        Tuples of (node, state, context)
    """
    cursor = create_walker(walker, root, get_children)
    for node in cursor:
        state = cursor.state
        yield node, state, VisitContext(
            parents=cursor.get_parents(),
            is_on_leaf=state is TraversalState.LEAF,
        )
