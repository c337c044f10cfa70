"""Children accessors for WalkTreeLib.

Nodes are opaque application values. Everything the walkers need to know
about a node's shape goes through a pair of plain functions:

    get_children(node) -> sequence of nodes, or a falsy value for a leaf
    set_children(node, children) -> None

The defaults below work for mappings (``{"children": [...]}``) and for
objects exposing a ``children`` attribute.
"""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Callable, List, Optional

from ..errors import InvalidChildrenError


ChildrenGetter = Callable[[Any], Optional[Sequence]]
ChildrenSetter = Callable[[Any, List[Any]], None]

CHILDREN_FIELD = "children"


def default_get_children(node: Any) -> Optional[Sequence]:
    """Return ``node["children"]`` for mappings, ``node.children`` otherwise.

    Missing fields are treated as a leaf.
    """
    if isinstance(node, Mapping):
        return node.get(CHILDREN_FIELD)
    return getattr(node, CHILDREN_FIELD, None)


def default_set_children(node: Any, children: List[Any]) -> None:
    """Attach ``children`` to ``node`` using the conventional field."""
    if isinstance(node, MutableMapping):
        node[CHILDREN_FIELD] = children
    else:
        setattr(node, CHILDREN_FIELD, children)


def valid_children(children: Any, node: Any = None) -> Optional[Sequence]:
    """Normalize the result of a children accessor.

    Args:
        children: Value returned by the accessor
        node: The node the value was read from (used in error messages)

    Returns:
        The sequence itself when it is non-empty, otherwise None (leaf)

    Raises:
        InvalidChildrenError: If the value is truthy but not a sequence
    """
    if not children:
        return None
    if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
        raise InvalidChildrenError(
            f"Children accessor returned {type(children).__name__} for node "
            f"{node!r}; expected a sequence of nodes or a falsy value"
        )
    return children
