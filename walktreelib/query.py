"""Query matching for Tree.get_node.

A query is turned into a predicate over the sequence ``parents + [node]``.
Callables are used as they are. Strings are compiled into a small
CSS-like selector:

    #name       node whose ``id`` is "name"
    .name       node whose ``class_list`` contains "name"
    *           any node
    #a.b.c      compound: all conditions on one node
    A B         B somewhere below A (descendant)
    A > B       B directly below A (child)

Node fields are read from mappings by key and from other objects by
attribute.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, List, Optional, Sequence, Tuple, Union

from .errors import QuerySyntaxError


Matcher = Callable[[Sequence[Any]], bool]
Query = Union[str, Matcher]

ID_FIELD = "id"
CLASS_FIELD = "class_list"

DESCENDANT = " "
CHILD = ">"

_TOKEN_RE = re.compile(r">|[^\s>]+")
_COMPOUND_RE = re.compile(r"^\*?(?:[#.][\w-]+)*$")
_PART_RE = re.compile(r"([#.])([\w-]+)")


def _read(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


@dataclass(frozen=True)
class Compound:
    """Conditions that must all hold for a single node."""
    id: Optional[str] = None
    classes: FrozenSet[str] = field(default_factory=frozenset)

    def matches(self, node: Any) -> bool:
        if self.id is not None and _read(node, ID_FIELD) != self.id:
            return False
        if self.classes:
            class_list = _read(node, CLASS_FIELD)
            if not class_list:
                return False
            if isinstance(class_list, str):
                class_list = class_list.split()
            if not self.classes.issubset(class_list):
                return False
        return True


@dataclass(frozen=True)
class Selector:
    """Compiled query.

    ``steps`` holds (combinator, compound) pairs from left to right; the
    combinator relates a compound to the one before it and is None for the
    first compound.
    """
    query: str
    steps: Tuple[Tuple[Optional[str], Compound], ...]

    def __call__(self, sequence: Sequence[Any]) -> bool:
        return self.matches(sequence)

    def matches(self, sequence: Sequence[Any]) -> bool:
        """Check whether the last element of ``sequence`` is selected.

        Args:
            sequence: Ancestors of a node, root first, followed by the node
        """
        sequence = list(sequence)
        if not sequence:
            return False
        return self._match_from(len(self.steps) - 1, len(sequence) - 1, sequence)

    def _match_from(self, step: int, position: int, sequence: List[Any]) -> bool:
        combinator, compound = self.steps[step]
        if not compound.matches(sequence[position]):
            return False
        if step == 0:
            return True
        if combinator == CHILD:
            return position > 0 and self._match_from(step - 1, position - 1, sequence)
        return any(
            self._match_from(step - 1, ancestor, sequence)
            for ancestor in range(position - 1, -1, -1)
        )


def _parse_compound(token: str, query: str) -> Compound:
    if not _COMPOUND_RE.match(token):
        raise QuerySyntaxError(f"Invalid selector {token!r} in query {query!r}")
    node_id = None
    classes = set()
    for kind, name in _PART_RE.findall(token):
        if kind == "#":
            if node_id is not None and node_id != name:
                raise QuerySyntaxError(f"Conflicting ids in {token!r}")
            node_id = name
        else:
            classes.add(name)
    return Compound(id=node_id, classes=frozenset(classes))


def parse_selector(query: str) -> Selector:
    """Compile a query string into a Selector.

    Raises:
        QuerySyntaxError: If the query is empty or malformed
    """
    if not isinstance(query, str) or not query.strip():
        raise QuerySyntaxError(f"Empty query: {query!r}")

    steps = []
    combinator = None
    for token in _TOKEN_RE.findall(query):
        if token == CHILD:
            if not steps or combinator == CHILD:
                raise QuerySyntaxError(f"Misplaced '>' in query {query!r}")
            combinator = CHILD
            continue
        if steps and combinator is None:
            combinator = DESCENDANT
        steps.append((combinator, _parse_compound(token, query)))
        combinator = None

    if combinator is not None:
        raise QuerySyntaxError(f"Query {query!r} ends with a combinator")
    return Selector(query=query, steps=tuple(steps))


def compile_query(query: Query) -> Matcher:
    """Turn a query into a predicate over ``parents + [node]``.

    Args:
        query: Selector string or ready-made predicate

    Returns:
        Callable taking the sequence and returning True on a match
    """
    if callable(query):
        return query
    return parse_selector(query)
