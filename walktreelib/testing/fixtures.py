"""Test fixtures for WalkTreeLib consumers.

These helpers build small dictionary trees and record the steps of a walk so
test suites can assert on traversal order without writing their own
callbacks.
"""

from typing import Any, Callable, List, Optional, Tuple, Union

from ..config import WalkOptions
from ..core.state import TraversalState


NodeSpec = Union[str, Tuple[str, List['NodeSpec']]]


def build_tree(spec: NodeSpec) -> dict:
    """Build a dictionary tree from a compact description.

    A leaf is described by its name, a non-leaf by ``(name, [children])``.

    Example:
        >>> build_tree(('root', ['a', ('b', ['c'])]))
        {'name': 'root', 'children': [{'name': 'a'}, {'name': 'b', 'children': [{'name': 'c'}]}]}
    """
    if isinstance(spec, str):
        return {'name': spec}
    name, children = spec
    return {'name': name, 'children': [build_tree(child) for child in children]}


def sample_tree() -> dict:
    """Three-level tree used throughout the documentation.

    Structure:
    root
    ├── child A
    ├── child B
    │   ├── grandson A
    │   ├── grandson B
    │   └── grandson C
    └── child C
    """
    return build_tree(('root', [
        'child A',
        ('child B', ['grandson A', 'grandson B', 'grandson C']),
        'child C',
    ]))


def nested_tree() -> dict:
    """Tree whose leaves sit at different depths.

    Structure:
    root
    ├── ch1
    └── ch2
        └── grandch
    """
    return build_tree(('root', ['ch1', ('ch2', ['grandch'])]))


class WalkRecorder:
    """Records every step of a walk.

    Example:
        recorder = WalkRecorder()
        walk(sample_tree(), recorder.options())
        assert recorder.names(TraversalState.LEAF) == [...]
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        """Initialize recorder.

        Args:
            key: Extracts the recorded value from a node (defaults to the
                ``name`` field of dictionary nodes)
        """
        self.key = key or (lambda node: node['name'])
        self.events: List[Tuple[TraversalState, Any]] = []
        self.parents: List[Tuple[Any, List[Any]]] = []

    def _recorder(self, state: TraversalState):
        def record(node, context):
            value = self.key(node)
            self.events.append((state, value))
            self.parents.append((value, [self.key(p) for p in context.parents]))
        return record

    def options(self, **kwargs) -> WalkOptions:
        """Create WalkOptions recording PRE, LEAF and POST steps."""
        return WalkOptions(
            pre_visit=self._recorder(TraversalState.PRE),
            visit=self._recorder(TraversalState.LEAF),
            post_visit=self._recorder(TraversalState.POST),
            **kwargs
        )

    def names(self, *states: TraversalState) -> List[Any]:
        """Recorded values, optionally limited to the given states."""
        return [value for state, value in self.events
                if not states or state in states]

    def clear(self) -> None:
        self.events.clear()
        self.parents.clear()
