"""Configuration system for WalkTreeLib.

This module defines how users specify a traversal (which walker, which
callbacks, how to read children) and how a Tree reads and writes children.
Each configuration class can report its own problems through ``validate()``;
consumers raise a single ConfigurationError listing all of them.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, List, Optional, Tuple

from .core.adapter import (
    ChildrenGetter,
    ChildrenSetter,
    default_get_children,
    default_set_children,
)
from .core.state import TraversalStrategy
from .core.walker import DepthFirstWalker, WalkerSpec, resolve_walker
from .errors import ConfigurationError


Visitor = Callable[[Any, Any], Any]


def _noop(node: Any, context: Any) -> None:
    pass


@dataclass
class WalkOptions:
    """Options for a single ``walk`` call.

    Callbacks are called as ``callback(node, context)`` where ``context`` is
    a VisitContext. ``pre_visit`` and ``post_visit`` fire only for nodes with
    children, ``visit`` only for leaves.
    """

    # Tree shape
    get_children: Optional[ChildrenGetter] = None  # None = "children" field

    # Callbacks
    pre_visit: Visitor = _noop      # Before the children of a node
    post_visit: Visitor = _noop     # After the children of a node
    visit: Visitor = _noop          # On leaf nodes

    # Traversal order
    walker: WalkerSpec = DepthFirstWalker

    @classmethod
    def from_callable(cls, visit: Visitor) -> 'WalkOptions':
        """Create options that only visit leaves with ``visit``."""
        return cls(visit=visit)

    @classmethod
    def breadth_first(cls, **kwargs) -> 'WalkOptions':
        """Create options for a breadth-first walk."""
        kwargs.setdefault('walker', TraversalStrategy.BREADTH_FIRST)
        return cls(**kwargs)

    def override(self, **kwargs) -> 'WalkOptions':
        """Return a copy with the given fields replaced.

        ``None`` values are ignored, so callers can forward optional
        arguments without clearing defaults.

        Raises:
            ConfigurationError: If a keyword is not a WalkOptions field
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown walk option(s): {', '.join(unknown)}"
            )
        changes = {key: value for key, value in kwargs.items() if value is not None}
        return replace(self, **changes) if changes else self

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.get_children is not None and not callable(self.get_children):
            errors.append("get_children must be callable")

        for name in ('pre_visit', 'post_visit', 'visit'):
            if not callable(getattr(self, name)):
                errors.append(f"{name} must be callable")

        try:
            resolve_walker(self.walker)
        except ValueError as e:
            errors.append(str(e))

        return errors


@dataclass
class TreeAccessors:
    """The ``get_children`` / ``set_children`` pair used by a Tree.

    The two functions describe the same field, so they are configured
    together: supplying only one of them is an error.
    """

    get_children: ChildrenGetter = field(default=default_get_children)
    set_children: ChildrenSetter = field(default=default_set_children)

    def validate(self) -> List[str]:
        """Validate accessors.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not callable(self.get_children):
            errors.append("get_children must be callable")
        if not callable(self.set_children):
            errors.append("set_children must be callable")
        return errors

    def as_tuple(self) -> Tuple[ChildrenGetter, ChildrenSetter]:
        return self.get_children, self.set_children

    @classmethod
    def resolve(cls,
                get_children: Optional[ChildrenGetter] = None,
                set_children: Optional[ChildrenSetter] = None,
                fallback: Optional['TreeAccessors'] = None) -> 'TreeAccessors':
        """Build an accessor pair from optional overrides.

        Args:
            get_children: Override for the getter
            set_children: Override for the setter
            fallback: Pair used when neither override is given
                (defaults to the ``children`` field accessors)

        Returns:
            A validated TreeAccessors

        Raises:
            ConfigurationError: If only one of the pair is given, or an
                accessor is not callable
        """
        if (get_children is None) != (set_children is None):
            raise ConfigurationError(
                "get_children and set_children must be given both or neither"
            )
        if get_children is None:
            return fallback if fallback is not None else cls()

        accessors = cls(get_children=get_children, set_children=set_children)
        errors = accessors.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid accessors: {'; '.join(errors)}"
            )
        return accessors


__all__ = [
    'WalkOptions',
    'TreeAccessors',
    'TraversalStrategy',
    'Visitor',
]
