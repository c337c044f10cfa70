"""Exception hierarchy for WalkTreeLib.

Errors raised by callbacks (visitors, mapping functions, reducers) are never
wrapped by the library; they propagate to the caller unchanged.
"""


class WalkTreeError(Exception):
    """Base class for all errors raised by WalkTreeLib itself."""
    pass


class ConfigurationError(WalkTreeError, ValueError):
    """Raised when options are inconsistent or invalid.

    The most common cause is supplying only one half of the
    ``get_children`` / ``set_children`` pair.
    """
    pass


class UnimplementedCapabilityError(WalkTreeError, NotImplementedError):
    """Raised when a walker method is not provided by the concrete walker."""
    pass


class InvalidChildrenError(WalkTreeError, TypeError):
    """Raised when a children accessor returns something that is neither
    falsy nor a sequence of nodes."""
    pass


class QuerySyntaxError(WalkTreeError, ValueError):
    """Raised when a query string cannot be compiled into a selector."""
    pass
