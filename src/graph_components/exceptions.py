"""Custom exceptions for graph-components-lib."""


class ComponentsError(Exception):
    """Base exception for component computations."""


class InvalidGraphError(ComponentsError, TypeError):
    """Raised when the argument does not implement the graph protocol."""


class WrongDirectionalityError(ComponentsError, ValueError):
    """Raised when strong components are requested on an undirected graph."""
