"""Exceptions raised by the layout engine."""


class LayoutError(Exception):
    """Base class for all layout engine errors."""


class InvalidGraph(LayoutError, ValueError):
    """Adjacency or positions do not describe a valid undirected graph."""


class InvalidInput(LayoutError, ValueError):
    """The graph is valid but unsuitable for the requested layout."""


class InvalidParameter(LayoutError, ValueError):
    """A scalar layout parameter is out of range."""


class LayoutCancelled(LayoutError):
    """A force layout was stopped between iterations."""
