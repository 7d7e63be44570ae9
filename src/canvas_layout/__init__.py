"""Graph layout engine: force-directed and radial tree layouts."""

from .errors import InvalidGraph, InvalidInput, InvalidParameter, LayoutCancelled, LayoutError
from .graph import Graph, Position, load_graph, save_layout

__all__ = [
    "Graph",
    "Position",
    "load_graph",
    "save_layout",
    "LayoutError",
    "InvalidGraph",
    "InvalidInput",
    "InvalidParameter",
    "LayoutCancelled",
]
