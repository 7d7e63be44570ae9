"""Topology classification: tree recognition and connectivity."""

from dataclasses import dataclass
from enum import Enum

from ..graph import Graph


class Topology(Enum):
    """Coarse shape of an undirected graph."""

    EMPTY = "empty"  # no nodes
    TREE = "tree"  # connected, |E| == |V| - 1
    CONNECTED_CYCLIC = "cyclic"  # connected, |E| >= |V|
    DISCONNECTED = "disconnected"  # more than one component


@dataclass(frozen=True)
class TreeVerdict:
    """Result of classifying a graph's topology."""

    is_tree: bool
    topology: Topology
    component: frozenset[int]  # nodes reached from node 0
    node_count: int
    edge_count: int


def _reachable_from(graph: Graph, start: int, visited: list[bool]) -> list[int]:
    """Iterative DFS marking ``visited``; returns nodes reached in visit order."""
    reached: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        reached.append(node)
        for neighbor in graph.adjacency[node]:
            if not visited[neighbor]:
                stack.append(neighbor)
    return reached


def is_tree(graph: Graph) -> bool:
    """Return True iff the graph is connected and has exactly |V| - 1 edges.

    The edge count is checked first; only graphs that pass it are traversed.
    An empty graph is not a tree; a single node without edges is.

    Args:
        graph: Graph to test.

    Returns:
        Whether the graph is a tree.
    """
    n = graph.node_count
    if n == 0:
        return False
    if graph.edge_count != n - 1:
        return False

    visited = [False] * n
    return len(_reachable_from(graph, 0, visited)) == n


def classify_topology(graph: Graph) -> TreeVerdict:
    """Classify a graph as empty, tree, connected with cycles, or disconnected.

    Args:
        graph: Graph to classify.

    Returns:
        TreeVerdict whose ``is_tree`` matches :func:`is_tree`.
    """
    n = graph.node_count
    m = graph.edge_count
    if n == 0:
        return TreeVerdict(False, Topology.EMPTY, frozenset(), 0, 0)

    visited = [False] * n
    component = frozenset(_reachable_from(graph, 0, visited))

    if len(component) != n:
        topology = Topology.DISCONNECTED
    elif m == n - 1:
        topology = Topology.TREE
    else:
        topology = Topology.CONNECTED_CYCLIC

    return TreeVerdict(topology is Topology.TREE, topology, component, n, m)


def connected_components(graph: Graph) -> list[list[int]]:
    """Return the connected components, each sorted, ordered by smallest node."""
    visited = [False] * graph.node_count
    components: list[list[int]] = []
    for node in range(graph.node_count):
        if not visited[node]:
            components.append(sorted(_reachable_from(graph, node, visited)))
    return components
