"""Graph model shared by the layout algorithms."""

import json
import math
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import networkx as nx

from .errors import InvalidGraph

Position = tuple[float, float, float]


def _to_position(index: int, coords: Sequence[float]) -> Position:
    """Coerce a 2- or 3-component coordinate into a Position."""
    if len(coords) not in (2, 3):
        raise InvalidGraph(
            f"Node {index} has {len(coords)} coordinates, expected 2 or 3"
        )
    x = float(coords[0])
    y = float(coords[1])
    z = float(coords[2]) if len(coords) == 3 else 0.0
    if not all(math.isfinite(c) for c in (x, y, z)):
        raise InvalidGraph(f"Node {index} has a non-finite coordinate: {coords!r}")
    return (x, y, z)


def _is_index(value: object, n: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < n


@dataclass(frozen=True)
class Graph:
    """Undirected graph with one position per node.

    Nodes are identified by their index in ``positions``. ``adjacency[i]`` holds
    the sorted neighbor indices of node ``i``. Instances are validated on
    construction and never modified by the layout functions.
    """

    positions: tuple[Position, ...] = ()
    adjacency: tuple[tuple[int, ...], ...] = ()

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def from_adjacency(
        cls,
        positions: Iterable[Sequence[float]],
        adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]] = (),
    ) -> "Graph":
        """Build a graph from node positions and per-node neighbor lists.

        Args:
            positions: One (x, y) or (x, y, z) coordinate per node.
            adjacency: Either a sequence indexed by node or a mapping from node
                index to its neighbors. Nodes without an entry have no neighbors.

        Returns:
            A validated Graph.

        Raises:
            InvalidGraph: If an index is out of range, the adjacency is not
                symmetric, a node lists itself, or a coordinate is malformed.
        """
        coords = tuple(_to_position(i, p) for i, p in enumerate(positions))
        n = len(coords)

        if isinstance(adjacency, Mapping):
            items = list(adjacency.items())
        else:
            items = list(enumerate(adjacency))

        neighbors: list[set[int]] = [set() for _ in range(n)]
        for node, listed in items:
            if not _is_index(node, n):
                raise InvalidGraph(f"Adjacency entry for unknown node {node!r} (graph has {n} nodes)")
            for neighbor in listed:
                if not _is_index(neighbor, n):
                    raise InvalidGraph(
                        f"Node {node} lists neighbor {neighbor!r} outside 0..{n - 1}"
                    )
                neighbors[node].add(neighbor)

        return cls(coords, tuple(tuple(sorted(s)) for s in neighbors))

    @classmethod
    def from_edges(
        cls,
        positions: Iterable[Sequence[float]],
        edges: Iterable[tuple[int, int]],
    ) -> "Graph":
        """Build a graph from node positions and undirected (i, j) pairs."""
        coords = [tuple(p) for p in positions]
        adjacency: dict[int, set[int]] = {i: set() for i in range(len(coords))}
        for i, j in edges:
            if not _is_index(i, len(coords)) or not _is_index(j, len(coords)):
                raise InvalidGraph(
                    f"Edge ({i}, {j}) references a node outside 0..{len(coords) - 1}"
                )
            adjacency[i].add(j)
            adjacency[j].add(i)
        return cls.from_adjacency(coords, adjacency)

    def _validate(self) -> None:
        n = len(self.positions)
        if len(self.adjacency) != n:
            raise InvalidGraph(
                f"Adjacency has {len(self.adjacency)} entries for {n} nodes"
            )
        for i, position in enumerate(self.positions):
            if len(position) != 3:
                raise InvalidGraph(f"Node {i} position must have 3 components")
            for c in position:
                if not isinstance(c, (int, float)) or isinstance(c, bool) or not math.isfinite(c):
                    raise InvalidGraph(f"Node {i} has a non-finite coordinate: {position!r}")
        for i, neighbors in enumerate(self.adjacency):
            previous = -1
            for j in neighbors:
                if not _is_index(j, n):
                    raise InvalidGraph(f"Node {i} lists neighbor {j!r} outside 0..{n - 1}")
                if j <= previous:
                    raise InvalidGraph(
                        f"Neighbors of node {i} must be strictly ascending without duplicates: {neighbors!r}"
                    )
                previous = j
                if j == i:
                    raise InvalidGraph(f"Node {i} has a self-loop")
                if i not in self.adjacency[j]:
                    raise InvalidGraph(
                        f"Adjacency is not symmetric: {i} lists {j} but {j} does not list {i}"
                    )

    @property
    def node_count(self) -> int:
        return len(self.positions)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency) // 2

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self.adjacency[node]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield each undirected edge once as (i, j) with i < j."""
        for i, neighbors in enumerate(self.adjacency):
            for j in neighbors:
                if i < j:
                    yield i, j

    def with_positions(self, positions: Iterable[Sequence[float]]) -> "Graph":
        """Return a copy of this graph with new node positions."""
        coords = tuple(_to_position(i, p) for i, p in enumerate(positions))
        return Graph(coords, self.adjacency)

    @classmethod
    def from_networkx(cls, G: nx.Graph, pos_attr: str = "pos") -> "Graph":
        """Convert a networkx graph, relabelling nodes 0..n-1 in ``G.nodes`` order.

        Positions come from the ``pos_attr`` node attribute, or from ``x``/``y``
        (and optional ``z``) attributes. Nodes without either are placed on the
        unit circle by index so that no two of them start coincident.

        Args:
            G: Any networkx graph. Direction and edge multiplicity are ignored.
            pos_attr: Name of the node attribute holding a coordinate list.

        Returns:
            A validated Graph.
        """
        labels = list(G.nodes)
        index = {label: i for i, label in enumerate(labels)}
        n = len(labels)

        positions: list[Sequence[float]] = []
        for i, label in enumerate(labels):
            data = G.nodes[label]
            if pos_attr in data:
                positions.append(data[pos_attr])
            elif "x" in data and "y" in data:
                positions.append((data["x"], data["y"], data.get("z", 0.0)))
            else:
                angle = 2 * math.pi * i / n
                positions.append((math.cos(angle), math.sin(angle), 0.0))

        edges = [(index[u], index[v]) for u, v in G.edges()]
        for i, j in edges:
            if i == j:
                raise InvalidGraph(f"Node {labels[i]!r} has a self-loop")
        return cls.from_edges(positions, edges)

    def to_networkx(self, labels: Sequence[Hashable] | None = None) -> nx.Graph:
        """Convert to an undirected networkx graph with a ``pos`` attribute per node."""
        if labels is None:
            labels = range(self.node_count)
        labels = list(labels)
        G = nx.Graph()
        for label, position in zip(labels, self.positions):
            G.add_node(label, pos=list(position))
        G.add_edges_from((labels[i], labels[j]) for i, j in self.edges())
        return G


def load_graph(path: Path) -> tuple[Graph, list[Hashable]]:
    """Load a graph from networkx node-link JSON.

    Args:
        path: JSON file written by ``networkx.node_link_data`` (either the
            ``"edges"`` or the older ``"links"`` key is accepted).

    Returns:
        Tuple of (graph, labels) where ``labels[i]`` is the file's id for node i.
    """
    with open(path) as f:
        data = json.load(f)

    edges_key = "links" if "links" in data and "edges" not in data else "edges"
    data.setdefault(edges_key, [])
    G = nx.node_link_graph(data, edges=edges_key)
    return Graph.from_networkx(G), list(G.nodes)


def save_layout(
    path: Path,
    graph: Graph,
    positions: Sequence[Position],
    labels: Sequence[Hashable] | None = None,
) -> None:
    """Write ``graph`` with ``positions`` as node-link JSON.

    Args:
        path: Output file.
        graph: Graph supplying the edges.
        positions: One position per node, aligned with ``graph.positions``.
        labels: Node ids to write. Defaults to the node indices.
    """
    G = graph.with_positions(positions).to_networkx(labels)
    data = nx.node_link_data(G, edges="edges")
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
