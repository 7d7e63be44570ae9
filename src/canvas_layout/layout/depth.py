"""Depth and subtree-size computation for a rooted traversal of a graph."""

from dataclasses import dataclass

from ..errors import InvalidInput
from ..graph import Graph


@dataclass(frozen=True)
class SubtreeMetrics:
    """Per-node results of a depth-first traversal from ``root``.

    Nodes not reachable from the root have depth -1, subtree size 0 and
    parent -1.
    """

    root: int
    depth: list[int]
    subtree_size: list[int]
    parent: list[int]
    children: list[list[int]]


def compute_subtree_metrics(graph: Graph, root: int) -> SubtreeMetrics:
    """Compute depth and subtree size of every node below ``root``.

    Uses an explicit stack instead of recursion. Nodes are recorded in preorder
    and subtree sizes are then accumulated bottom-up by walking that order
    backwards, so every child is summed into its parent before the parent is
    summed into the grandparent.

    Args:
        graph: Graph treated as a tree rooted at ``root``.
        root: Index of the root node.

    Returns:
        SubtreeMetrics with depth (root = 0), subtree size (including the node
        itself), parent and children (ascending index order) per node.

    Raises:
        InvalidInput: If ``root`` is not a node of the graph.
    """
    n = graph.node_count
    if not isinstance(root, int) or isinstance(root, bool) or not 0 <= root < n:
        raise InvalidInput(f"Root {root!r} is not a node of a {n}-node graph")

    depth = [-1] * n
    subtree_size = [0] * n
    parent = [-1] * n
    children: list[list[int]] = [[] for _ in range(n)]
    visited = [False] * n

    order: list[int] = []
    visited[root] = True
    depth[root] = 0
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbor in graph.adjacency[node]:
            if visited[neighbor]:
                continue
            visited[neighbor] = True
            depth[neighbor] = depth[node] + 1
            parent[neighbor] = node
            children[node].append(neighbor)
            stack.append(neighbor)

    # Postorder accumulation
    for node in reversed(order):
        subtree_size[node] += 1
        if parent[node] != -1:
            subtree_size[parent[node]] += subtree_size[node]

    return SubtreeMetrics(root, depth, subtree_size, parent, children)
