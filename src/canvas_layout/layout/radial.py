"""Radial tree layout: concentric rings by depth, wedges by subtree size."""

import math
from dataclasses import dataclass

from ..errors import InvalidInput, InvalidParameter
from ..graph import Graph, Position
from .classify import is_tree
from .depth import SubtreeMetrics, compute_subtree_metrics

DEFAULT_RADIUS_STEP = 2.0


@dataclass(frozen=True)
class AngularSlot:
    """Polar placement of one node.

    ``lower``/``upper`` is the wedge the node inherited from its parent and
    ``angle`` is its midpoint. ``child_lower``/``child_upper`` is the part of
    that wedge shared out among the node's children.
    """

    radius: float
    angle: float
    lower: float
    upper: float
    child_lower: float
    child_upper: float

    @property
    def span(self) -> float:
        return self.upper - self.lower

    @property
    def child_span(self) -> float:
        return self.child_upper - self.child_lower


def _check_radius_step(radius_step: float) -> None:
    if not radius_step > 0 or not math.isfinite(radius_step):
        raise InvalidParameter(f"radius_step must be a positive number, got {radius_step!r}")


def _check_tree_root(graph: Graph, root: int) -> None:
    n = graph.node_count
    if not isinstance(root, int) or isinstance(root, bool) or not 0 <= root < n:
        raise InvalidInput(f"Root {root!r} is not a node of a {n}-node graph")
    if not is_tree(graph):
        raise InvalidInput(
            f"Radial layout requires a tree; graph has {n} nodes and "
            f"{graph.edge_count} edges or is disconnected"
        )


def assign_angular_slots(
    graph: Graph,
    root: int,
    radius_step: float = DEFAULT_RADIUS_STEP,
    metrics: SubtreeMetrics | None = None,
) -> list[AngularSlot]:
    """Assign a radius and an angular wedge to every node, root first.

    The root sits at radius 0 and owns the full circle ``[-pi, pi]``. A node at
    depth ``d`` sits at radius ``d * radius_step`` at the middle of its wedge.
    Before its wedge is split among its children it is narrowed to
    ``angle +/- acos(r / (r + radius_step))``, so that the children's ring
    segment stays within what is visible from the parent's ring. Each child then
    gets a consecutive piece proportional to its subtree size.

    Args:
        graph: A tree.
        root: Root node index.
        radius_step: Distance between consecutive rings.
        metrics: Precomputed metrics for ``root``, computed if omitted.

    Returns:
        One AngularSlot per node, aligned with ``graph.positions``.

    Raises:
        InvalidParameter: If ``radius_step`` is not positive.
        InvalidInput: If ``root`` is out of range, the graph is not a tree, or
            ``metrics`` were computed for a different root.
    """
    _check_radius_step(radius_step)
    _check_tree_root(graph, root)
    if metrics is None:
        metrics = compute_subtree_metrics(graph, root)
    elif metrics.root != root or len(metrics.depth) != graph.node_count:
        raise InvalidInput(
            f"Metrics were computed for root {metrics.root} of a {len(metrics.depth)}-node "
            f"graph, not root {root} of this {graph.node_count}-node graph"
        )

    slots: list[AngularSlot] = [None] * graph.node_count  # type: ignore[list-item]
    stack: list[tuple[int, float, float]] = [(root, -math.pi, math.pi)]

    while stack:
        node, lower, upper = stack.pop()
        depth = metrics.depth[node]
        radius = depth * radius_step
        angle = (lower + upper) / 2

        child_lower, child_upper = lower, upper
        if depth > 0:
            half_width = math.acos(radius / (radius + radius_step))
            child_lower = max(lower, angle - half_width)
            child_upper = min(upper, angle + half_width)

        slots[node] = AngularSlot(radius, angle, lower, upper, child_lower, child_upper)

        descendants = metrics.subtree_size[node] - 1
        if descendants <= 0:
            continue

        angle_step = (child_upper - child_lower) / descendants
        left = child_lower
        for child in metrics.children[node]:
            right = left + angle_step * metrics.subtree_size[child]
            stack.append((child, left, right))
            left = right

    return slots


def radial_layout(
    graph: Graph,
    root: int = 0,
    radius_step: float = DEFAULT_RADIUS_STEP,
) -> list[Position]:
    """Lay out a tree on concentric rings around ``root``.

    Args:
        graph: Graph to lay out. Must be a tree.
        root: Node placed at the origin.
        radius_step: Distance between consecutive depth rings.

    Returns:
        New positions, one per node, with z = 0.

    Raises:
        InvalidParameter: If ``radius_step`` is not positive.
        InvalidInput: If ``root`` is out of range or the graph is not a tree.
    """
    slots = assign_angular_slots(graph, root, radius_step)
    return [
        (slot.radius * math.cos(slot.angle), slot.radius * math.sin(slot.angle), 0.0)
        for slot in slots
    ]
