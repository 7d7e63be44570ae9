"""Fruchterman-Reingold force-directed layout."""

import math
import threading
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import InvalidParameter, LayoutCancelled
from ..graph import Graph, Position


@dataclass(frozen=True)
class ForceConfig:
    """Constants of the force simulation.

    Attributes:
        k: Ideal distance between nodes. Repulsion is k^2/d, attraction d^2/k.
        temperature: Largest step a node may take in the first iteration.
        min_distance: Stand-in for a distance of exactly zero.
    """

    k: float = 2.0
    temperature: float = 5.0
    min_distance: float = 0.001

    def __post_init__(self) -> None:
        for name in ("k", "temperature", "min_distance"):
            value = getattr(self, name)
            if not value > 0 or not math.isfinite(value):
                raise InvalidParameter(f"{name} must be a positive number, got {value!r}")


def cooling_factor(temperature: float, iteration: int, iterations: int) -> float:
    """Quadratic cooling: ``temperature`` at iteration 0, approaching 0 at the end."""
    return temperature * (1.0 - iteration / iterations) ** 2


def fruchterman_reingold(
    graph: Graph,
    iterations: int,
    config: ForceConfig | None = None,
    *,
    cancel: threading.Event | None = None,
    progress: Callable[[int, list[Position]], None] | None = None,
) -> list[Position]:
    """Run the force simulation starting from the graph's current positions.

    Every iteration pushes all node pairs apart, pulls the ends of each edge
    together and then moves each node along its net displacement, by at most
    the current cooling factor. Only x and y take part; z is set to 0.

    Args:
        graph: Graph with starting positions. Not modified.
        iterations: Number of iterations, at least 1.
        config: Simulation constants. Defaults to ``ForceConfig()``.
        cancel: Checked before each iteration; if set, the run stops.
        progress: Called after each iteration with the iteration index and a
            copy of the positions.

    Returns:
        New positions, one per node.

    Raises:
        InvalidParameter: If ``iterations`` is not a positive integer.
        LayoutCancelled: If ``cancel`` was set before the run finished.
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise InvalidParameter(f"iterations must be a positive integer, got {iterations!r}")
    if config is None:
        config = ForceConfig()

    k = config.k
    floor = config.min_distance
    n = graph.node_count
    edges = list(graph.edges())

    xs = [p[0] for p in graph.positions]
    ys = [p[1] for p in graph.positions]

    for iteration in range(iterations):
        if cancel is not None and cancel.is_set():
            raise LayoutCancelled(f"Force layout cancelled after {iteration} of {iterations} iterations")

        cooling = cooling_factor(config.temperature, iteration, iterations)
        disp_x = [0.0] * n
        disp_y = [0.0] * n

        # Repulsion between every ordered pair
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                dx = xs[i] - xs[j]
                dy = ys[i] - ys[j]
                distance = math.sqrt(dx * dx + dy * dy) or floor
                force = k * k / distance
                disp_x[i] += dx / distance * force
                disp_y[i] += dy / distance * force

        # Attraction along edges
        for i, j in edges:
            dx = xs[i] - xs[j]
            dy = ys[i] - ys[j]
            distance = math.sqrt(dx * dx + dy * dy) or floor
            force = distance * distance / k
            fx = dx / distance * force
            fy = dy / distance * force
            disp_x[i] -= fx
            disp_y[i] -= fy
            disp_x[j] += fx
            disp_y[j] += fy

        for i in range(n):
            dx = disp_x[i]
            dy = disp_y[i]
            distance = math.sqrt(dx * dx + dy * dy) or floor
            step = min(distance, cooling)
            xs[i] += dx / distance * step
            ys[i] += dy / distance * step

        if progress is not None:
            progress(iteration, [(x, y, 0.0) for x, y in zip(xs, ys)])

    return [(x, y, 0.0) for x, y in zip(xs, ys)]
