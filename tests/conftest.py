"""Pytest fixtures for layout module tests."""

import math

import pytest

from canvas_layout.graph import Graph


def _circle(n: int, radius: float = 1.0) -> list[tuple[float, float]]:
    return [
        (radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


@pytest.fixture
def path_graph() -> Graph:
    """Path 0 - 1 - 2 - 3."""
    return Graph.from_edges(_circle(4), [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def cycle_graph() -> Graph:
    """Cycle 0 - 1 - 2 - 3 - 0."""
    return Graph.from_edges(_circle(4), [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def disjoint_edges() -> Graph:
    """Two separate edges: 0 - 1 and 2 - 3."""
    return Graph.from_edges(_circle(4), [(0, 1), (2, 3)])


@pytest.fixture
def binary_tree() -> Graph:
    """Balanced binary tree of depth 2 rooted at 0.

    0 -> 1, 2; 1 -> 3, 4; 2 -> 5, 6.
    """
    edges = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)]
    return Graph.from_edges(_circle(7), edges)


@pytest.fixture
def unbalanced_tree() -> Graph:
    """Root 0 with a 4-node branch (1 -> 3, 4, 5) and a leaf (2)."""
    edges = [(0, 1), (0, 2), (1, 3), (1, 4), (1, 5)]
    return Graph.from_edges(_circle(6), edges)


@pytest.fixture
def single_edge() -> Graph:
    """Root with exactly one child."""
    return Graph.from_edges([(0, 0), (1, 1)], [(0, 1)])


@pytest.fixture
def lollipop() -> Graph:
    """Triangle 0 - 1 - 2 with a tail 2 - 3 - 4 (connected, one cycle)."""
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]
    return Graph.from_edges(_circle(5), edges)
