"""Tests for depth.py module."""

import pytest

from canvas_layout.errors import InvalidInput
from canvas_layout.graph import Graph
from canvas_layout.layout.depth import compute_subtree_metrics


class TestComputeSubtreeMetrics:
    """Tests for compute_subtree_metrics function."""

    def test_path_from_end(self, path_graph):
        """Path 0-1-2-3 rooted at 0 gives depths 0..3 and sizes 4..1."""
        metrics = compute_subtree_metrics(path_graph, 0)

        assert metrics.depth == [0, 1, 2, 3]
        assert metrics.subtree_size == [4, 3, 2, 1]
        assert metrics.parent == [-1, 0, 1, 2]

    def test_path_from_middle(self, path_graph):
        metrics = compute_subtree_metrics(path_graph, 1)

        assert metrics.depth == [1, 0, 1, 2]
        assert metrics.subtree_size == [1, 4, 2, 1]
        assert metrics.children[1] == [0, 2]

    def test_binary_tree(self, binary_tree):
        metrics = compute_subtree_metrics(binary_tree, 0)

        assert metrics.depth == [0, 1, 1, 2, 2, 2, 2]
        assert metrics.subtree_size == [7, 3, 3, 1, 1, 1, 1]
        assert metrics.children[0] == [1, 2]
        assert metrics.children[2] == [5, 6]

    def test_root_size_is_node_count(self, unbalanced_tree):
        metrics = compute_subtree_metrics(unbalanced_tree, 0)
        assert metrics.subtree_size[0] == unbalanced_tree.node_count

    def test_size_is_one_plus_children(self, unbalanced_tree):
        """Each subtree size is 1 plus the sizes of its children."""
        metrics = compute_subtree_metrics(unbalanced_tree, 0)

        for node, children in enumerate(metrics.children):
            expected = 1 + sum(metrics.subtree_size[c] for c in children)
            assert metrics.subtree_size[node] == expected

    def test_parent_is_not_revisited(self, single_edge):
        """Undirected storage: the child must not list its parent as a child."""
        metrics = compute_subtree_metrics(single_edge, 0)

        assert metrics.children == [[1], []]
        assert metrics.subtree_size == [2, 1]

    def test_unreachable_nodes(self, disjoint_edges):
        metrics = compute_subtree_metrics(disjoint_edges, 0)

        assert metrics.depth == [0, 1, -1, -1]
        assert metrics.subtree_size == [2, 1, 0, 0]

    def test_deep_path(self):
        """No recursion limit on long chains."""
        n = 20_000
        graph = Graph.from_edges([(0, 0)] * n, [(i, i + 1) for i in range(n - 1)])
        metrics = compute_subtree_metrics(graph, 0)

        assert metrics.depth[-1] == n - 1
        assert metrics.subtree_size[0] == n

    @pytest.mark.parametrize("root", [-1, 4, "0", True])
    def test_invalid_root(self, path_graph, root):
        with pytest.raises(InvalidInput):
            compute_subtree_metrics(path_graph, root)
