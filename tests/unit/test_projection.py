"""Tests for projecting source trees into the intermediate tree."""

import networkx as nx
import pytest

from treapviz.labels import compact_show_node
from treapviz.models import EMPTY, Branch, TreapNode
from treapviz.projection import (
    ProjectionError,
    from_networkx,
    to_bin_tree,
    tree_height,
    tree_size,
)


def key_only(key, priority, value):
    return str(key)


class TestToBinTree:
    """Tests for to_bin_tree."""

    def test_none_is_empty(self):
        assert to_bin_tree(None, key_only) is EMPTY

    def test_single_node(self):
        assert to_bin_tree(TreapNode(1, 2, "a"), compact_show_node) == Branch('1,2:"a"')

    def test_shape_is_kept(self, skewed_treap):
        tree = to_bin_tree(skewed_treap, key_only)

        assert tree == Branch(
            "5",
            Branch("3", Branch("1", right=Branch("2")), Branch("4")),
            Branch("7", right=Branch("8")),
        )

    def test_label_fn_called_once_per_node(self, skewed_treap):
        calls = []

        def record(key, priority, value):
            calls.append((key, priority, value))
            return str(key)

        to_bin_tree(skewed_treap, record)

        assert sorted(calls) == [
            (1, 5, "a"), (2, 9, "b"), (3, 2, "c"), (4, 6, "d"),
            (5, 1, "e"), (7, 3, "g"), (8, 8, "h"),
        ]

    def test_duck_typed_nodes(self):
        """Any object with the expected attributes is accepted."""

        class Node:
            def __init__(self, key, left=None, right=None):
                self.key = key
                self.priority = 0
                self.value = None
                self.left = left
                self.right = right

        tree = to_bin_tree(Node("r", right=Node("c")), key_only)
        assert tree == Branch("r", right=Branch("c"))

    def test_deep_chain(self):
        """Projection does not recurse."""
        root = None
        for i in range(5000):
            root = TreapNode(i, i, None, right=root)

        tree = to_bin_tree(root, key_only)

        assert tree_size(tree) == 5000
        assert tree_height(tree) == 5000


class TestFromNetworkx:
    """Tests for from_networkx."""

    def test_projects_graph(self, treap_graph):
        tree = from_networkx(treap_graph, "b", compact_show_node)

        assert tree == Branch('2,1:"b"', Branch('1,4:"a"'), Branch('3,7:"c"'))

    def test_key_defaults_to_node_id(self):
        graph = nx.DiGraph()
        graph.add_node("root")

        tree = from_networkx(graph, "root", compact_show_node)

        assert tree == Branch('"root",None:None')

    def test_only_right_child(self):
        graph = nx.DiGraph()
        graph.add_edge(1, 2, side="right")

        assert from_networkx(graph, 1, key_only) == Branch("1", right=Branch("2"))

    def test_missing_root(self, treap_graph):
        with pytest.raises(ProjectionError, match="not in the graph"):
            from_networkx(treap_graph, "z", key_only)

    def test_edge_without_side(self):
        graph = nx.DiGraph()
        graph.add_edge("a", "b")

        with pytest.raises(ProjectionError, match="side"):
            from_networkx(graph, "a", key_only)

    def test_two_children_on_one_side(self):
        graph = nx.DiGraph()
        graph.add_edge("a", "b", side="left")
        graph.add_edge("a", "c", side="left")

        with pytest.raises(ProjectionError, match="more than one left child"):
            from_networkx(graph, "a", key_only)


class TestTreeMetrics:
    """Tests for tree_size and tree_height."""

    def test_empty(self):
        assert tree_size(EMPTY) == 0
        assert tree_height(EMPTY) == 0

    def test_skewed(self, skewed_treap):
        tree = to_bin_tree(skewed_treap, key_only)
        assert tree_size(tree) == 7
        assert tree_height(tree) == 4
