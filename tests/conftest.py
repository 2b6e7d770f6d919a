"""Pytest configuration and shared fixtures for treapviz tests."""

import networkx as nx
import pytest

from treapviz import Branch, TreapNode, TreePrinter


@pytest.fixture
def three_node_treap():
    """Balanced treap with one node on each side of the root."""
    return TreapNode(
        2, 1, "b",
        left=TreapNode(1, 4, "a"),
        right=TreapNode(3, 7, "c"),
    )


@pytest.fixture
def skewed_treap():
    """Treap whose left subtree is deeper than its right."""
    return TreapNode(
        5, 1, "e",
        left=TreapNode(
            3, 2, "c",
            left=TreapNode(1, 5, "a", right=TreapNode(2, 9, "b")),
            right=TreapNode(4, 6, "d"),
        ),
        right=TreapNode(7, 3, "g", right=TreapNode(8, 8, "h")),
    )


@pytest.fixture
def balanced_bin_tree():
    """Pre-built intermediate tree with single-letter labels."""
    return Branch("B", Branch("A"), Branch("C"))


@pytest.fixture
def treap_graph():
    """networkx version of the three node treap."""
    graph = nx.DiGraph()
    graph.add_node("b", key=2, priority=1, value="b")
    graph.add_node("a", key=1, priority=4, value="a")
    graph.add_node("c", key=3, priority=7, value="c")
    graph.add_edge("b", "a", side="left")
    graph.add_edge("b", "c", side="right")
    return graph


@pytest.fixture
def printer():
    """Default TreePrinter instance."""
    return TreePrinter()
