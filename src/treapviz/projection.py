"""
Projection of source trees into the intermediate Branch/Empty tree.

Labels are formatted here, once per node, so the layout engine only ever
sees finished strings. Two sources are supported:
- Node objects exposing key, priority, value, left and right attributes
  (children are None when absent), such as TreapNode.
- networkx directed graphs whose child edges carry side="left"/"right".
"""

from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

import networkx as nx

from .labels import LabelFn
from .models import EMPTY, BinTree, Branch


class ProjectionError(Exception):
    """Raised when a source tree cannot be read as a binary tree."""

    pass


# Describes a source node as (key, priority, value, left, right)
Describe = Callable[[Any], Tuple[Any, Any, Any, Any, Any]]


def _project(root: Any, describe: Describe, label_fn: LabelFn) -> BinTree:
    """
    Build the intermediate tree bottom-up without recursion.

    None stands for an absent child throughout.
    """
    if root is None:
        return EMPTY

    # First pass: collect (node, label, left, right) parents before children
    order: List[Tuple[Any, str, Any, Any]] = []
    pending = [root]
    while pending:
        node = pending.pop()
        key, priority, value, left, right = describe(node)
        order.append((node, label_fn(key, priority, value), left, right))
        for child in (left, right):
            if child is not None:
                pending.append(child)

    # Second pass: children are always built before their parent
    built: Dict[int, BinTree] = {}
    for node, label, left, right in reversed(order):
        built[id(node)] = Branch(
            label,
            built.pop(id(left)) if left is not None else EMPTY,
            built.pop(id(right)) if right is not None else EMPTY,
        )

    return built[id(root)]


def _describe_node(node: Any) -> Tuple[Any, Any, Any, Any, Any]:
    return node.key, node.priority, node.value, node.left, node.right


def to_bin_tree(root: Optional[Any], label_fn: LabelFn) -> BinTree:
    """
    Project a node-based tree.

    Args:
        root: Root node, or None for an empty tree
        label_fn: Function (key, priority, value) -> label

    Returns:
        The intermediate tree
    """
    return _project(root, _describe_node, label_fn)


class _GraphNode:
    """Wraps a graph node id so repeated ids stay distinct by identity."""

    __slots__ = ("node_id",)

    def __init__(self, node_id: Hashable):
        self.node_id = node_id


def from_networkx(graph: nx.DiGraph, root: Hashable, label_fn: LabelFn) -> BinTree:
    """
    Project a networkx directed graph rooted at the given node.

    Each out-edge must carry side="left" or side="right". Node attributes
    key (defaults to the node id), priority and value are passed to the
    label function.

    Args:
        graph: Directed graph shaped as a binary tree
        root: Id of the root node
        label_fn: Function (key, priority, value) -> label

    Returns:
        The intermediate tree

    Raises:
        ProjectionError: If the root is missing or an edge is not a valid
            left/right child link
    """
    if root not in graph:
        raise ProjectionError(f"Root node {root!r} is not in the graph")

    def describe(wrapped: _GraphNode) -> Tuple[Any, Any, Any, Any, Any]:
        node_id = wrapped.node_id
        attrs = graph.nodes[node_id]
        children: Dict[str, Optional[_GraphNode]] = {"left": None, "right": None}

        for _, child, side in graph.out_edges(node_id, data="side"):
            if side not in children:
                raise ProjectionError(
                    f"Edge {node_id!r} -> {child!r} needs side='left' or "
                    f"side='right', got {side!r}"
                )
            if children[side] is not None:
                raise ProjectionError(
                    f"Node {node_id!r} has more than one {side} child"
                )
            children[side] = _GraphNode(child)

        return (
            attrs.get("key", node_id),
            attrs.get("priority"),
            attrs.get("value"),
            children["left"],
            children["right"],
        )

    return _project(_GraphNode(root), describe, label_fn)


def tree_size(tree: BinTree) -> int:
    """Count the Branch nodes of a tree."""
    count = 0
    pending = [tree]
    while pending:
        node = pending.pop()
        if isinstance(node, Branch):
            count += 1
            pending.append(node.left)
            pending.append(node.right)
    return count


def tree_height(tree: BinTree) -> int:
    """Number of Branch nodes on the longest root-to-leaf path."""
    height = 0
    pending = [(tree, 1)]
    while pending:
        node, depth = pending.pop()
        if isinstance(node, Branch):
            height = max(height, depth)
            pending.append((node.left, depth + 1))
            pending.append((node.right, depth + 1))
    return height
