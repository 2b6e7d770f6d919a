"""
Data models for tree rendering.

This module contains the intermediate binary tree consumed by the layout
engine and a plain source node type for callers that do not bring their own.

Classes:
    Empty: The absent subtree.
    Branch: A node with a finalized label and two subtrees.
    TreapNode: Source node exposing key, priority, value and children.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Empty:
    """An empty subtree. Renders to nothing."""


EMPTY = Empty()


@dataclass(frozen=True)
class Branch:
    """
    A node of the intermediate tree.

    The label is already formatted and must be a single line; a label
    containing a newline produces an undefined layout.

    Attributes:
        label: Text drawn for this node.
        left: Left subtree.
        right: Right subtree.
    """

    label: str
    left: "BinTree" = EMPTY
    right: "BinTree" = EMPTY

    @property
    def is_leaf(self) -> bool:
        """True when neither child is present."""
        return isinstance(self.left, Empty) and isinstance(self.right, Empty)


BinTree = Union[Empty, Branch]


@dataclass
class TreapNode:
    """
    Source node in the shape the renderer consumes.

    Only carries data; ordering, priorities and rotations are the concern
    of whatever structure builds these nodes.

    Attributes:
        key: Search key of the node.
        priority: Heap priority of the node.
        value: Payload stored at the node.
        left: Left child, or None when absent.
        right: Right child, or None when absent.
    """

    key: Any
    priority: Any
    value: Any = None
    left: Optional["TreapNode"] = None
    right: Optional["TreapNode"] = None
