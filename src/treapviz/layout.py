"""
Layout module that turns a binary tree into a block of text.

Every subtree is rendered into a list of lines, then stitched under its
parent's label:
- One child: a single diagonal glyph connects the parent to the child.
- Two children: the blocks sit side by side with a one-column gutter and
  a wedge of diagonals joins them to the parent, which is centered over the
  midpoint of the children's labels.

Subtrees are composed bottom-up from an explicit stack, so tree height is
not bounded by the interpreter's recursion limit.
"""

from typing import List, Optional, Tuple

from .geometry import BRANCH_CHARS, branch_lines, middle_label_pos, spaces, to_lines
from .models import BinTree, Branch, Empty
from .tracer import (
    CASE_BOTH,
    CASE_LEAF,
    CASE_ONLY_LEFT,
    CASE_ONLY_RIGHT,
    LayoutDecision,
    RenderTrace,
)


class BlockLayout:
    """
    Composes text blocks for a tree of Branch/Empty nodes.

    Rendering never mutates the tree, so one instance can be reused for any
    number of trees. The optional trace receives one LayoutDecision per
    Branch, in post-order.
    """

    def __init__(self, trace: Optional[RenderTrace] = None):
        self.trace = trace

    def layout(self, tree: BinTree) -> List[str]:
        """
        Render a tree into its lines.

        Args:
            tree: Root of the tree to render

        Returns:
            Lines of the block; empty list for an empty tree
        """
        blocks: List[List[str]] = []

        for node in self._post_order(tree):
            if isinstance(node, Empty):
                blocks.append([])
                continue

            right_lines = blocks.pop()
            left_lines = blocks.pop()
            blocks.append(self._compose(node.label, left_lines, right_lines))

        return blocks.pop()

    def _post_order(self, tree: BinTree) -> List[BinTree]:
        """List nodes so each node comes after its left then right subtree."""
        order: List[BinTree] = []
        pending = [tree]

        while pending:
            node = pending.pop()
            order.append(node)
            if isinstance(node, Branch):
                pending.append(node.left)
                pending.append(node.right)

        order.reverse()
        return order

    def _compose(
        self, label: str, left_lines: List[str], right_lines: List[str]
    ) -> List[str]:
        """Dispatch on which children are present."""
        if not left_lines and not right_lines:
            lines = [label]
            self._record(LayoutDecision(label=label, case=CASE_LEAF), lines)
            return lines

        if not right_lines:
            return self._compose_only_left(label, left_lines)

        if not left_lines:
            return self._compose_only_right(label, right_lines)

        return self._compose_both(label, left_lines, right_lines)

    def _compose_only_left(self, label: str, left_lines: List[str]) -> List[str]:
        root_mid = middle_label_pos(label)
        left_mid = middle_label_pos(left_lines[0])

        if root_mid == left_mid:
            root_shift, left_shift = 1, 0
        elif root_mid > left_mid:
            root_shift, left_shift = 0, root_mid - left_mid - 1
        else:
            root_shift, left_shift = left_mid - root_mid + 1, 0

        branch_column = root_mid + root_shift - 1

        lines = [
            spaces(root_shift) + label,
            spaces(branch_column) + BRANCH_CHARS["left"],
        ]
        lines.extend(spaces(left_shift) + line for line in left_lines)

        self._record(
            LayoutDecision(
                label=label,
                case=CASE_ONLY_LEFT,
                root_shift=root_shift,
                children_shift=left_shift,
                branch_column=branch_column,
            ),
            lines,
        )
        return lines

    def _compose_only_right(self, label: str, right_lines: List[str]) -> List[str]:
        root_mid = middle_label_pos(label)
        right_mid = middle_label_pos(right_lines[0])

        if root_mid == right_mid:
            root_shift, right_shift = 0, 1
        elif root_mid > right_mid:
            root_shift, right_shift = 0, root_mid - right_mid + 1
        else:
            root_shift, right_shift = right_mid - root_mid - 1, 0

        branch_column = root_mid + root_shift + 1

        lines = [
            spaces(root_shift) + label,
            spaces(branch_column) + BRANCH_CHARS["right"],
        ]
        lines.extend(spaces(right_shift) + line for line in right_lines)

        self._record(
            LayoutDecision(
                label=label,
                case=CASE_ONLY_RIGHT,
                root_shift=root_shift,
                children_shift=right_shift,
                branch_column=branch_column,
            ),
            lines,
        )
        return lines

    def _compose_both(
        self, label: str, left_lines: List[str], right_lines: List[str]
    ) -> List[str]:
        root_mid = middle_label_pos(label)
        left_mid = middle_label_pos(left_lines[0])
        right_mid = middle_label_pos(right_lines[0])

        # One column of gutter after the widest left line
        left_width = 1 + max(len(line) for line in left_lines)
        right_off_middle = left_width + right_mid
        branch_height = (right_off_middle - left_mid) // 2
        root_must_middle = (left_mid + right_off_middle) // 2

        root_offset, children_offset = self._both_offsets(root_mid, root_must_middle)

        lines = [spaces(root_offset) + label]
        lines.extend(spaces(root_offset) + line for line in branch_lines(branch_height))
        lines.extend(
            spaces(children_offset) + line
            for line in self._zip_children(left_lines, right_lines, left_width)
        )

        self._record(
            LayoutDecision(
                label=label,
                case=CASE_BOTH,
                root_shift=root_offset,
                children_shift=children_offset,
                branch_height=branch_height,
            ),
            lines,
        )
        return lines

    @staticmethod
    def _both_offsets(root_mid: int, root_must_middle: int) -> Tuple[int, int]:
        """Offsets (root, children); the root never moves left."""
        if root_mid < root_must_middle:
            return root_must_middle - root_mid, 0
        return 0, root_mid - root_must_middle

    @staticmethod
    def _zip_children(
        left_lines: List[str], right_lines: List[str], left_width: int
    ) -> List[str]:
        """Place two blocks side by side, the right one starting at left_width."""
        rows = []
        for i in range(max(len(left_lines), len(right_lines))):
            if i >= len(right_lines):
                rows.append(left_lines[i])
            elif i >= len(left_lines):
                rows.append(spaces(left_width) + right_lines[i])
            else:
                rows.append(left_lines[i].ljust(left_width) + right_lines[i])
        return rows

    def _record(self, decision: LayoutDecision, lines: List[str]) -> None:
        if self.trace is None:
            return
        decision.height = len(lines)
        decision.width = max(len(line) for line in lines)
        self.trace.add_decision(decision)


def layout_lines(tree: BinTree, trace: Optional[RenderTrace] = None) -> List[str]:
    """Render a tree into a list of lines."""
    return BlockLayout(trace).layout(tree)


def show_tree(tree: BinTree, trace: Optional[RenderTrace] = None) -> str:
    """
    Render a tree as a multi-line string.

    Lines are separated by newlines with no trailing newline. An empty tree
    renders to the empty string and a leaf to exactly its label.
    """
    return to_lines(layout_lines(tree, trace))
