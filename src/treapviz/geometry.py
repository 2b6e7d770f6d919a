"""
Geometry helpers for drawing trees as text.

Pure functions for measuring labels and producing the diagonal strokes
that connect a parent label to its children.
"""

from typing import List

# Diagonal branch characters
BRANCH_CHARS = {
    "left": "╱",
    "right": "╲",
}


def spaces(n: int) -> str:
    """Return a run of n spaces (empty for n <= 0)."""
    return " " * n


def to_lines(lines: List[str]) -> str:
    """Join lines with newlines, without a trailing newline."""
    return "\n".join(lines)


def middle_label_pos(s: str) -> int:
    """
    Calculate the column of the middle of the non-blank part of a string.

    Leading blanks count towards the offset, trailing blanks are ignored.

    >>> middle_label_pos("   abc ")
    4
    >>> middle_label_pos("   ")
    3
    """
    rest = s.lstrip()
    prefix = len(s) - len(rest)
    return prefix + len(rest.rstrip()) // 2


def branch_lines(n: int) -> List[str]:
    """
    Draw a wedge of branches of the given height.

    Row i has (n - 1 - i) leading spaces, then the left stroke, 2 * i
    spaces and the right stroke.

    >>> print(to_lines(branch_lines(3)))
      ╱╲
     ╱  ╲
    ╱    ╲
    """
    return [
        spaces(n - i - 1) + BRANCH_CHARS["left"] + spaces(2 * i) + BRANCH_CHARS["right"]
        for i in range(n)
    ]
