"""
Debug utilities for treapviz.

Tools for understanding and troubleshooting rendered trees.

Key Components:
- visual_diff: Compare two rendered blocks character-by-character
- BlockInspector: Utilities for inspecting a rendered block

Usage:
    # For comparing expected vs actual output:
    >>> from treapviz.debug import visual_diff
    >>> diff = visual_diff(expected_output, actual_output)
    >>> print(diff)

    # For checking where glyphs landed:
    >>> inspector = BlockInspector(printer.render(root))
    >>> inspector.find_char("╱")
"""

from typing import Dict, List, Tuple

from .geometry import BRANCH_CHARS, middle_label_pos


def visual_diff(expected: str, actual: str, context_lines: int = 2) -> str:
    """
    Generate a visual character-by-character diff between two rendered trees.

    This is useful for debugging test failures where the expected and actual
    outputs differ. It shows exactly where the differences are and what
    characters differ.

    Args:
        expected: The expected rendering
        actual: The actual rendering
        context_lines: Number of matching lines to show around differences

    Returns:
        A formatted string showing the differences

    Example:
        >>> expected = " B\\n╱\\nA"
        >>> actual = "B\\n╱\\nA"
        >>> print(visual_diff(expected, actual))
    """
    exp_lines = expected.split("\n")
    act_lines = actual.split("\n")

    output: List[str] = []
    output.append("=" * 60)
    output.append("VISUAL DIFF")
    output.append("=" * 60)

    max_lines = max(len(exp_lines), len(act_lines))

    diff_line_indices: List[int] = []
    for i in range(max_lines):
        exp_line = exp_lines[i] if i < len(exp_lines) else ""
        act_line = act_lines[i] if i < len(act_lines) else ""
        if exp_line != act_line:
            diff_line_indices.append(i)

    if not diff_line_indices:
        output.append("No differences found.")
        return "\n".join(output)

    output.append(f"Found {len(diff_line_indices)} differing line(s)")
    output.append("")

    # Show differences with context
    shown_lines: set = set()
    for diff_idx in diff_line_indices:
        for ctx in range(
            max(0, diff_idx - context_lines),
            min(max_lines, diff_idx + context_lines + 1),
        ):
            shown_lines.add(ctx)

    prev_shown = -2
    for i in sorted(shown_lines):
        # Show ellipsis for gaps
        if i > prev_shown + 1:
            output.append("...")

        exp_line = exp_lines[i] if i < len(exp_lines) else ""
        act_line = act_lines[i] if i < len(act_lines) else ""

        if exp_line == act_line:
            output.append(f"{i:3d}:   {act_line}")
        else:
            output.append(f"{i:3d}: E |{exp_line}|")
            output.append(f"     A |{act_line}|")

            diff_positions: List[int] = []
            max_len = max(len(exp_line), len(act_line))
            for j in range(max_len):
                e = exp_line[j] if j < len(exp_line) else ""
                a = act_line[j] if j < len(act_line) else ""
                if e != a:
                    diff_positions.append(j)

            if diff_positions:
                # Marker line under the actual row; +8 skips "     A |"
                marker = [" "] * (max_len + 8)
                for pos in diff_positions:
                    marker[pos + 8] = "^"
                output.append("".join(marker).rstrip())
                output.append(
                    f"     Diff at col(s): {diff_positions[:5]}"
                    f"{'...' if len(diff_positions) > 5 else ''}"
                )

        prev_shown = i

    return "\n".join(output)


class BlockInspector:
    """
    Utilities for inspecting a rendered tree.

    Rows shorter than the widest one are treated as padded with spaces.
    """

    def __init__(self, rendered: str):
        """
        Initialize the inspector.

        Args:
            rendered: Output of a render call
        """
        self.rows: List[str] = rendered.split("\n") if rendered else []
        self.width = max((len(row) for row in self.rows), default=0)
        self.height = len(self.rows)

    def get(self, x: int, y: int) -> str:
        """Get character at position (x, y); space when out of range."""
        if 0 <= y < self.height and 0 <= x < len(self.rows[y]):
            return self.rows[y][x]
        return " "

    def find_char(self, char: str) -> List[Tuple[int, int]]:
        """
        Find all positions of a specific character.

        Returns:
            List of (x, y) tuples, row by row
        """
        positions = []
        for y, row in enumerate(self.rows):
            for x, c in enumerate(row):
                if c == char:
                    positions.append((x, y))
        return positions

    def count_char(self, char: str) -> int:
        """Count occurrences of a character."""
        return len(self.find_char(char))

    def get_row(self, y: int) -> str:
        """Get a single row padded to the block width."""
        if 0 <= y < self.height:
            return self.rows[y].ljust(self.width)
        return ""

    def get_column(self, x: int) -> str:
        """Get a single column as a string."""
        if 0 <= x < self.width:
            return "".join(self.get(x, y) for y in range(self.height))
        return ""

    def get_region(self, x: int, y: int, width: int, height: int) -> str:
        """
        Get a rectangular region of the block.

        Args:
            x: Left edge X coordinate
            y: Top edge Y coordinate
            width: Width of region
            height: Height of region

        Returns:
            Multi-line string of the region
        """
        lines = []
        for row in range(y, y + height):
            lines.append("".join(self.get(col, row) for col in range(x, x + width)))
        return "\n".join(lines)

    def label_center(self, y: int) -> int:
        """Column of the middle of the non-blank text on row y."""
        return middle_label_pos(self.rows[y])

    def get_branch_chars_count(self) -> Dict[str, int]:
        """
        Count the branch glyphs in the block.

        Returns:
            Dictionary mapping glyph to count, omitting absent glyphs
        """
        counts = {}
        for char in BRANCH_CHARS.values():
            count = self.count_char(char)
            if count > 0:
                counts[char] = count
        return counts
