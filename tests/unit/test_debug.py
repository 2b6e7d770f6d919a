"""
Tests for the debug module.

These tests verify the debug utilities visual_diff and BlockInspector.
"""

from treapviz import TreePrinter
from treapviz.debug import BlockInspector, visual_diff


class TestVisualDiff:
    """Tests for visual_diff."""

    def test_identical(self):
        result = visual_diff(" B\n╱\nA", " B\n╱\nA")
        assert "No differences found." in result

    def test_shifted_label(self):
        result = visual_diff(" B\n╱\nA", "B\n╱\nA")
        assert "Found 1 differing line(s)" in result
        assert "E | B|" in result
        assert "A |B|" in result
        assert "Diff at col(s): [0, 1]" in result

    def test_extra_line(self):
        result = visual_diff("A", "A\n╲")
        assert "Found 1 differing line(s)" in result
        assert "A |╲|" in result

    def test_context_gap(self):
        expected = "\n".join(["a", "b", "c", "d", "e", "f", "g"])
        actual = "\n".join(["x", "b", "c", "d", "e", "f", "y"])
        result = visual_diff(expected, actual, context_lines=1)
        assert "..." in result


class TestBlockInspector:
    """Tests for BlockInspector."""

    def test_dimensions(self):
        inspector = BlockInspector(" B\n ╱╲\nA C")
        assert inspector.width == 3
        assert inspector.height == 3

    def test_empty(self):
        inspector = BlockInspector("")
        assert inspector.height == 0
        assert inspector.width == 0
        assert inspector.find_char("╱") == []

    def test_get(self):
        inspector = BlockInspector(" B\n ╱╲\nA C")
        assert inspector.get(1, 0) == "B"
        assert inspector.get(2, 0) == " "
        assert inspector.get(10, 10) == " "

    def test_find_and_count(self):
        inspector = BlockInspector(" B\n ╱╲\nA C")
        assert inspector.find_char("╱") == [(1, 1)]
        assert inspector.count_char("╲") == 1

    def test_row_column_region(self):
        inspector = BlockInspector(" B\n ╱╲\nA C")
        assert inspector.get_row(0) == " B "
        assert inspector.get_row(5) == ""
        assert inspector.get_column(1) == "B╱ "
        assert inspector.get_region(0, 1, 2, 2) == " ╱\nA "

    def test_label_center(self):
        inspector = BlockInspector('    2,1:"b"\n       ╱╲')
        assert inspector.label_center(0) == 7

    def test_branch_counts(self, three_node_treap):
        text = TreePrinter().render(three_node_treap)
        assert BlockInspector(text).get_branch_chars_count() == {"╱": 4, "╲": 4}

    def test_branch_counts_omit_absent(self):
        assert BlockInspector(" B\n╱\nA").get_branch_chars_count() == {"╱": 1}
