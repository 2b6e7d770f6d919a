"""
treapviz - Binary trees as text

A Python library for drawing treaps and other binary trees with diagonal
branches, each parent centered over its children.

Example:
    >>> from treapviz import TreapNode, pretty
    >>> root = TreapNode(2, 1, "b", left=TreapNode(1, 4, "a"), right=TreapNode(3, 7, "c"))
    >>> print(pretty(root))

Debug Mode Example:
    >>> printer = TreePrinter()
    >>> text = printer.render(root, debug=True)
    >>> trace = printer.get_trace()
    >>> print(trace.summary())
"""

from .debug import BlockInspector, visual_diff
from .export import TreeExporter
from .generator import TreePrinter, pretty, pretty_with, render
from .geometry import BRANCH_CHARS, branch_lines, middle_label_pos
from .labels import LABEL_FORMATS, compact_show_node, show_value, verbose_show_node
from .layout import BlockLayout, layout_lines, show_tree
from .models import EMPTY, BinTree, Branch, Empty, TreapNode
from .projection import ProjectionError, from_networkx, to_bin_tree
from .tracer import LayoutDecision, PipelineStage, RenderTrace

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TreePrinter",
    "render",
    "pretty",
    "pretty_with",
    # Labels
    "LABEL_FORMATS",
    "compact_show_node",
    "show_value",
    "verbose_show_node",
    # Models
    "Empty",
    "Branch",
    "EMPTY",
    "BinTree",
    "TreapNode",
    # Projection
    "to_bin_tree",
    "from_networkx",
    "ProjectionError",
    # Layout
    "BlockLayout",
    "layout_lines",
    "show_tree",
    "middle_label_pos",
    "branch_lines",
    "BRANCH_CHARS",
    # Export
    "TreeExporter",
    # Debug/Tracing (for development and debugging)
    "RenderTrace",
    "PipelineStage",
    "LayoutDecision",
    "BlockInspector",
    "visual_diff",
]
