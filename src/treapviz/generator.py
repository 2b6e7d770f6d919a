"""
Main tree printer module.

Combines projection and layout to turn a treap (or any binary tree whose
nodes carry a key, priority and value) into multi-line text.
"""

from typing import Any, Hashable, Optional, Union

import networkx as nx

from .export import TreeExporter
from .geometry import to_lines
from .labels import LabelFn, compact_show_node, resolve_label_fn
from .layout import BlockLayout
from .models import BinTree
from .projection import from_networkx, to_bin_tree, tree_height, tree_size
from .tracer import RenderTrace


class TreePrinter:
    """
    Render binary trees as text.

    Example:
        >>> printer = TreePrinter(label_format="verbose")
        >>> root = TreapNode(5, 1, "a", left=TreapNode(2, 3, "b"))
        >>> print(printer.render(root))

    Debug Mode Example:
        >>> text = printer.render(root, debug=True)
        >>> print(printer.get_trace().summary())
    """

    def __init__(
        self,
        label_format: Union[str, LabelFn] = "compact",
        font: Optional[str] = None,
    ):
        """
        Initialize the printer.

        Args:
            label_format: "compact", "verbose" or a function
                          (key, priority, value) -> single-line label
            font: Font name for PNG output (e.g., "DejaVu Sans Mono")

        Raises:
            ValueError: If label_format is neither a preset nor callable
        """
        self.label_fn = resolve_label_fn(label_format)
        self.label_format = (
            label_format if isinstance(label_format, str) else "custom"
        )
        self.font = font
        self.exporter = TreeExporter(default_font=font)
        self._trace: Optional[RenderTrace] = None

    def render(self, tree: Any, debug: bool = False) -> str:
        """
        Render a node-based tree.

        Args:
            tree: Root node exposing key, priority, value, left and right,
                  or None for an empty tree
            debug: Capture a RenderTrace, retrievable with get_trace()

        Returns:
            The rendered tree; "" for an empty tree
        """
        return self.render_bin_tree(to_bin_tree(tree, self.label_fn), debug=debug)

    def render_networkx(
        self, graph: nx.DiGraph, root: Hashable, debug: bool = False
    ) -> str:
        """
        Render a networkx graph whose child edges carry side="left"/"right".

        Raises:
            ProjectionError: If the graph is not a valid binary tree shape
        """
        return self.render_bin_tree(
            from_networkx(graph, root, self.label_fn), debug=debug
        )

    def render_bin_tree(self, tree: BinTree, debug: bool = False) -> str:
        """Render an already projected tree."""
        trace = RenderTrace(label_format=self.label_format) if debug else None

        if trace is not None:
            trace.add_stage(
                "project",
                {"nodes": tree_size(tree), "height": tree_height(tree)},
            )

        lines = BlockLayout(trace).layout(tree)

        if trace is not None:
            trace.add_stage(
                "layout",
                {
                    "lines": len(lines),
                    "width": max((len(line) for line in lines), default=0),
                },
                lines,
            )

        self._trace = trace
        return to_lines(lines)

    def get_trace(self) -> Optional[RenderTrace]:
        """Trace of the last render made with debug=True, else None."""
        return self._trace

    def save_txt(self, tree: Any, filename: str) -> None:
        """
        Render a tree and save it to a text file.

        Args:
            tree: Root node, or None for an empty tree
            filename: Output filename (should end in .txt)
        """
        self.exporter.save_txt(self.render(tree), filename)

    def save_png(
        self,
        tree: Any,
        filename: str,
        font_size: int = 16,
        bg_color: str = "#FFFFFF",
        fg_color: str = "#000000",
        padding: int = 20,
        font: Optional[str] = None,
        scale: int = 2,
    ) -> None:
        """
        Render a tree and save it as a PNG image.

        See TreeExporter.save_png for the meaning of the styling arguments.
        """
        self.exporter.save_png(
            self.render(tree),
            filename,
            font_size=font_size,
            bg_color=bg_color,
            fg_color=fg_color,
            padding=padding,
            font=font,
            scale=scale,
        )


def render(tree: Any, label_fn: Union[str, LabelFn] = "compact") -> str:
    """Render a node-based tree with a preset name or label function."""
    return TreePrinter(label_format=label_fn).render(tree)


def pretty(tree: Any) -> str:
    """Render a node-based tree with compact labels."""
    return pretty_with(compact_show_node, tree)


def pretty_with(label_fn: LabelFn, tree: Any) -> str:
    """Render a node-based tree using the given label function."""
    return to_lines(BlockLayout().layout(to_bin_tree(tree, label_fn)))
