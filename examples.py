#!/usr/bin/env python3
"""
Examples of using treapviz.

Run this file to print a few treaps and save them as text and PNG files.
"""

import networkx as nx

from treapviz import TreapNode, TreePrinter, pretty


def example_small():
    """Three node treap with compact labels"""
    print("Example 1: Small Treap")

    root = TreapNode(2, 1, "b", left=TreapNode(1, 4, "a"), right=TreapNode(3, 7, "c"))

    print(pretty(root))
    print()


def example_verbose():
    """Same shape, verbose labels, saved as PNG"""
    print("Example 2: Verbose Labels")

    root = TreapNode(
        5, 1, "e",
        left=TreapNode(3, 2, "c", left=TreapNode(1, 5, "a")),
        right=TreapNode(8, 3, "h", right=TreapNode(9, 8, "i")),
    )

    printer = TreePrinter(label_format="verbose")
    print(printer.render(root))
    printer.save_png(root, "example_verbose.png", scale=2)
    print("  Saved: example_verbose.png\n")


def example_custom_labels():
    """Keys only, via a custom label function"""
    print("Example 3: Custom Labels")

    root = TreapNode(
        "m", 1, None,
        left=TreapNode("f", 2, None, right=TreapNode("h", 6, None)),
        right=TreapNode("t", 4, None, left=TreapNode("p", 5, None)),
    )

    printer = TreePrinter(label_format=lambda key, priority, value: str(key))
    print(printer.render(root))
    printer.save_txt(root, "example_keys.txt")
    print("  Saved: example_keys.txt\n")


def example_networkx():
    """Tree stored as a networkx graph"""
    print("Example 4: networkx Source")

    graph = nx.DiGraph()
    graph.add_node("root", key=10, priority=0, value="x")
    graph.add_node("l", key=4, priority=3, value="y")
    graph.add_node("r", key=17, priority=2, value="z")
    graph.add_edge("root", "l", side="left")
    graph.add_edge("root", "r", side="right")

    print(TreePrinter().render_networkx(graph, "root"))
    print()


def example_debug():
    """Trace of the layout decisions"""
    print("Example 5: Debug Trace")

    root = TreapNode(2, 1, "b", left=TreapNode(1, 4, "a"))

    printer = TreePrinter()
    printer.render(root, debug=True)
    print(printer.get_trace().summary())
    print()


def main():
    """Run all examples."""
    print("=" * 50)
    print("treapviz Examples")
    print("=" * 50)
    print()

    example_small()
    example_verbose()
    example_custom_labels()
    example_networkx()
    example_debug()

    print("=" * 50)
    print("All examples generated!")
    print("=" * 50)


if __name__ == "__main__":
    main()
