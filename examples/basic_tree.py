#!/usr/bin/env python3
"""
Basic tree building and traversal.

This example demonstrates:
- Building a tree with the callback builder and with TreeBuilder
- Depth-first and breadth-first traversal
- Mapping values and filtering subtrees
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from ownedtreelib import Node, TreeBuilder, bfs, build_tree, dfs, node


def build_sample():
    """Build A -> [B -> [D, E], C -> [F, G]]."""
    return build_tree("A", lambda a: (
        a.add_child(node("B", lambda b: (
            b.add_child(Node("D")),
            b.add_child(Node("E")),
        ))),
        a.add_child(node("C", lambda c: (
            c.add_child(Node("F")),
            c.add_child(Node("G")),
        ))),
    ))


def build_sample_with_builder():
    """Same tree as build_sample, built with TreeBuilder."""
    builder = TreeBuilder("A")
    with builder.child("B") as b:
        b.leaf("D").leaf("E")
    with builder.child("C") as c:
        c.leaf("F").leaf("G")
    return builder.build()


def print_value(n):
    print(n.value)


def main():
    tree = build_sample()
    assert tree == build_sample_with_builder()

    print("Depth-First Search:")
    dfs(tree, print_value)

    print("\nBreadth-First Search:")
    bfs(tree, print_value)

    print("\nTransformed Structure:")
    dfs(tree.map(str.lower), print_value)

    print("\nFiltered Structure:")
    filtered = tree.filter(lambda value: value != "B")
    if filtered is not None:
        dfs(filtered, print_value)


if __name__ == "__main__":
    main()
