"""Core building blocks for OwnedTreeLib.

This package contains the Node type, the traversal strategies that walk
it, and the structure-preserving transforms that live beside Node.
"""

from .node import Node, map_tree, filter_tree
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_strategy,
)

__all__ = [
    "Node",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_strategy",
    "map_tree",
    "filter_tree",
]
