"""OwnedTreeLib - Generic in-memory N-ary trees.

OwnedTreeLib provides a small tree container where every parent owns an
ordered list of children, plus the operations you usually want on it:

━━━━━━━━━━━━━━━━━━━━━━━━━━
Build:
    from ownedtreelib import build_tree, node, TreeBuilder

Walk:
    from ownedtreelib import dfs, bfs, traverse_tree

Transform:
    from ownedtreelib import map_tree, filter_tree
━━━━━━━━━━━━━━━━━━━━━━━━━━

The library never prints. It logs at DEBUG level under the
``ownedtreelib`` logger, which is silent unless the application
configures logging.
"""

import logging

__version__ = "0.1.0"

from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_strategy,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig
from .errors import (
    TreeLibError,
    InvalidNodeError,
    UnknownStrategyError,
    InvalidConfigurationError,
)
from .builder import build_tree, node, TreeBuilder
from .api import (
    add_child,
    dfs,
    bfs,
    map_tree,
    filter_tree,
    traverse_tree,
    collect_values,
    count_nodes,
    tree_height,
    get_leaf_values,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Node",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_strategy",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    # Errors
    "TreeLibError",
    "InvalidNodeError",
    "UnknownStrategyError",
    "InvalidConfigurationError",
    # Builder
    "build_tree",
    "node",
    "TreeBuilder",
    # API
    "add_child",
    "dfs",
    "bfs",
    "map_tree",
    "filter_tree",
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "tree_height",
    "get_leaf_values",
    "get_tree_stats",
]
