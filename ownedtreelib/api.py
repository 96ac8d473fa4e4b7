"""High-level API for OwnedTreeLib.

Simple, functional interfaces for common tree operations. These functions
wrap the traverser classes and the Node methods for ease of use.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, TypeVar, Union

from .config import DepthConfig, TraversalConfig, TraversalStrategy
from .core.node import Node, filter_tree, map_tree
from .core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
    parse_strategy,
)
from .errors import InvalidConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)

__all__ = [
    'add_child',
    'dfs',
    'bfs',
    'map_tree',
    'filter_tree',
    'traverse_tree',
    'collect_values',
    'count_nodes',
    'tree_height',
    'get_leaf_values',
    'get_tree_stats',
]


def add_child(parent: Node[T], child: Node[T]) -> Node[T]:
    """Append ``child`` as the last child of ``parent`` and return it."""
    return parent.add_child(child)


def dfs(root: Node[T], action: Callable[[Node[T]], Any]) -> None:
    """Call ``action`` on every node, depth-first, parents before children.

    Example:
        >>> dfs(tree, lambda n: print(n.value))
    """
    for node, _ in DepthFirstPreOrderTraverser().traverse(root):
        action(node)


def bfs(root: Node[T], action: Callable[[Node[T]], Any]) -> None:
    """Call ``action`` on every node, level by level."""
    for node, _ in BreadthFirstTraverser().traverse(root):
        action(node)


def traverse_tree(
    root: Node[T],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    config: Optional[TraversalConfig] = None,
) -> Iterator[Node[T]]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        config: Complete configuration; overrides the other options

    Yields:
        Nodes in the chosen order

    Raises:
        InvalidConfigurationError: If the configuration is inconsistent
        UnknownStrategyError: If the strategy name is not recognized
    """
    if config is None:
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth)
        )

    problems = config.validate()
    if problems:
        raise InvalidConfigurationError(problems)

    traverser = create_traverser(config.strategy)
    logger.debug("Traversing from %r with %s (depth %d..%s)",
                 root.value, config.strategy.value,
                 config.depth.min_depth, config.depth.max_depth)

    return (node for node, _ in traverser.walk(root, config.depth))


def collect_values(
    root: Node[T],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    **kwargs
) -> List[T]:
    """Return node values in traversal order.

    Args:
        root: Starting node
        strategy: Traversal strategy
        **kwargs: Additional traversal options (see traverse_tree)
    """
    return [node.value for node in traverse_tree(root, strategy, **kwargs)]


def count_nodes(root: Node[T]) -> int:
    """Count the nodes in the tree rooted at ``root``."""
    return sum(1 for _ in DepthFirstPreOrderTraverser().traverse(root))


def tree_height(root: Node[T]) -> int:
    """Return the depth of the deepest node; a lone root has height 0."""
    return max(depth for _, depth in DepthFirstPreOrderTraverser().traverse(root))


def get_leaf_values(root: Node[T]) -> List[T]:
    """Return the values of all leaves, left to right."""
    return [
        node.value
        for node, _ in DepthFirstPreOrderTraverser().traverse(root)
        if node.is_leaf()
    ]


def get_tree_stats(root: Node[T]) -> Dict[str, int]:
    """Get statistics about a tree.

    Walks the tree once, post-order.

    Returns:
        Dictionary with total_nodes, leaf_nodes, max_depth, max_branching
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'max_branching': 0,
    }

    for node, depth in DepthFirstPostOrderTraverser().traverse(root):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['max_branching'] = max(stats['max_branching'], len(node.children))

    return stats
