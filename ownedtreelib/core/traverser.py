"""Tree traversal strategies for OwnedTreeLib.

Traversers implement different algorithms for walking through a tree of
Nodes. They yield ``(node, depth)`` tuples with the root at depth 0.

No visited set is kept: values may repeat freely and a correctly built
tree never reaches the same node twice. A structure with a cycle in it
is not a tree and traversing it does not terminate.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .._common.config import DepthConfig, TraversalStrategy
from ..errors import UnknownStrategyError
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def walk(self, root: Node, depth: Optional[DepthConfig] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse using a DepthConfig instead of separate bounds."""
        depth = depth or DepthConfig()
        return self.traverse(root, max_depth=depth.max_depth, min_depth=depth.min_depth)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree breadth-first using a FIFO queue seeded with root."""
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in insertion order.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree depth-first, pre-order.

        Uses an explicit stack, so very deep trees do not run into the
        interpreter's recursion limit.
        """
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                # Reversed so the first child is popped first
                for child in reversed(node.children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for aggregating values
    bottom-up (subtree sizes, heights).
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree depth-first, post-order.

        Each stack entry carries a flag telling whether the node's
        children have already been pushed.
        """
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if window.should_yield(depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if window.should_explore(depth):
                for child in reversed(node.children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields nodes in the same order as BreadthFirstTraverser but builds
    each level completely before moving on, which ``levels`` exposes.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree level by level."""
        for depth, level in enumerate(self._iter_levels(root, max_depth)):
            if depth < min_depth:
                continue
            for node in level:
                yield (node, depth)

    def levels(self, root: Node, max_depth: Optional[int] = None) -> List[List[Node]]:
        """Return the nodes of each level, root level first.

        Args:
            root: Starting node
            max_depth: Deepest level to include (None = all)

        Returns:
            List where entry d holds the nodes at depth d, left to right
        """
        return list(self._iter_levels(root, max_depth))

    def _iter_levels(self, root: Node, max_depth: Optional[int]) -> Iterator[List[Node]]:
        current_level: List[Node] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            yield current_level
            current_level = [child for node in current_level for child in node.children]
            current_depth += 1


_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}

# Accepted names: each strategy's value plus a long form
_STRATEGY_NAMES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy name to its TraversalStrategy member.

    Args:
        strategy: TraversalStrategy member or one of its names
            (bfs, dfs_pre, dfs_post, level and their long forms),
            case-insensitive

    Returns:
        The matching TraversalStrategy

    Raises:
        UnknownStrategyError: If strategy is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    key = str(strategy).lower()
    if key not in _STRATEGY_NAMES:
        raise UnknownStrategyError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_NAMES.keys())}"
        )
    return _STRATEGY_NAMES[key]


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or one of its names

    Returns:
        TreeTraverser instance

    Raises:
        UnknownStrategyError: If strategy is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()
