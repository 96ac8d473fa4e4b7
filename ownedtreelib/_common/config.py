"""Configuration system for OwnedTreeLib.

This module defines how users specify their traversal requirements:
which order to walk the tree in and which depths to yield.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth (root = 0)

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for tree traversal.

    Passed to ``traverse_tree`` (or built from its keyword arguments) and
    checked with ``validate()`` before any node is visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)

    @classmethod
    def pre_order(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a depth-first, parent-first walk."""
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_PRE,
            depth=DepthConfig(max_depth=max_depth)
        )

    @classmethod
    def level_order(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a breadth-first walk."""
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth)
        )

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for shallow scanning.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls.level_order(max_depth=max_depth)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        return errors
