"""Exceptions raised by OwnedTreeLib.

The tree operations themselves have no failure modes: ``filter_tree``
signals a rejected root with ``None``, which is an expected outcome and
not an error. These exceptions only cover misuse of the library surface.
"""

from typing import List


class TreeLibError(Exception):
    """Base class for all OwnedTreeLib errors."""
    pass


class InvalidNodeError(TreeLibError, TypeError):
    """Raised when something other than a Node is attached as a child."""
    pass


class UnknownStrategyError(TreeLibError, ValueError):
    """Raised when a traversal strategy name is not recognized."""
    pass


class InvalidConfigurationError(TreeLibError, ValueError):
    """Raised when a TraversalConfig fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
