"""Common components shared across OwnedTreeLib.

This internal package contains configuration classes that both the core
traversers and the high-level API depend on. It should NOT be imported
directly by users.

Important: This package must NEVER import from core or api to avoid
circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
]
