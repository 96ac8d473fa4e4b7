"""Configuration re-export.

Public home of the configuration components that live in the
_common package.
"""

from ._common.config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'DepthConfig',
]
