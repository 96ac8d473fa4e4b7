"""Declarative tree construction for OwnedTreeLib.

Two styles are supported, both eager: every node is attached the moment
the corresponding call is made, and the finished root is returned before
control goes back to the caller.

Callback style, the node under construction is passed in explicitly::

    tree = build_tree("A", lambda a: (
        a.add_child(node("B", lambda b: (b.add_child(Node("D")), b.add_child(Node("E"))))),
        a.add_child(node("C")),
    ))

Builder-object style, with context managers for nesting::

    builder = TreeBuilder("A")
    with builder.child("B") as b:
        b.leaf("D").leaf("E")
    builder.leaf("C")
    tree = builder.build()
"""

import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from .core.node import Node

T = TypeVar('T')

logger = logging.getLogger(__name__)

Construct = Callable[[Node[T]], Any]


def node(value: T, construct: Optional[Construct] = None) -> Node[T]:
    """Create a node and populate it with ``construct``.

    Args:
        value: Value of the new node
        construct: Called once, immediately, with the new node; its
            return value is ignored

    Returns:
        The populated node
    """
    created = Node(value)
    if construct is not None:
        construct(created)
    return created


def build_tree(root_value: T, construct: Optional[Construct] = None) -> Node[T]:
    """Build a whole tree from a root value and a construction procedure.

    Args:
        root_value: Value of the root node
        construct: Procedure receiving the root; may call ``add_child``
            directly or attach children made with nested ``node`` calls

    Returns:
        The fully built root
    """
    root = node(root_value, construct)
    logger.debug("Built tree rooted at %r with %d direct children",
                 root.value, len(root.children))
    return root


class TreeBuilder(Generic[T]):
    """Explicit builder object bound to one node under construction.

    ``child`` attaches a new node immediately and hands out a builder
    for it. Using that builder in a ``with`` block only groups the
    nested calls visually: entering and leaving the block attach
    nothing and do not finalize anything.
    """

    def __init__(self, value: Optional[T] = None, target: Optional[Node[T]] = None):
        """Start building.

        Args:
            value: Value of a fresh root node (ignored when target is given)
            target: Existing node to populate instead of creating one
        """
        self._node: Node[T] = target if target is not None else Node(value)

    @property
    def node(self) -> Node[T]:
        """The node this builder populates."""
        return self._node

    def leaf(self, value: T) -> 'TreeBuilder[T]':
        """Attach a childless node and return this builder for chaining."""
        self._node.add_child(Node(value))
        return self

    def child(self, value: T) -> 'TreeBuilder[T]':
        """Attach a new node and return a builder for it."""
        return TreeBuilder(target=self._node.add_child(Node(value)))

    def attach(self, subtree: Node[T]) -> 'TreeBuilder[T]':
        """Attach an existing subtree and return this builder for chaining."""
        self._node.add_child(subtree)
        return self

    def build(self) -> Node[T]:
        """Return the node this builder populated."""
        return self._node

    def __enter__(self) -> 'TreeBuilder[T]':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # Exceptions from the block propagate
        return None
