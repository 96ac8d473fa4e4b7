"""Node abstraction for OwnedTreeLib.

A Node is a value plus an ordered list of children it exclusively owns.
There are no parent links: a node reaches its descendants only, which
keeps the structure a strict tree as long as callers never attach a node
to one of its own descendants.

The structure-preserving transforms live here too. Both build brand new
trees: the input is never modified and no node of the result is shared
with it. Everything walks with explicit stacks, so depth is bounded by
memory rather than by the interpreter's recursion limit.
"""

import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from ..errors import InvalidNodeError

T = TypeVar('T')
R = TypeVar('R')

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """One vertex of an N-ary tree.

    The child list is append-only through the public API and its order
    determines traversal order. Two nodes are equal when their values are
    equal and their children are pairwise equal in the same order.

    Nodes are not thread-safe for mutation. Concurrent read-only
    traversal is fine as long as nobody calls ``add_child`` meanwhile.
    """

    __slots__ = ('value', 'children')

    def __init__(self, value: T, children: Optional[Iterable['Node[T]']] = None):
        """Create a node owning ``value``.

        Args:
            value: The payload
            children: Optional initial children, copied into a fresh list
        """
        self.value = value
        self.children: List['Node[T]'] = []
        if children is not None:
            for child in children:
                self.add_child(child)

    def add_child(self, child: 'Node[T]') -> 'Node[T]':
        """Append ``child`` as the last child of this node.

        Args:
            child: Node (with its whole subtree) to attach

        Returns:
            The attached child, so builders can keep working on it

        Raises:
            InvalidNodeError: If ``child`` is not a Node
        """
        if not isinstance(child, Node):
            raise InvalidNodeError(
                f"Children must be Node instances, got {type(child).__name__}"
            )
        self.children.append(child)
        return child

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def map(self, transform: Callable[[T], R]) -> 'Node[R]':
        """Return a new tree with every value replaced by ``transform(value)``."""
        return map_tree(self, transform)

    def filter(self, predicate: Callable[[T], bool]) -> Optional['Node[T]']:
        """Return a filtered copy of this tree, or None if this node is rejected."""
        return filter_tree(self, predicate)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented

        pending: List[Tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.value != right.value or len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r}, children={len(self.children)})"


def map_tree(root: Node[T], transform: Callable[[T], R]) -> Node[R]:
    """Apply ``transform`` to every value, keeping the shape intact.

    ``transform`` is called parent first, children in order (pre-order).
    Each mapped child is attached to its new parent only once its own
    subtree is complete.

    Args:
        root: Root of the tree to map
        transform: Function applied to each value

    Returns:
        Root of the new tree
    """
    return _rebuild(root, lambda value: (True, transform(value)))


def filter_tree(root: Node[T], predicate: Callable[[T], bool]) -> Optional[Node[T]]:
    """Keep the nodes whose values satisfy ``predicate``.

    A rejected node takes its whole subtree with it: its descendants are
    dropped without being tested, they are never promoted to the rejected
    node's parent.

    Args:
        root: Root of the tree to filter
        predicate: Test applied to each value, parents first

    Returns:
        Root of the filtered copy, or None if ``root`` itself is rejected
    """
    def keep(value):
        if predicate(value):
            return True, value
        logger.debug("Dropping subtree rooted at %r", value)
        return False, None

    return _rebuild(root, keep)


def _rebuild(root: Node, visit: Callable[[Any], Tuple[bool, Any]]) -> Optional[Node]:
    """Copy the tree, replacing or dropping values as ``visit`` decides.

    ``visit`` is called in pre-order and returns ``(keep, new_value)``;
    a dropped node's subtree is never visited. Stack entries are
    ``(source, copy, parent_copy)``; ``copy`` is None until the source
    has been visited, and a finished copy is appended to ``parent_copy``.
    """
    built: Optional[Node] = None
    stack: List[Tuple[Node, Optional[Node], Optional[Node]]] = [(root, None, None)]

    while stack:
        source, copy, parent = stack.pop()

        if copy is not None:
            if parent is None:
                built = copy
            else:
                parent.add_child(copy)
            continue

        keep, value = visit(source.value)
        if not keep:
            continue
        copy = Node(value)
        stack.append((source, copy, parent))
        stack.extend((child, None, copy) for child in reversed(source.children))

    return built
