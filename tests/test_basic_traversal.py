"""Basic tests for dfs and bfs.

Checks the visiting order on the reference tree and the pre-order and
level-order properties on randomly shaped trees.
"""

import pytest

from ownedtreelib import Node, bfs, dfs, count_nodes
from ownedtreelib.core.traverser import BreadthFirstTraverser


def reference_pre_order(node, out):
    """Straightforward recursive pre-order used as an oracle."""
    out.append(node)
    for child in node.children:
        reference_pre_order(child, out)
    return out


def test_dfs_order(sample_tree):
    """DFS visits A, B, D, E, C, F, G."""
    visited = []
    dfs(sample_tree, lambda n: visited.append(n.value))

    assert visited == ["A", "B", "D", "E", "C", "F", "G"]


def test_bfs_order(sample_tree):
    """BFS visits A, B, C, D, E, F, G."""
    visited = []
    bfs(sample_tree, lambda n: visited.append(n.value))

    assert visited == ["A", "B", "C", "D", "E", "F", "G"]


def test_single_node():
    """A leaf visits only itself."""
    for walk in (dfs, bfs):
        visited = []
        walk(Node(42), lambda n: visited.append(n.value))
        assert visited == [42]


def test_dfs_and_bfs_return_none(sample_tree):
    assert dfs(sample_tree, lambda n: None) is None
    assert bfs(sample_tree, lambda n: None) is None


def test_dfs_is_pre_order(random_tree):
    """DFS matches a recursive pre-order and visits every node once."""
    visited = []
    dfs(random_tree, visited.append)

    expected = reference_pre_order(random_tree, [])
    assert [id(n) for n in visited] == [id(n) for n in expected]
    assert len({id(n) for n in visited}) == count_nodes(random_tree)


def test_bfs_is_level_order(random_tree):
    """BFS never goes back to a shallower depth and visits every node once."""
    visited = []
    bfs(random_tree, visited.append)

    depths = [depth for _, depth in BreadthFirstTraverser().traverse(random_tree)]
    assert depths == sorted(depths)
    assert len({id(n) for n in visited}) == len(reference_pre_order(random_tree, []))


def test_bfs_keeps_left_to_right_order(random_tree):
    """Within a level, nodes appear in the order their parents list them."""
    visited = []
    bfs(random_tree, visited.append)

    position = {id(n): i for i, n in enumerate(visited)}
    for parent in visited:
        child_positions = [position[id(c)] for c in parent.children]
        assert child_positions == sorted(child_positions)


def test_visitor_exceptions_propagate(sample_tree):
    """Errors raised by the visitor reach the caller."""
    def boom(n):
        if n.value == "E":
            raise RuntimeError("stop")

    for walk in (dfs, bfs):
        with pytest.raises(RuntimeError, match="stop"):
            walk(sample_tree, boom)
