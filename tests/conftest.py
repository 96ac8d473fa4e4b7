"""Shared fixtures for OwnedTreeLib tests."""

import random

import pytest

from ownedtreelib import Node


def create_sample_tree() -> Node:
    """Create the reference tree.

    Structure:
    A
    ├── B
    │   ├── D
    │   └── E
    └── C
        ├── F
        └── G
    """
    return Node("A", [
        Node("B", [Node("D"), Node("E")]),
        Node("C", [Node("F"), Node("G")]),
    ])


def create_random_tree(seed: int, size: int = 40, max_children: int = 4) -> Node:
    """Create a random tree with ``size`` integer-valued nodes.

    Values are drawn from a small range on purpose so duplicates occur.
    """
    rng = random.Random(seed)
    root = Node(rng.randint(0, 9))
    open_nodes = [root]
    created = 1
    while created < size:
        parent = rng.choice(open_nodes)
        child = parent.add_child(Node(rng.randint(0, 9)))
        created += 1
        open_nodes.append(child)
        if len(parent.children) >= max_children:
            open_nodes.remove(parent)
    return root


def create_chain(length: int) -> Node:
    """Create a single-branch tree 0 -> 1 -> ... -> length - 1."""
    root = Node(0)
    current = root
    for i in range(1, length):
        current = current.add_child(Node(i))
    return root


@pytest.fixture
def sample_tree():
    return create_sample_tree()


@pytest.fixture(params=range(8))
def random_tree(request):
    return create_random_tree(seed=request.param)
