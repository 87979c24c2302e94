import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.avl import AVLNode, AVLTree


def _check_subtree(node):
    """Return the subtree height after asserting AVL invariants."""
    if node is None:
        return 0
    left = _check_subtree(node.left)
    right = _check_subtree(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    return node.height


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_worked_example_inorder():
    keys = [9, 5, 10, 0, 6, 11, -1, 1, 2]
    tree = _build(keys)
    assert tree.inorder() == sorted(keys)
    assert len(tree) == len(keys)


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert len(tree) == 0
    assert 5 not in tree


def test_single_node_height():
    tree = _build([42])
    assert tree.height() == 1
    assert tree.root == AVLNode(42)


def test_duplicates_are_ignored():
    tree = _build([3, 3, 1, 3, 1])
    assert tree.inorder() == [1, 3]
    assert len(tree) == 2


@pytest.mark.parametrize("keys", [list(range(50)), list(range(50, 0, -1))])
def test_sorted_insertions_stay_balanced(keys):
    tree = _build(keys)
    assert _check_subtree(tree.root) == tree.height()
    assert tree.height() <= 1.45 * math.log2(len(keys) + 2)


def test_contains():
    tree = _build([9, 5, 10, 0, 6])
    assert 6 in tree
    assert 7 not in tree


@given(st.lists(st.integers(-1000, 1000)))
def test_invariants_hold(keys):
    tree = _build(keys)
    assert list(tree) == sorted(set(keys))
    assert len(tree) == len(set(keys))
    assert _check_subtree(tree.root) == tree.height()
    assert all(key in tree for key in keys)