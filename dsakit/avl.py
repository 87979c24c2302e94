"""Self-balancing AVL search tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class AVLNode:
    """A tree node holding a key and the height of its subtree."""

    key: int
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: AVLNode | None, key: int) -> tuple[AVLNode, bool]:
    """Insert ``key`` below ``node``; return the new subtree root and whether a node was added."""
    if node is None:
        return AVLNode(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and node.left is not None:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), added
    if balance < -1 and node.right is not None:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), added
    return node, added


class AVLTree:
    """An AVL tree; inserting a key already present leaves the tree unchanged."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None
        self._size = 0

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree, rebalancing on the way back up."""
        self.root, added = _insert(self.root, key)
        if added:
            self._size += 1

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self.root)

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False