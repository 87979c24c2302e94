"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class BSTNode:
    """A tree node holding a key and its two children."""

    key: int
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BinarySearchTree:
    """A binary search tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None
        self._size = 0

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        new = BSTNode(key)
        self._size += 1
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, key: int) -> None:
        """Remove one node holding ``key``; a missing key is ignored.

        A node with two children takes the key of its in-order successor,
        which is then removed in its place.
        """
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return
        self._size -= 1

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key = succ.key
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def min(self) -> int:
        """Return the smallest key; raise ``ValueError`` if the tree is empty."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        stack: list[BSTNode] = []
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