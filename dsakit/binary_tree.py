"""Plain binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class TreeNode:
    """A binary tree node holding arbitrary data."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield data node, left subtree, right subtree."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def inorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield data left subtree, node, right subtree."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.data
        current = current.right


def postorder(node: TreeNode | None) -> Iterator[Any]:
    """Yield data left subtree, right subtree, node."""
    stack: list[tuple[TreeNode, bool]] = [(node, False)] if node is not None else []
    while stack:
        current, visited = stack.pop()
        if visited:
            yield current.data
            continue
        stack.append((current, True))
        if current.right is not None:
            stack.append((current.right, False))
        if current.left is not None:
            stack.append((current.left, False))