"""Binary tree node and conversion to and from level-order lists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable

__all__ = ["TreeNode", "build_tree", "tree_to_list"]


@dataclass
class TreeNode:
    """Node of a binary tree of integers; equality compares whole subtrees."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order list where None marks a missing child.

    Raises ValueError when values remain that no node can take as a child.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        if any(value is not None for value in items):
            raise ValueError("values follow an empty root")
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    if any(value is not None for value in items):
        raise ValueError("values left over with no parent node")
    return root


def tree_to_list(root: TreeNode | None) -> list[int | None]:
    """Level-order list of a tree, the inverse of :func:`build_tree`."""
    result: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result