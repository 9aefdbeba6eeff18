"""Binary search tree keyed by integers, with ordered-symbol-table operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

__all__ = [
    "BSTNode",
    "ParentLinkedNode",
    "find",
    "find_with_loop",
    "insert",
    "insert_with_loop",
    "pre_order",
    "pre_order_with_loop",
    "in_order",
    "in_order_with_loop",
    "post_order",
    "post_order_with_loop",
    "post_order_one_stack",
    "find_min",
    "find_max",
    "delete_key",
    "delete_key_with_loop",
    "delete_min",
    "tree_size",
    "floor",
    "ceiling",
    "select",
    "rank",
    "successor",
]


@dataclass(eq=False, repr=False)
class BSTNode:
    """Node of a binary search tree mapping ``key`` to ``value``."""

    key: int
    value: int
    left: BSTNode | None = None
    right: BSTNode | None = None

    def __repr__(self) -> str:
        return f"BSTNode(key={self.key!r}, value={self.value!r})"


@dataclass(eq=False, repr=False)
class ParentLinkedNode:
    """Binary search tree node that also links to its parent."""

    key: int
    value: int
    left: ParentLinkedNode | None = None
    right: ParentLinkedNode | None = None
    parent: ParentLinkedNode | None = None

    def __repr__(self) -> str:
        return f"ParentLinkedNode(key={self.key!r}, value={self.value!r})"


Entry = tuple[int, int]


def find(tree: BSTNode | None, key: int) -> BSTNode | None:
    """The node holding ``key``, or None."""
    if tree is None:
        return None
    if tree.key == key:
        return tree
    if tree.key < key:
        return find(tree.right, key)
    return find(tree.left, key)


def find_with_loop(tree: BSTNode | None, key: int) -> BSTNode | None:
    """Iterative form of :func:`find`."""
    current = tree
    while current is not None and current.key != key:
        current = current.right if current.key < key else current.left
    return current


def insert(tree: BSTNode | None, key: int, value: int) -> BSTNode:
    """Insert or update ``key``; returns the (possibly new) root."""
    if tree is None:
        return BSTNode(key, value)
    if tree.key == key:
        tree.value = value
    elif tree.key < key:
        tree.right = insert(tree.right, key, value)
    else:
        tree.left = insert(tree.left, key, value)
    return tree


def insert_with_loop(tree: BSTNode | None, key: int, value: int) -> BSTNode:
    """Iterative form of :func:`insert`; returns the root."""
    if tree is None:
        return BSTNode(key, value)
    current = tree
    while current.key != key:
        if current.key < key:
            if current.right is None:
                current.right = BSTNode(key, value)
                return tree
            current = current.right
        else:
            if current.left is None:
                current.left = BSTNode(key, value)
                return tree
            current = current.left
    current.value = value
    return tree


def pre_order(tree: BSTNode | None) -> Iterator[Entry]:
    """Yield ``(key, value)`` in root, left, right order."""
    if tree is None:
        return
    yield tree.key, tree.value
    yield from pre_order(tree.left)
    yield from pre_order(tree.right)


def pre_order_with_loop(tree: BSTNode | None) -> Iterator[Entry]:
    """Stack-based pre-order traversal."""
    if tree is None:
        return
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node.key, node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def in_order(tree: BSTNode | None) -> Iterator[Entry]:
    """Yield ``(key, value)`` in ascending key order."""
    if tree is None:
        return
    yield from in_order(tree.left)
    yield tree.key, tree.value
    yield from in_order(tree.right)


def in_order_with_loop(tree: BSTNode | None) -> Iterator[Entry]:
    """Stack-based in-order traversal."""
    stack: list[BSTNode] = []
    current = tree
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            yield current.key, current.value
            current = current.right


def post_order(tree: BSTNode | None) -> Iterator[Entry]:
    """Yield ``(key, value)`` in left, right, root order."""
    if tree is None:
        return
    yield from post_order(tree.left)
    yield from post_order(tree.right)
    yield tree.key, tree.value


def post_order_with_loop(tree: BSTNode | None) -> Iterator[Entry]:
    """Post-order traversal using two stacks."""
    if tree is None:
        return
    stack = [tree]
    result: list[BSTNode] = []
    while stack:
        node = stack.pop()
        result.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    for node in reversed(result):
        yield node.key, node.value


def post_order_one_stack(tree: BSTNode | None) -> Iterator[Entry]:
    """Post-order traversal using a single stack and the last emitted node."""
    if tree is None:
        return
    stack = [tree]
    last = tree
    while stack:
        top = stack[-1]
        if top.left is not None and top.left is not last and top.right is not last:
            stack.append(top.left)
        elif top.right is not None and top.right is not last:
            stack.append(top.right)
        else:
            node = stack.pop()
            yield node.key, node.value
            last = top


def find_min(tree: BSTNode | None) -> BSTNode | None:
    """The node with the smallest key, or None for an empty tree."""
    if tree is None:
        return None
    while tree.left is not None:
        tree = tree.left
    return tree


def find_max(tree: BSTNode | None) -> BSTNode | None:
    """The node with the largest key, or None for an empty tree."""
    if tree is None:
        return None
    while tree.right is not None:
        tree = tree.right
    return tree


def _detach_successor(node: BSTNode) -> BSTNode:
    """Unlink the in-order successor of ``node`` (which has two children).

    When the successor is deeper than ``node.right`` it takes over
    ``node.right`` as its own right subtree.
    """
    parent = node
    succ = node.right
    assert succ is not None
    while succ.left is not None:
        parent, succ = succ, succ.left
    if succ is not node.right:
        parent.left = succ.right
        succ.right = node.right
    return succ


def delete_key(tree: BSTNode | None, key: int) -> BSTNode | None:
    """Remove ``key`` (Hibbard deletion); returns the new root."""
    if tree is None:
        return None
    if key < tree.key:
        tree.left = delete_key(tree.left, key)
        return tree
    if key > tree.key:
        tree.right = delete_key(tree.right, key)
        return tree
    if tree.left is None:
        return tree.right
    if tree.right is None:
        return tree.left
    succ = _detach_successor(tree)
    succ.left = tree.left
    return succ


def delete_key_with_loop(
    tree: BSTNode | None, key: int
) -> tuple[BSTNode | None, bool]:
    """Iterative deletion; returns ``(new_root, whether key was present)``."""
    parent: BSTNode | None = None
    current = tree
    while current is not None and current.key != key:
        parent = current
        current = current.left if key < current.key else current.right
    if current is None:
        return tree, False

    if current.left is None:
        replacement = current.right
    elif current.right is None:
        replacement = current.left
    else:
        replacement = _detach_successor(current)
        replacement.left = current.left

    if parent is None:
        return replacement, True
    if parent.left is current:
        parent.left = replacement
    else:
        parent.right = replacement
    return tree, True


def delete_min(tree: BSTNode | None) -> BSTNode | None:
    """Remove the smallest key; returns the new root."""
    if tree is None:
        return None
    if tree.left is None:
        return tree.right
    tree.left = delete_min(tree.left)
    return tree


def tree_size(tree: BSTNode | None) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return tree_size(tree.left) + tree_size(tree.right) + 1


def floor(tree: BSTNode | None, key: int) -> BSTNode | None:
    """The node with the largest key not above ``key``, or None."""
    if tree is None:
        return None
    if key < tree.key:
        return floor(tree.left, key)
    if tree.key < key:
        found = floor(tree.right, key)
        return tree if found is None else found
    return tree


def ceiling(tree: BSTNode | None, key: int) -> BSTNode | None:
    """The node with the smallest key not below ``key``, or None."""
    if tree is None:
        return None
    if tree.key == key:
        return tree
    if tree.key < key:
        return ceiling(tree.right, key)
    found = ceiling(tree.left, key)
    return tree if found is None else found


def select(tree: BSTNode | None, k: int) -> BSTNode:
    """The node whose key has exactly ``k`` smaller keys (0-based)."""
    if not 0 <= k < tree_size(tree):
        raise IndexError(f"rank {k} out of range")
    node = tree
    while node is not None:
        size = tree_size(node.left)
        if size > k:
            node = node.left
        elif size < k:
            k -= size + 1
            node = node.right
        else:
            return node
    raise IndexError(f"rank {k} out of range")


def rank(tree: BSTNode | None, key: int) -> int:
    """Number of keys in the tree strictly less than ``key``."""
    if tree is None:
        return 0
    if tree.key == key:
        return tree_size(tree.left)
    if tree.key > key:
        return rank(tree.left, key)
    return 1 + tree_size(tree.left) + rank(tree.right, key)


def successor(node: ParentLinkedNode) -> ParentLinkedNode | None:
    """The in-order successor of ``node``, or None when it holds the largest key."""
    if node.right is not None:
        current = node.right
        while current.left is not None:
            current = current.left
        return current
    current = node
    parent = node.parent
    while parent is not None and parent.left is not current:
        current = parent
        parent = parent.parent
    return parent