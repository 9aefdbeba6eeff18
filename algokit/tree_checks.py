"""Predicates and aggregate measurements over binary trees."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterator

from algokit.tree_node import TreeNode
from algokit.tree_traversal import inorder_traversal

__all__ = [
    "is_same_tree",
    "is_symmetric",
    "max_depth",
    "is_balanced",
    "min_depth",
    "has_path_sum",
    "is_cousins",
    "is_cousins_bfs",
    "is_unival_tree",
    "is_subtree",
    "is_valid_bst",
    "leaf_similar",
    "find_target",
    "sum_of_left_leaves",
    "find_mode",
    "get_minimum_difference",
    "diameter_of_binary_tree",
    "find_tilt",
    "find_second_minimum_value",
    "min_diff_in_bst",
    "range_sum_bst",
    "sum_root_to_leaf",
]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is None and q is None
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(p: TreeNode | None, q: TreeNode | None) -> bool:
    if p is None or q is None:
        return p is None and q is None
    return p.val == q.val and _mirrors(p.right, q.left) and _mirrors(p.left, q.right)


def is_symmetric(root: TreeNode | None) -> bool:
    """Whether the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(max_depth(root.left) - max_depth(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def min_depth(root: TreeNode | None) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    children = [child for child in (root.left, root.right) if child is not None]
    if not children:
        return 1
    return min(min_depth(child) for child in children) + 1


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if _is_leaf(root):
        return root.val == target_sum
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def is_cousins(root: TreeNode | None, x: int, y: int) -> bool:
    """Whether ``x`` and ``y`` sit at the same depth under different parents.

    Depth-first search that stops once both values have been seen.
    """
    x_parent: TreeNode | None = None
    y_parent: TreeNode | None = None
    x_depth = y_depth = 0
    x_found = y_found = False

    def visit(node: TreeNode | None, parent: TreeNode | None, depth: int) -> None:
        nonlocal x_parent, y_parent, x_depth, y_depth, x_found, y_found
        if node is None:
            return
        if node.val == x:
            x_parent, x_depth, x_found = parent, depth, True
        if node.val == y:
            y_parent, y_depth, y_found = parent, depth, True
        if x_found and y_found:
            return
        visit(node.left, node, depth + 1)
        if x_found and y_found:
            return
        visit(node.right, node, depth + 1)

    visit(root, None, 1)
    return x_parent is not y_parent and x_depth == y_depth


def is_cousins_bfs(root: TreeNode | None, x: int, y: int) -> bool:
    """Breadth-first form of :func:`is_cousins`."""
    if root is None:
        return False
    x_parent: TreeNode | None = None
    y_parent: TreeNode | None = None
    x_depth = y_depth = 0

    def record(node: TreeNode, parent: TreeNode | None, depth: int) -> None:
        nonlocal x_parent, y_parent, x_depth, y_depth
        if node.val == x:
            x_parent, x_depth = parent, depth
        if node.val == y:
            y_parent, y_depth = parent, depth

    record(root, None, 0)
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, depth = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))
                record(child, node, depth + 1)
    return x_parent is not y_parent and x_depth == y_depth


def is_unival_tree(root: TreeNode | None) -> bool:
    """Whether every node holds the same value as the root."""
    if root is None:
        return True

    def same(node: TreeNode | None) -> bool:
        if node is None:
            return True
        return node.val == root.val and same(node.left) and same(node.right)

    return same(root)


def is_subtree(s: TreeNode | None, t: TreeNode | None) -> bool:
    """Whether some node of ``s`` roots a tree identical to ``t``."""
    if s is None:
        return False
    return is_same_tree(s, t) or is_subtree(s.left, t) or is_subtree(s.right, t)


def is_valid_bst(root: TreeNode | None) -> bool:
    """Whether the tree is a binary search tree with strictly increasing keys."""

    def within(node: TreeNode | None, lower: int | None, upper: int | None) -> bool:
        if node is None:
            return True
        if lower is not None and node.val <= lower:
            return False
        if upper is not None and node.val >= upper:
            return False
        return within(node.left, lower, node.val) and within(node.right, node.val, upper)

    return within(root, None, None)


def _leaves(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    if _is_leaf(root):
        yield root.val
        return
    yield from _leaves(root.left)
    yield from _leaves(root.right)


def leaf_similar(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Whether both trees have the same leaf values from left to right."""
    return list(_leaves(root1)) == list(_leaves(root2))


def find_target(root: TreeNode | None, k: int) -> bool:
    """Whether two distinct nodes of a BST add up to ``k``."""
    values = inorder_traversal(root)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == k:
            return True
        if total < k:
            low += 1
        else:
            high -= 1
    return False


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Sum of the values of all leaves that are a left child."""
    if root is None:
        return 0
    total = 0
    if root.left is not None:
        total += root.left.val if _is_leaf(root.left) else sum_of_left_leaves(root.left)
    if root.right is not None and not _is_leaf(root.right):
        total += sum_of_left_leaves(root.right)
    return total


def find_mode(root: TreeNode | None) -> list[int]:
    """The most frequent values, in in-order order of first appearance."""
    counts = Counter(inorder_traversal(root))
    if not counts:
        return []
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


def _min_adjacent_gap(root: TreeNode | None) -> int:
    values = inorder_traversal(root)
    if len(values) < 2:
        raise ValueError("tree needs at least two nodes")
    return min(b - a for a, b in zip(values, values[1:]))


def get_minimum_difference(root: TreeNode | None) -> int:
    """Smallest difference between two values of a BST."""
    return _min_adjacent_gap(root)


def min_diff_in_bst(root: TreeNode | None) -> int:
    """Smallest difference between in-order neighbours of a BST."""
    return _min_adjacent_gap(root)


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def depth(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    depth(root)
    return best


def find_tilt(root: TreeNode | None) -> int:
    """Sum over all nodes of ``|sum(left subtree) - sum(right subtree)|``."""
    tilt = 0

    def subtree_sum(node: TreeNode | None) -> int:
        nonlocal tilt
        if node is None:
            return 0
        left = subtree_sum(node.left)
        right = subtree_sum(node.right)
        tilt += abs(left - right)
        return left + right + node.val

    subtree_sum(root)
    return tilt


def find_second_minimum_value(root: TreeNode | None) -> int:
    """Smallest value greater than the root's, or -1 when there is none.

    Intended for trees where each node's value is the minimum of its children.
    """
    if root is None:
        return -1
    answer = -1
    root_val = root.val

    def visit(node: TreeNode | None) -> None:
        nonlocal answer
        if node is None or (answer != -1 and node.val >= answer):
            return
        if node.val > root_val:
            answer = node.val
        visit(node.left)
        visit(node.right)

    visit(root)
    return answer


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Sum of the values that lie in ``[low, high]``."""
    return sum(value for value in inorder_traversal(root) if low <= value <= high)


def sum_root_to_leaf(root: TreeNode | None) -> int:
    """Sum of the binary numbers spelled by each root-to-leaf path of bits."""

    def walk(node: TreeNode | None, prefix: int) -> int:
        if node is None:
            return 0
        number = (prefix << 1) + node.val
        if _is_leaf(node):
            return number
        return walk(node.left, number) + walk(node.right, number)

    return walk(root, 0)