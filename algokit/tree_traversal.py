"""Traversals, orderings and reshaping operations on binary trees."""

from __future__ import annotations

from typing import Iterator, Sequence

from algokit.tree_node import TreeNode

__all__ = [
    "preorder_traversal",
    "postorder_traversal",
    "inorder_traversal",
    "level_order",
    "average_of_levels",
    "kth_smallest",
    "kth_largest",
    "convert_bi_node",
    "increasing_bst",
    "mirror_tree",
    "invert_tree",
    "merge_trees",
    "sorted_array_to_bst",
    "tree2str",
    "binary_tree_paths",
    "search_bst",
    "lowest_common_ancestor",
    "lowest_common_ancestor_bst",
    "lowest_common_ancestor_by_path",
]


def _preorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield root.val
    yield from _preorder(root.left)
    yield from _preorder(root.right)


def _postorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root.val


def _inorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root.val
    yield from _inorder(root.right)


def _reverse_inorder(root: TreeNode | None) -> Iterator[int]:
    if root is None:
        return
    yield from _reverse_inorder(root.right)
    yield root.val
    yield from _reverse_inorder(root.left)


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by depth, each level from left to right."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Mean value of each level, top to bottom."""
    return [sum(values) / len(values) for values in level_order(root)]


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The k-th smallest value (1-based) of a BST; 0 when k exceeds its size."""
    if k < 1:
        raise IndexError(f"k must be at least 1, got {k}")
    values = inorder_traversal(root)
    if k > len(values):
        return 0
    return values[k - 1]


def kth_largest(root: TreeNode | None, k: int) -> int:
    """The k-th largest value (1-based) of a BST."""
    if k < 1:
        raise IndexError(f"k must be at least 1, got {k}")
    for position, value in enumerate(_reverse_inorder(root), start=1):
        if position == k:
            return value
    raise IndexError(f"tree has fewer than {k} nodes")


def convert_bi_node(root: TreeNode | None) -> TreeNode | None:
    """Relink a BST in place into an ascending chain along ``right`` links."""
    dummy = TreeNode()
    tail = dummy
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        tail.right = node
        node.left = None
        tail = node
        current = node.right
    return dummy.right


def increasing_bst(root: TreeNode | None) -> TreeNode | None:
    """A new ascending right-linked chain holding the BST's values."""
    dummy = TreeNode()
    tail = dummy
    for value in _inorder(root):
        tail.right = TreeNode(value)
        tail = tail.right
    return dummy.right


def mirror_tree(root: TreeNode | None) -> TreeNode | None:
    """Swap left and right children throughout the tree, in place."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    mirror_tree(root.left)
    mirror_tree(root.right)
    return root


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Same as :func:`mirror_tree`."""
    return mirror_tree(root)


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Overlay ``root2`` onto ``root1``, summing overlapping values in place."""
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root1.val += root2.val
    root1.left = merge_trees(root1.left, root2.left)
    root1.right = merge_trees(root1.right, root2.right)
    return root1


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """A height-balanced BST from an ascending sequence."""

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def tree2str(root: TreeNode | None) -> str:
    """Preorder string with parentheses around children, omitting empty ones."""
    if root is None:
        return ""
    text = str(root.val)
    if root.left is None and root.right is None:
        return text
    if root.right is None:
        return f"{text}({tree2str(root.left)})"
    return f"{text}({tree2str(root.left)})({tree2str(root.right)})"


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path as values joined by ``->``."""
    paths: list[str] = []

    def walk(node: TreeNode, prefix: str) -> None:
        if node.left is None and node.right is None:
            paths.append(prefix)
            return
        for child in (node.left, node.right):
            if child is not None:
                walk(child, f"{prefix}->{child.val}")

    if root is not None:
        walk(root, str(root.val))
    return paths


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """The BST node holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor in any binary tree, matching nodes by value."""
    if root is None or root.val == p.val or root.val == q.val:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lowest_common_ancestor_bst(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor using the BST ordering."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    return None


def _bst_path(root: TreeNode, target: int) -> list[TreeNode]:
    path: list[TreeNode] = []
    node: TreeNode | None = root
    while node is not None:
        path.append(node)
        if node.val == target:
            return path
        node = node.right if target > node.val else node.left
    raise ValueError(f"value {target} is not in the tree")


def lowest_common_ancestor_by_path(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor in a BST, found by comparing root-to-node paths."""
    if root is None:
        return None
    result = root
    for a, b in zip(_bst_path(root, p.val), _bst_path(root, q.val)):
        if a.val != b.val:
            break
        result = a
    return result