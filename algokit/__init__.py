"""Classic algorithms and data structures: sorting, array tricks, linked lists, binary and 2-3-4 trees, graphs and union-find."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bst",
    "graph",
    "linked_list",
    "sorting",
    "tree234",
    "tree_checks",
    "tree_node",
    "tree_traversal",
    "union_find",
]