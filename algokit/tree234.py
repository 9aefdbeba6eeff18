"""A 2-3-4 tree of integer keys, balanced by splitting full nodes on the way down."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterator

__all__ = ["Tree234Node", "Tree234"]

ORDER = 4


class Tree234Node:
    """Node holding up to three sorted keys and up to four children."""

    def __init__(self) -> None:
        self.items: list[int] = []
        self.children: list[Tree234Node] = []
        self.parent: Tree234Node | None = None

    def __repr__(self) -> str:
        return f"Tree234Node({self.items!r})"

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_full(self) -> bool:
        return len(self.items) == ORDER - 1

    def find_item(self, key: int) -> int:
        """Position of ``key`` among this node's items, or -1."""
        try:
            return self.items.index(key)
        except ValueError:
            return -1

    def insert_item(self, key: int) -> int:
        """Insert ``key`` in order (after equal keys); return its position."""
        if self.is_full:
            raise OverflowError("node is full")
        position = bisect_right(self.items, key)
        self.items.insert(position, key)
        return position

    def child_for(self, key: int) -> Tree234Node:
        """The child whose subtree would hold ``key``."""
        for index, item in enumerate(self.items):
            if key < item:
                return self.children[index]
        return self.children[len(self.items)]

    def attach(self, position: int, child: Tree234Node) -> None:
        self.children.insert(position, child)
        child.parent = self


class Tree234:
    """2-3-4 search tree; all leaves stay at the same depth."""

    def __init__(self) -> None:
        self.root = Tree234Node()

    def __contains__(self, key: int) -> bool:
        return self.find(key) != -1

    def __len__(self) -> int:
        return sum(1 for _ in self._walk(self.root))

    def __iter__(self) -> Iterator[int]:
        return self._walk(self.root)

    def find(self, key: int) -> int:
        """Position of ``key`` within the node that holds it, or -1 when absent."""
        node = self.root
        while True:
            position = node.find_item(key)
            if position != -1:
                return position
            if node.is_leaf:
                return -1
            node = node.child_for(key)

    def insert(self, key: int) -> None:
        """Add ``key``, splitting every full node met on the way to a leaf."""
        node = self.root
        while True:
            if node.is_full:
                self._split(node)
                assert node.parent is not None
                node = node.parent.child_for(key)
            elif node.is_leaf:
                break
            else:
                node = node.child_for(key)
        node.insert_item(key)

    def keys(self) -> list[int]:
        """All keys in ascending order."""
        return list(self._walk(self.root))

    def _split(self, node: Tree234Node) -> None:
        largest = node.items.pop()
        middle = node.items.pop()
        right = Tree234Node()
        right.items.append(largest)
        if node.children:
            moved = node.children[2:]
            del node.children[2:]
            for position, child in enumerate(moved):
                right.attach(position, child)
        if node is self.root:
            self.root = Tree234Node()
            self.root.attach(0, node)
        parent = node.parent
        assert parent is not None
        position = parent.insert_item(middle)
        parent.attach(position + 1, right)

    def _walk(self, node: Tree234Node) -> Iterator[int]:
        if node.is_leaf:
            yield from node.items
            return
        for child, item in zip(node.children, node.items):
            yield from self._walk(child)
            yield item
        yield from self._walk(node.children[-1])