"""Disjoint-set structures and problems solved with them."""

from __future__ import annotations

from typing import Sequence

__all__ = ["RankedUnionFind", "UnionFind", "num_islands", "longest_consecutive"]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


class RankedUnionFind:
    """Union by rank with path halving; tracks the number of components."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.parent = list(range(size))
        self.rank = [0] * size
        self.components = size

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self.parent):
            raise IndexError(f"element {item} out of range")

    def find(self, item: int) -> int:
        """Return the representative of ``item``'s set."""
        self._check(item)
        parent = self.parent
        while item != parent[item]:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def merge(self, p: int, q: int) -> bool:
        """Join the sets of ``p`` and ``q``; return False if already joined."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        if self.rank[root_p] < self.rank[root_q]:
            self.parent[root_p] = root_q
        elif self.rank[root_p] > self.rank[root_q]:
            self.parent[root_q] = root_p
        else:
            self.parent[root_q] = root_p
            self.rank[root_p] += 1
        self.components -= 1
        return True


class UnionFind:
    """Plain quick-union with path compression."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.parent = list(range(size))

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, item: int) -> int:
        """Return the root of ``item``, compressing the path to it."""
        if not 0 <= item < len(self.parent):
            raise IndexError(f"element {item} out of range")
        parent = self.parent
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, p: int, q: int) -> None:
        """Attach the root of ``p`` under the root of ``q``."""
        root_p = self.find(p)
        root_q = self.find(q)
        self.parent[root_p] = root_q

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of ``"1"`` cells in a grid of ``"1"``/``"0"``."""
    if not grid:
        return 0
    rows = len(grid)
    cols = len(grid[0])
    land = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "1"
    }
    sets = RankedUnionFind(rows * cols)
    islands = len(land)
    for i, j in land:
        for ni, nj in ((i + 1, j), (i, j + 1)):
            if (ni, nj) in land and sets.merge(i * cols + j, ni * cols + nj):
                islands -= 1
    return islands


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``nums``."""
    if not nums:
        return 0
    first_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        first_index.setdefault(value, index)
    sets = UnionFind(len(nums))
    for value, index in first_index.items():
        following = first_index.get(value + 1)
        if following is not None:
            sets.union(index, following)
    return 1 + max(nums[sets.find(i)] - value for i, value in enumerate(nums))