"""Array problems: partitioning, searching, XOR tricks and a max-heap."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable, Sequence

__all__ = [
    "odd_even_partition",
    "binary_search",
    "binary_search_recursive",
    "single_number",
    "find_two_single_numbers",
    "MaxHeap",
    "find_kth_largest",
]


def odd_even_partition(nums: list[int]) -> list[int]:
    """Move odd numbers before even ones in place, in linear time.

    Two indices converge from both ends, swapping an even value found on
    the left with an odd value found on the right. The list is returned.
    """
    if not nums:
        return nums
    low, high = 0, len(nums) - 1
    while True:
        while nums[low] % 2 != 0 and low < high:
            low += 1
        while nums[high] % 2 == 0 and low < high:
            high -= 1
        if low >= high:
            break
        nums[low], nums[high] = nums[high], nums[low]
    return nums


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 when absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search_recursive(nums: Sequence[int], target: int) -> int:
    """Recursive form of :func:`binary_search`; same result."""

    def search(low: int, high: int) -> int:
        if low > high:
            return -1
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(nums) - 1)


def single_number(nums: Iterable[int]) -> int:
    """The value that occurs an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def find_two_single_numbers(nums: Sequence[int]) -> tuple[int, int]:
    """The two values that occur an odd number of times.

    The first returned value is the one having the lowest set bit of their
    XOR; the second is the other.
    """
    combined = single_number(nums)
    lowest_bit = combined & -combined
    first = reduce(xor, (num for num in nums if num & lowest_bit), 0)
    return first, combined ^ first


class MaxHeap:
    """Binary max-heap built by bottom-up heapify."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._data = list(items)
        for index in reversed(range(len(self._data) // 2)):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._data)

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        half = size // 2
        while index < half:
            child = 2 * index + 1
            right = child + 1
            if right < size and data[right] > data[child]:
                child = right
            if data[child] < data[index]:
                break
            data[child], data[index] = data[index], data[child]
            index = child

    def poll(self) -> int:
        """Remove and return the largest value."""
        if not self._data:
            raise IndexError("poll from an empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return top


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """The k-th largest value (counting duplicates), 1-based."""
    heap = MaxHeap(nums)
    for _ in range(1, k):
        heap.poll()
    return heap.poll()