"""In-place comparison sorts over lists of integers."""

from __future__ import annotations

import heapq
from typing import MutableSequence

__all__ = [
    "bubble_sort",
    "insert_sort",
    "insert_sort_with_front",
    "merge_sort",
    "sort_array",
    "merge_down_top_sort",
    "min_merge_sort",
    "quick_sort",
    "quick_sort_3way",
    "select_sort",
    "sort_colors",
]


def _swap(nums: MutableSequence[int], i: int, j: int) -> None:
    nums[i], nums[j] = nums[j], nums[i]


def bubble_sort(nums: list[int]) -> list[int]:
    """Exchange pass over a shrinking window; the smallest value ends up first.

    Each outer step ``i`` compares position ``i`` with positions
    ``i + 1 .. len - i - 1`` and swaps whenever a smaller value is found.
    The list is modified in place and returned.
    """
    length = len(nums)
    for i in range(length):
        for j in range(i + 1, length - i):
            if nums[i] > nums[j]:
                _swap(nums, i, j)
    return nums


def insert_sort(nums: list[int]) -> list[int]:
    """Straight insertion sort: sink each element left until it is in order."""
    for i in range(1, len(nums)):
        j = i
        while j > 0 and nums[j] < nums[j - 1]:
            _swap(nums, j, j - 1)
            j -= 1
    return nums


def insert_sort_with_front(nums: list[int]) -> list[int]:
    """Insertion sort that scans the sorted prefix from the front.

    Each element is moved before the first earlier element that is strictly
    greater than it, so equal elements keep their relative order.
    """
    for i in range(len(nums)):
        value = nums[i]
        position = next((j for j in range(i) if nums[j] > value), i)
        if position != i:
            del nums[i]
            nums.insert(position, value)
    return nums


def merge_sort(nums: list[int]) -> None:
    """Stable top-down merge sort, in place."""

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        mid = low + (high - low) // 2
        sort_range(low, mid)
        sort_range(mid + 1, high)
        nums[low : high + 1] = list(
            heapq.merge(nums[low : mid + 1], nums[mid + 1 : high + 1])
        )

    sort_range(0, len(nums) - 1)


def _merge_with_aux(
    nums: MutableSequence[int], aux: list[int], low: int, mid: int, high: int
) -> None:
    aux[low : high + 1] = nums[low : high + 1]
    left, right = low, mid + 1
    for i in range(low, high + 1):
        if left > mid:
            nums[i] = aux[right]
            right += 1
        elif right > high:
            nums[i] = aux[left]
            left += 1
        elif aux[left] < aux[right]:
            nums[i] = aux[left]
            left += 1
        else:
            nums[i] = aux[right]
            right += 1


def sort_array(nums: list[int]) -> list[int]:
    """Top-down merge sort using one auxiliary buffer; returns the sorted list."""
    aux = [0] * len(nums)

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        mid = low + (high - low) // 2
        sort_range(low, mid)
        sort_range(mid + 1, high)
        _merge_with_aux(nums, aux, low, mid, high)

    sort_range(0, len(nums) - 1)
    return nums


def merge_down_top_sort(nums: list[int]) -> None:
    """Bottom-up merge sort: merge runs of width 1, 2, 4, ... in place."""
    length = len(nums)
    aux = [0] * length
    width = 1
    while width < length:
        for low in range(0, length - width, 2 * width):
            high = min(low + 2 * width - 1, length - 1)
            _merge_with_aux(nums, aux, low, low + width - 1, high)
        width *= 2


def min_merge_sort(nums: list[int]) -> int:
    """Return the "small sum" of ``nums`` and sort it in place.

    The small sum adds, for every element, all strictly smaller elements
    that appear before it.
    """
    aux = [0] * len(nums)

    def merge(low: int, mid: int, high: int) -> int:
        aux[low : high + 1] = nums[low : high + 1]
        left, right = low, mid + 1
        total = 0
        for i in range(low, high + 1):
            if left > mid:
                nums[i] = aux[right]
                right += 1
            elif right > high:
                nums[i] = aux[left]
                left += 1
            elif aux[left] < aux[right]:
                total += aux[left] * (high - right + 1)
                nums[i] = aux[left]
                left += 1
            else:
                nums[i] = aux[right]
                right += 1
        return total

    def sort_range(low: int, high: int) -> int:
        if low >= high:
            return 0
        mid = low + (high - low) // 2
        return sort_range(low, mid) + sort_range(mid + 1, high) + merge(low, mid, high)

    return sort_range(0, len(nums) - 1)


def _partition(nums: MutableSequence[int], low: int, high: int) -> int:
    """Partition around ``nums[low]`` with two converging scans; return its slot."""
    pivot = nums[low]
    left, right = low + 1, high
    while True:
        while nums[left] < pivot and left < high:
            left += 1
        while nums[right] > pivot and right > low:
            right -= 1
        if left >= right:
            break
        _swap(nums, left, right)
        left += 1
        right -= 1
    _swap(nums, low, right)
    return right


def quick_sort(nums: list[int]) -> None:
    """Quicksort with the first element of each range as pivot, in place."""
    pending = [(0, len(nums) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(nums, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))


def _three_way_sort(nums: MutableSequence[int]) -> None:
    pending = [(0, len(nums) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        lt, gt = low, high
        pivot = nums[low]
        index = low + 1
        while index <= gt:
            if nums[index] < pivot:
                _swap(nums, lt, index)
                lt += 1
                index += 1
            elif nums[index] > pivot:
                _swap(nums, gt, index)
                gt -= 1
            else:
                index += 1
        pending.append((low, lt - 1))
        pending.append((gt + 1, high))


def quick_sort_3way(nums: list[int]) -> None:
    """Three-way quicksort: ranges split into < pivot, == pivot, > pivot."""
    _three_way_sort(nums)


def select_sort(nums: list[int]) -> list[int]:
    """Selection sort: move the first minimum of each suffix to its front."""
    for i in range(len(nums)):
        smallest = min(range(i, len(nums)), key=nums.__getitem__)
        _swap(nums, i, smallest)
    return nums


def sort_colors(nums: list[int]) -> None:
    """Sort a list of colour codes (such as 0, 1, 2) in place."""
    _three_way_sort(nums)