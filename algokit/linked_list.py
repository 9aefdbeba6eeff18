"""Singly and doubly linked lists and classic list problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

__all__ = [
    "ListNode",
    "DListNode",
    "from_values",
    "to_values",
    "from_values_doubly",
    "remove_middle",
    "common_values",
    "has_cycle",
    "get_intersection_node",
    "remove_by_ratio",
    "remove_last_kth",
    "remove_last_kth_doubly",
    "reverse_list",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """Node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class DListNode:
    """Node of a doubly linked list."""

    val: int = 0
    prev: DListNode | None = None
    next: DListNode | None = None

    def __repr__(self) -> str:
        return f"DListNode({self.val!r})"


def _nodes(head: Any) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a singly linked list; returns its head or None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | DListNode | None) -> list[int]:
    """Values of a (non-cyclic) list from ``head`` onwards."""
    return [node.val for node in _nodes(head)]


def from_values_doubly(values: Iterable[int]) -> DListNode | None:
    """Build a doubly linked list; returns its head or None when empty."""
    head: DListNode | None = None
    tail: DListNode | None = None
    for value in values:
        node = DListNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def remove_middle(head: ListNode | None) -> ListNode | None:
    """Remove the middle node (the earlier one for even lengths).

    A single-node list is returned unchanged.
    """
    if head is None or head.next is None:
        return head
    if head.next.next is None:
        return head.next
    slow = head
    fast = head.next.next
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head


def common_values(head_a: ListNode | None, head_b: ListNode | None) -> list[int]:
    """Values present in both ascending lists, found in one merged walk."""
    result: list[int] = []
    a, b = head_a, head_b
    while a is not None and b is not None:
        if a.val == b.val:
            result.append(a.val)
            a, b = a.next, b.next
        elif a.val < b.val:
            a = a.next
        else:
            b = b.next
    return result


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` loops forever."""
    if head is None or head.next is None or head.next.next is None:
        return False
    slow = head.next
    fast = head.next.next
    while slow is not fast:
        if fast.next is None or fast.next.next is None:
            return False
        slow = slow.next
        fast = fast.next.next
    return True


def _length_and_tail(head: ListNode) -> tuple[int, ListNode]:
    length = 0
    tail = head
    for node in _nodes(head):
        length += 1
        tail = node
    return length, tail


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """The first node shared by two acyclic lists, or None."""
    if head_a is None or head_b is None:
        return None
    length_a, tail_a = _length_and_tail(head_a)
    length_b, tail_b = _length_and_tail(head_b)
    if tail_a is not tail_b:
        return None
    a, b = head_a, head_b
    for _ in range(length_a - length_b):
        a = a.next
    for _ in range(length_b - length_a):
        b = b.next
    while a is not b:
        a, b = a.next, b.next
    return a


def remove_by_ratio(head: ListNode | None, a: int, b: int) -> ListNode | None:
    """Remove node number ``floor(a * (len - 1) / b)`` (1-based).

    Nothing is removed when ``a < 1``, ``a > b`` or the computed position
    is 0.
    """
    if a < 1 or a > b or head is None:
        return head
    position = a * (len(to_values(head)) - 1) // b
    if position == 1:
        return head.next
    if position > 1:
        node = head
        for _ in range(position - 2):
            node = node.next
        node.next = node.next.next
    return head


def _check_k(k: int) -> None:
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")


def remove_last_kth(head: ListNode | None, k: int) -> ListNode | None:
    """Remove the k-th node from the end; lists shorter than k are unchanged."""
    _check_k(k)
    if head is None:
        return None
    length = len(to_values(head))
    if k > length:
        return head
    if k == length:
        return head.next
    node = head
    for _ in range(length - k - 1):
        node = node.next
    node.next = node.next.next
    return head


def remove_last_kth_doubly(head: DListNode | None, k: int) -> DListNode | None:
    """Doubly linked form of :func:`remove_last_kth`, keeping ``prev`` links."""
    _check_k(k)
    if head is None:
        return None
    length = len(to_values(head))
    if k > length:
        return head
    if k == length:
        new_head = head.next
        if new_head is not None:
            new_head.prev = None
        return new_head
    node = head
    for _ in range(length - k - 1):
        node = node.next
    following = node.next.next
    node.next = following
    if following is not None:
        following.prev = node
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous