"""Singly linked list nodes and the algorithms that work on them."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers whose decimal digits are stored least significant first."""
    dummy = ListNode()
    current = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        current.next = ListNode(digit)
        current = current.next
    return dummy.next


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself (Floyd's algorithm)."""
    if head is None or head.next is None:
        return False
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one sorted list, reusing their nodes."""
    tiebreak = count()
    heap = [(node.val, next(tiebreak), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(tiebreak), node.next))
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    prev, current = dummy, head
    while current is not None:
        if current.val == val:
            prev.next = current.next
        else:
            prev = current
        current = current.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    slow = fast = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError("n is larger than the length of the list")
        fast = fast.next
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in groups of ``k`` nodes; a short tail stays as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or k == 1:
        return head

    dummy = ListNode(0, head)
    prev_group_end = dummy
    while True:
        group_end = prev_group_end
        for _ in range(k):
            group_end = group_end.next
            if group_end is None:
                return dummy.next

        group_start = prev_group_end.next
        after = group_end.next
        prev, current = after, group_start
        while current is not after:
            current.next, prev, current = prev, current, current.next

        prev_group_end.next = group_end
        prev_group_end = group_start


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while head is not None and head.next is not None:
        second = head.next
        prev.next = second
        head.next = second.next
        second.next = head
        prev = head
        head = head.next
    return dummy.next