"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> List[int]:
    """Return the values of an acyclic list, front to back."""
    return [node.val for node in _nodes(head)]


def next_larger_nodes(head: Optional[ListNode]) -> List[int]:
    """For each node, the value of the first later node that is strictly larger, else 0."""
    values = to_values(head)
    result = [0] * len(values)
    pending: List[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    dummy = ListNode()
    tail = dummy
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
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def merge_two_lists(
    left: Optional[ListNode], right: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``left`` first."""
    dummy = ListNode(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways; an empty list is not one."""
    values = to_values(head)
    return bool(values) and values == values[::-1]


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full run of ``k`` nodes; a shorter tail is left as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(next=head)
    group_prev = dummy
    while True:
        kth: Optional[ListNode] = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        previous, current = group_next, group_prev.next
        while current is not group_next:
            following = current.next
            current.next = previous
            previous = current
            current = following
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``left`` through ``right``."""
    length = sum(1 for _ in _nodes(head))
    if left < 1 or right > length:
        raise ValueError("positions out of range")
    dummy = ListNode(-1, head)
    prev = dummy
    for _ in range(left - 1):
        prev = prev.next
    current = prev.next
    for _ in range(right - left):
        moved = current.next
        current.next = moved.next
        moved.next = prev.next
        prev.next = moved
    return dummy.next