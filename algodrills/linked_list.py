"""Singly linked list nodes and classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = field(default=None)

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: ListNode | None):
    """Yield the nodes of a list, refusing to loop around a cycle."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(node))
        yield node
        node = node.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if there is none."""
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


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
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


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return the new head."""
    prev = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties take from ``list2`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every full group of ``k`` nodes; a short tail group stays as is."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev = group_next
        curr = first
        while curr is not group_next:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        group_prev.next = kth
        group_prev = first


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes."""
    return reverse_k_group(head, 2)


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by ``k`` places."""
    if k < 0:
        raise ValueError("rotation must not be negative")
    if head is None:
        return None
    last = head
    length = 1
    while last.next is not None:
        last = last.next
        length += 1
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    last.next = head
    new_tail.next = None
    return new_head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes that repeat the value of the node before them."""
    if head is None:
        return None
    keeper = head
    probe = head.next
    while probe is not None:
        if probe.val != keeper.val:
            keeper.next = probe
            keeper = probe
        probe = probe.next
    keeper.next = None
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the nodes at 1-based positions ``left`` to ``right`` inclusive."""
    if head is None:
        return None
    if left < 1 or right < left:
        raise ValueError("positions must satisfy 1 <= left <= right")
    if left == right:
        return head
    before = None
    start = head
    for _ in range(left - 1):
        before = start
        start = start.next
        if start is None:
            raise ValueError("left position is past the end of the list")
    prev = None
    curr = start
    for _ in range(right - left + 1):
        if curr is None:
            raise ValueError("right position is past the end of the list")
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    start.next = curr
    if before is not None:
        before.next = prev
        return head
    return prev