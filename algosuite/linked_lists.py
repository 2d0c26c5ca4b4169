"""Singly linked list node and algorithms that operate on chains of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [] if head is None else [node.val for node in head]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the reversed digit sum."""
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


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head.

    A list of zero or one node always yields None.
    """
    if head is None or head.next is None:
        return None
    if n < 1:
        raise ValueError("n must be at least 1")
    fast: Optional[ListNode] = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
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


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists, folding them in one at a time."""
    return reduce(merge_two_lists, lists, None)


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full run of ``k`` nodes; a short trailing run is left as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or k == 1:
        return head
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: Optional[ListNode] = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        prev, curr = group_next, group_prev.next
        while curr is not group_next:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places."""
    if head is None or head.next is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    steps = length - k % length
    new_tail = head
    for _ in range(steps - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def partition_list(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Put nodes below ``x`` before the others, keeping relative order in each part."""
    if head is None or head.next is None:
        return head
    before_dummy = ListNode()
    after_dummy = ListNode()
    before, after = before_dummy, after_dummy
    for node in list(head):
        if node.val < x:
            before.next = node
            before = node
        else:
            after.next = node
            after = node
    after.next = None
    before.next = after_dummy.next
    return before_dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Report whether following ``next`` links ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None for an acyclic list."""
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


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a: Optional[ListNode] = head_a
    b: Optional[ListNode] = head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the middle node (index ``len // 2``) and return the head."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    prev: Optional[ListNode] = None
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev = slow
        slow = slow.next
    if prev is not None:
        prev.next = slow.next
    return head