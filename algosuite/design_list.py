"""A hand-built singly linked list with index-based operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _Node:
    val: int
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list; out-of-range writes are ignored, reads give -1."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``, or -1 when the index is out of range."""
        if not 0 <= index < self._size:
            return -1
        return self._node_at(index).val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` at the front."""
        self._head = _Node(val, self._head)
        self._size += 1

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` at the end."""
        node = _Node(val)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size - 1).next = node
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; ignored unless 0 <= index <= len."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(val)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(val, prev.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the node at ``index``; ignored when the index is out of range."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self._head = self._head.next
        else:
            prev = self._node_at(index - 1)
            prev.next = prev.next.next
        self._size -= 1