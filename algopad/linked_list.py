"""A doubly linked list that appends at the tail."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A list node linked to its neighbours in both directions."""

    val: Any
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list with head and tail pointers."""

    def __init__(self) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None

    def append(self, val: Any) -> ListNode:
        """Add ``val`` at the tail and return its node."""
        node = ListNode(val, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self) + "]"