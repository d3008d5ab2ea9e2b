"""Node of a circular doubly linked list."""

from __future__ import annotations

from typing import Any, Iterator


class ListNode:
    """A node that always belongs to a ring; a lone node links to itself."""

    def __init__(self, data: Any = None):
        self.data = data
        self.next: ListNode = self
        self.prev: ListNode = self
        self.parent: ListNode | None = None
        self.child: ListNode | None = None

    def link_after(self, other: ListNode) -> None:
        """Move this node out of its ring and insert it right after ``other``."""
        if other is self:
            raise ValueError("a node cannot be linked after itself")
        self.unlink()
        self.prev = other
        self.next = other.next
        other.next.prev = self
        other.next = self

    def unlink(self) -> None:
        """Remove this node from its ring, leaving it as a ring of one."""
        self.prev.next = self.next
        self.next.prev = self.prev
        self.next = self
        self.prev = self

    def nodes(self) -> Iterator[ListNode]:
        node = self
        while True:
            yield node
            node = node.next
            if node is self:
                return

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())