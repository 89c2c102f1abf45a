"""Doubly and singly linked lists of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = ["EmptyListError", "DoublyLinkedList", "SinglyLinkedList"]


class EmptyListError(LookupError):
    """Raised when an operation needs at least one node but the list is empty."""


@dataclass(eq=False)
class _DoubleNode:
    value: int
    prev: Optional[_DoubleNode] = None
    next: Optional[_DoubleNode] = None


@dataclass(eq=False)
class _SingleNode:
    value: int
    next: Optional[_SingleNode] = None


class DoublyLinkedList:
    """A doubly linked list with insertion and removal at both ends and by position.

    Positions are 1-based.
    """

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def _require_nodes(self) -> None:
        if self._head is None:
            raise EmptyListError("no node present")

    def _node_at(self, position: int) -> _DoubleNode:
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is out of range 1..{self._size}")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def push_front(self, value: int) -> None:
        """Insert value before the first node."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert value after the last node; the list must not be empty."""
        self._require_nodes()
        node = _DoubleNode(value, prev=self._tail)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, position: int, value: int) -> None:
        """Insert value after the node at the given position."""
        self._require_nodes()
        anchor = self._node_at(position)
        node = _DoubleNode(value, prev=anchor, next=anchor.next)
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def _unlink(self, node: _DoubleNode) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_front(self) -> int:
        """Remove the first node and return its value."""
        self._require_nodes()
        return self._unlink(self._head)

    def pop_back(self) -> int:
        """Remove the last node and return its value."""
        self._require_nodes()
        return self._unlink(self._tail)

    def remove_at(self, position: int) -> int:
        """Remove the node at the given position and return its value."""
        self._require_nodes()
        return self._unlink(self._node_at(position))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class SinglyLinkedList:
    """A singly linked list with head and tail references."""

    def __init__(self) -> None:
        self._head: Optional[_SingleNode] = None
        self._tail: Optional[_SingleNode] = None

    def append(self, value: int) -> None:
        """Add value at the end of the list."""
        node = _SingleNode(value)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def prepend(self, value: int) -> None:
        """Add value at the start of the list."""
        node = _SingleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        self._head = node

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def render(self) -> str:
        """Draw the list as zero-padded boxes joined by arrows."""
        if self._head is None:
            return "\nEmpty List"
        boxes = "--->".join(f"| {value:05d} |" for value in self)
        return f"List:\n{boxes}\n\n"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"