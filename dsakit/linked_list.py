"""Singly linked list and circular linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional

from dsakit.errors import UnderflowError


@dataclass(slots=True, eq=False)
class Node:
    """A list node holding one value and a link to the next node."""

    data: Any
    next: Optional["Node"] = None


def _chain(values: Iterable[Any]) -> tuple[Optional[Node], Optional[Node], int]:
    """Link values into nodes; return the head, the tail and the count."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    count = 0
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
        count += 1
    return head, tail, count


def _walk(head: Optional[Node]) -> Iterator[Node]:
    """Yield each node once, stopping at None or on returning to the head."""
    node = head
    while node is not None:
        yield node
        node = node.next
        if node is head:
            break


class LinkedList:
    """A singly linked list terminated by None."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head, _, self._length = _chain(values)

    @staticmethod
    def _check_index(index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError(f"index out of range: {index}")

    def _require_member(self, target: Node) -> None:
        if not any(node is target for node in _walk(self.head)):
            raise ValueError("node is not in this list")

    def _link_after(self, prev: Node, value: Any) -> Node:
        node = Node(value, prev.next)
        prev.next = node
        self._length += 1
        return node

    def _unlink_after(self, prev: Node) -> Any:
        victim = prev.next
        assert victim is not None
        prev.next = victim.next
        self._length -= 1
        return victim.data

    def insert_first(self, value: Any) -> Node:
        """Put a value in front of the list and return its node."""
        self.head = Node(value, self.head)
        self._length += 1
        return self.head

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert a value so that it ends up at the given 0-based index."""
        if index == 0:
            return self.insert_first(value)
        self._check_index(index, self._length + 1)
        return self._link_after(self.node_at(index - 1), value)

    def append(self, value: Any) -> Node:
        """Put a value at the end of the list and return its node."""
        if self.head is None:
            return self.insert_first(value)
        return self._link_after(self.node_at(self._length - 1), value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert a value right after a node of this list."""
        self._require_member(node)
        return self._link_after(node, value)

    def delete_first(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise UnderflowError("list is empty")
        node = self.head
        self.head = node.next
        self._length -= 1
        return node.data

    def delete_at(self, index: int) -> Any:
        """Remove the node at a 0-based index and return its value."""
        if index == 0:
            return self.delete_first()
        self._check_index(index, self._length)
        return self._unlink_after(self.node_at(index - 1))

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self._length <= 1:
            return self.delete_first()
        return self._unlink_after(self.node_at(self._length - 2))

    def delete_after(self, node: Node) -> Any:
        """Remove the node following a node of this list and return its value."""
        self._require_member(node)
        if node.next is None:
            raise ValueError("no node after the given node")
        return self._unlink_after(node)

    def remove(self, value: Any) -> None:
        """Remove the first node holding a value; raise ValueError if absent."""
        prev: Optional[Node] = None
        for node in _walk(self.head):
            if node.data == value:
                if prev is None:
                    self.delete_first()
                else:
                    self._unlink_after(prev)
                return
            prev = node
        raise ValueError(f"{value!r} is not in the list")

    def node_at(self, index: int) -> Node:
        """Return the node at a 0-based index."""
        self._check_index(index, self._length)
        return next(islice(_walk(self.head), index, None))

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, starting at the head."""
        for node in _walk(self.head):
            yield node.data

    def __len__(self) -> int:
        return self._length


class CircularLinkedList:
    """A singly linked list whose last node links back to the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head, tail, self._length = _chain(values)
        if tail is not None:
            tail.next = self.head

    def insert_first(self, value: Any) -> Node:
        """Put a value at the head of the circle and return its node."""
        node = Node(value)
        if self.head is None:
            node.next = node
        else:
            *_, tail = _walk(self.head)
            tail.next = node
            node.next = self.head
        self.head = node
        self._length += 1
        return node

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, starting at the head."""
        for node in _walk(self.head):
            yield node.data

    def __len__(self) -> int:
        return self._length