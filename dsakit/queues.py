"""Array-backed, circular, double-ended and linked queues."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import Any

from dsakit.errors import OverflowError_, UnderflowError


class _BoundedQueue(ABC):
    """Size checks and overflow/underflow guards for fixed-size queues."""

    def __init__(self, size: int, minimum: int = 1) -> None:
        if size < minimum:
            raise ValueError(f"queue size must be at least {minimum}")
        self.size = size

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when nothing is queued."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True when no value can be added at the rear."""

    def _ensure_room(self, value: Any) -> None:
        if self.is_full():
            raise OverflowError_(f"queue overflow: cannot enqueue {value!r}")

    def _ensure_items(self) -> None:
        if self.is_empty():
            raise UnderflowError("queue underflow")


class ArrayQueue(_BoundedQueue):
    """A linear queue over a fixed array; dequeued slots are never reused."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise OverflowError_ when full."""
        self._ensure_room(value)
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError when empty."""
        self._ensure_items()
        value = self._items[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def __iter__(self) -> Iterator[Any]:
        """Yield queued values from front to rear."""
        yield from self._items[self._front:]


class CircularQueue(_BoundedQueue):
    """A ring-buffer queue holding at most size - 1 values."""

    def __init__(self, size: int) -> None:
        super().__init__(size, minimum=2)
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def _advance(self, index: int) -> int:
        return (index + 1) % self.size

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise OverflowError_ when full."""
        self._ensure_room(value)
        self._rear = self._advance(self._rear)
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError when empty."""
        self._ensure_items()
        self._front = self._advance(self._front)
        value, self._slots[self._front] = self._slots[self._front], None
        return value

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._advance(self._rear) == self._front

    def __iter__(self) -> Iterator[Any]:
        """Yield queued values from front to rear."""
        index = self._front
        while index != self._rear:
            index = self._advance(index)
            yield self._slots[index]


class DoubleEndedQueue(_BoundedQueue):
    """A fixed-array deque; the front only regains room freed by dequeues."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._slots: list[Any] = [None] * size
        self._front = -1
        self._rear = -1

    def enqueue_rear(self, value: Any) -> None:
        """Add a value at the rear; raise OverflowError_ when no room is left."""
        self._ensure_room(value)
        self._rear += 1
        self._slots[self._rear] = value

    def enqueue_front(self, value: Any) -> None:
        """Add a value at the front; raise OverflowError_ when no room is left."""
        if self._front == -1:
            raise OverflowError_(f"no place in front for inserting {value!r}")
        self._slots[self._front] = value
        self._front -= 1

    def dequeue_front(self) -> Any:
        """Remove and return the front value; raise UnderflowError when empty."""
        self._ensure_items()
        self._front += 1
        return self._slots[self._front]

    def dequeue_rear(self) -> Any:
        """Remove and return the rear value; raise UnderflowError when empty."""
        self._ensure_items()
        value = self._slots[self._rear]
        self._rear -= 1
        return value

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._rear == self.size - 1

    def __iter__(self) -> Iterator[Any]:
        """Yield queued values from front to rear."""
        yield from self._slots[self._front + 1 : self._rear + 1]


class LinkedQueue:
    """An unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError when empty."""
        if not self._items:
            raise UnderflowError("queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield queued values from front to rear."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)