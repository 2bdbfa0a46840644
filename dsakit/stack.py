"""Bounded array-backed stack and unbounded linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any, Optional

from dsakit.errors import OverflowError_, UnderflowError


def _check_position(position: int, length: int) -> None:
    if not 1 <= position <= length:
        raise IndexError(f"not a valid position: {position}")


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("stack size must be positive")
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top; raise OverflowError_ when the stack is full."""
        if self.is_full():
            raise OverflowError_(f"stack overflow: cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise UnderflowError when empty."""
        if self.is_empty():
            raise UnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the value at a 1-based position counted from the top."""
        _check_position(position, len(self._items))
        return self._items[-position]

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise UnderflowError("stack is empty")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottom value without removing it."""
        if self.is_empty():
            raise UnderflowError("stack is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """A stack built from linked (value, rest) cells, with no fixed capacity."""

    def __init__(self) -> None:
        self._top: Optional[tuple[Any, Any]] = None
        self._length = 0

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._top = (value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise UnderflowError when empty."""
        if self._top is None:
            raise UnderflowError("stack underflow")
        value, self._top = self._top
        self._length -= 1
        return value

    def peek(self, position: int) -> Any:
        """Return the value at a 1-based position counted from the top."""
        _check_position(position, self._length)
        return next(islice(iter(self), position - 1, None))

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise UnderflowError("stack is empty")
        return self._top[0]

    def bottom(self) -> Any:
        """Return the bottom value without removing it."""
        if self._top is None:
            raise UnderflowError("stack is empty")
        return self.peek(self._length)

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        cell = self._top
        while cell is not None:
            value, cell = cell
            yield value

    def __len__(self) -> int:
        return self._length