"""Bounded containers used by the expression converter and evaluator."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_SIZE_STACK = 255
MAX_SIZE_QUEUE = 255 * 2


class BoundedStack(Generic[T]):
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = MAX_SIZE_STACK) -> None:
        if capacity < 1:
            raise ValueError("stack capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise OverflowError("push onto a full stack")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the topmost item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the topmost item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"


class CircularQueue(Generic[T]):
    """A first-in, first-out ring of ``capacity`` slots.

    One slot always stays free to tell a full ring from an empty one, so the
    queue holds at most ``capacity - 1`` items.
    """

    def __init__(self, capacity: int = MAX_SIZE_QUEUE) -> None:
        if capacity < 2:
            raise ValueError("queue capacity must be at least 2")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the tail of the queue."""
        if self.is_full():
            raise OverflowError("enqueue onto a full queue")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the head of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def head(self) -> T:
        """Return the item at the head without removing it."""
        if not self._items:
            raise IndexError("head of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity - 1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from head to tail."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self.capacity})"