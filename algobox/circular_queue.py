"""A fixed-capacity first-in first-out queue over a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmpty(Exception):
    """Raised when taking from a queue that holds nothing."""


class CircularQueue:
    """A queue of at most capacity items stored in a wrapping buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Most items the queue can hold at once."""
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        if self._count == self.capacity:
            raise QueueFull("queue is full")
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._count:
            raise QueueEmpty("queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % self.capacity]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"