"""FIFO queues: one built from two stacks, one bounded by a fixed capacity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class TwoStackQueue(Generic[T]):
    """A queue kept in two stacks: one takes new items, the other serves them."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        while self._outbox:
            self._inbox.append(self._outbox.pop())
        self._inbox.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Cannot dequeue element.")
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class BoundedQueue(Generic[T]):
    """A queue over a fixed number of slots.

    Slots are used from the start onward and are only reclaimed once the
    queue has been emptied completely, so a queue that has filled every
    slot stays full until it is drained.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def is_empty(self) -> bool:
        return not self._slots

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError("Queue is full. Cannot enqueue element.")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Cannot dequeue element.")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> T:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty. Cannot peek element.")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front