"""LIFO stacks: one bounded by a fixed capacity, one built from queues."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when taking from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class BoundedStack(Generic[T]):
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise StackEmptyError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class QueueStack(Generic[T]):
    """A stack kept in a queue whose front is always the newest item."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, value: T) -> None:
        """Put ``value`` on top by queueing it ahead of everything else."""
        held = self._queue
        self._queue = deque([value])
        while held:
            self._queue.append(held.popleft())

    def pop(self) -> T:
        if self.is_empty():
            raise StackEmptyError("Stack is empty. Cannot pop element.")
        return self._queue.popleft()

    def top(self) -> T:
        if self.is_empty():
            raise StackEmptyError("Stack is empty. Cannot get top element.")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)