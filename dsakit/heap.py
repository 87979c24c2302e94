"""Array-backed binary max-heap."""

from __future__ import annotations

from collections.abc import Iterator


class MaxHeap:
    """A binary heap whose root is always the largest value."""

    def __init__(self) -> None:
        self._heap: list[int] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index] <= heap[parent]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def remove_max(self) -> None:
        """Drop the largest value; does nothing on an empty heap."""
        if not self._heap:
            return
        heap = self._heap
        heap[0], heap[-1] = heap[-1], heap[0]
        heap.pop()
        self._sift_down(0)

    def get_max(self) -> int:
        """Return the largest value; raise ``IndexError`` if the heap is empty."""
        if not self._heap:
            raise IndexError("Heap is empty")
        return self._heap[0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def drain(self) -> Iterator[int]:
        """Yield and remove values from largest to smallest until empty."""
        while self._heap:
            value = self._heap[0]
            self.remove_max()
            yield value