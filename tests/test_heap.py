import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.heap import MaxHeap


def _build(values):
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    return heap


def test_worked_example_drain_order():
    values = [10, 5, 7, 3, 12]
    heap = _build(values)
    assert list(heap.drain()) == sorted(values, reverse=True)
    assert heap.is_empty()


def test_get_max_on_empty_raises():
    with pytest.raises(IndexError, match="Heap is empty"):
        MaxHeap().get_max()


def test_remove_max_on_empty_is_noop():
    heap = MaxHeap()
    heap.remove_max()
    assert len(heap) == 0
    assert heap.is_empty()


def test_remove_max_drops_largest():
    heap = _build([10, 5, 7, 3, 12])
    heap.remove_max()
    assert heap.get_max() == 10
    assert len(heap) == 4


def test_get_max_does_not_remove():
    heap = _build([4, 9, 1])
    assert heap.get_max() == 9
    assert heap.get_max() == 9
    assert len(heap) == 3


@given(st.lists(st.integers()))
def test_drain_is_descending_sort(values):
    heap = _build(values)
    assert len(heap) == len(values)
    if values:
        assert heap.get_max() == max(values)
    assert list(heap.drain()) == sorted(values, reverse=True)
    assert len(heap) == 0


@given(st.lists(st.integers(), min_size=1), st.integers(min_value=0, max_value=20))
def test_partial_removal_keeps_order(values, removals):
    heap = _build(values)
    for _ in range(removals):
        heap.remove_max()
    remaining = sorted(values, reverse=True)[removals:]
    assert len(heap) == len(remaining)
    assert list(heap.drain()) == remaining