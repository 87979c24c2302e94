"""Small array algorithms."""

from __future__ import annotations

from collections.abc import Iterable


def second_max(values: Iterable[int]) -> int:
    """Return the second largest value of ``values``.

    A repeated maximum counts twice, so ``[8, 8]`` yields ``8``.
    Raises ``ValueError`` when fewer than two values are given.
    """
    iterator = iter(values)
    try:
        first = next(iterator)
        second = next(iterator)
    except StopIteration:
        raise ValueError("second_max() needs at least two values") from None

    largest, runner_up = (first, second) if first > second else (second, first)
    for value in iterator:
        if value > largest:
            largest, runner_up = value, largest
        elif value > runner_up:
            runner_up = value
    return runner_up