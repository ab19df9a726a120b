"""Maximum-sum contiguous subarrays and sub-rectangles."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass(frozen=True)
class Rectangle:
    """A sub-rectangle of a matrix, bounds inclusive, with its element sum."""

    top: int
    left: int
    bottom: int
    right: int
    total: int


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")

    def best(low: int, high: int) -> int:
        if low == high:
            return items[low]
        mid = (low + high) // 2
        crossing = max(accumulate(reversed(items[low:mid + 1]))) + max(
            accumulate(items[mid + 1:high + 1])
        )
        return max(best(low, mid), best(mid + 1, high), crossing)

    return best(0, len(items) - 1)


def kadane(values: Sequence[int]) -> tuple[int, int, int]:
    """Return ``(total, start, end)`` of the best contiguous run, bounds inclusive.

    When every value is negative, the run is the single largest value.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")

    running = 0
    candidate = 0
    best: tuple[int, int, int] | None = None
    for index, value in enumerate(items):
        running += value
        if running < 0:
            running = 0
            candidate = index + 1
        elif best is None or running > best[0]:
            best = (running, candidate, index)

    if best is not None:
        return best

    top = max(range(len(items)), key=items.__getitem__)
    return items[top], top, top


def max_sum_rectangle(matrix: Iterable[Iterable[int]]) -> Rectangle:
    """Find the sub-rectangle of ``matrix`` with the largest element sum."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")

    best: Rectangle | None = None
    for left in range(width):
        column_sums = [0] * len(rows)
        for right in range(left, width):
            column_sums = [total + row[right] for total, row in zip(column_sums, rows)]
            total, start, finish = kadane(column_sums)
            if best is None or total > best.total:
                best = Rectangle(start, left, finish, right, total)
    assert best is not None
    return best