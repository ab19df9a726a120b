"""Classic comparison sorts and a simple timing helper."""

import random
import time
from collections.abc import Callable, Iterable
from heapq import merge
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, by repeatedly swapping adjacent pairs."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, moving each value left into place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i - 1
        while j >= 0 and items[j + 1] < items[j]:
            items[j], items[j + 1] = items[j + 1], items[j]
            j -= 1
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, placing the smallest remaining value each step."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(items: list[Any], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, using a binary max-heap."""
    items = list(values)
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, index, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, splitting in two halves and merging."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return list(merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def ternary_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, splitting in three parts and merging."""
    items = list(values)
    if len(items) < 2:
        return items
    third = len(items) // 3
    first = ternary_merge_sort(items[:third + 1])
    second = ternary_merge_sort(items[third + 1:2 * third + 1])
    rest = ternary_merge_sort(items[2 * third + 1:])
    return list(merge(first, second, rest))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    k, j = low + 1, high
    while True:
        while k <= high and items[k] <= pivot:
            k += 1
        while items[j] > pivot:
            j -= 1
        if k >= j:
            break
        items[k], items[j] = items[j], items[k]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, partitioning around the first element."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if high > low:
            index = _partition(items, low, high)
            pending.append((low, index - 1))
            pending.append((index + 1, high))
    return items


def time_sort(
    size: int,
    sorter: Callable[[list[int]], Any] = sorted,
    seed: int | None = None,
) -> float:
    """Fill a list with ``size`` random values in ``1..size`` and sort it.

    Returns the elapsed seconds for filling and sorting together.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random(seed)
    start = time.perf_counter()
    data = [rng.randint(1, size) for _ in range(size)]
    sorter(data)
    return time.perf_counter() - start