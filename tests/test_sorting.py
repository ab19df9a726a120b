import random

import pytest

from algocollection.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    ternary_merge_sort,
    time_sort,
)

_rng = random.Random(2024)

INPUTS = [
    [],
    [1],
    [2, 1],
    [1, 2],
    [3, 3, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [-3, 10, 0, -3, 7, 7, 2],
    [2, 3, -1, -3, 3],
    [_rng.randint(1, 1000) for _ in range(101)],
    [_rng.randint(-5, 5) for _ in range(64)],
]


@pytest.mark.parametrize("values", INPUTS)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert ternary_merge_sort(values) == expected


def test_input_not_modified():
    values = [9, 2, 7, 2, 5]
    original = list(values)
    expected = sorted(original)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert ternary_merge_sort(values) == expected
    assert values == original


def _numbers():
    return (x * 3 % 7 for x in range(10))


def test_accepts_any_iterable():
    expected = sorted(_numbers())
    assert bubble_sort(_numbers()) == expected
    assert heap_sort(_numbers()) == expected
    assert insertion_sort(_numbers()) == expected
    assert merge_sort(_numbers()) == expected
    assert quick_sort(_numbers()) == expected
    assert selection_sort(_numbers()) == expected
    assert ternary_merge_sort(_numbers()) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected
    assert ternary_merge_sort(words) == expected


def test_time_sort_hands_random_data_to_sorter():
    received = []

    def record(data):
        received.append(list(data))
        return sorted(data)

    elapsed = time_sort(200, record, seed=7)
    assert elapsed >= 0
    assert len(received) == 1
    assert len(received[0]) == 200
    assert all(1 <= value <= 200 for value in received[0])


def test_time_sort_seed_is_repeatable():
    runs = []
    time_sort(50, runs.append, seed=3)
    time_sort(50, runs.append, seed=3)
    assert len(runs) == 2
    assert runs[0] == runs[1]


@pytest.mark.parametrize("sorter", [quick_sort, heap_sort, merge_sort])
def test_time_sort_with_package_sorters(sorter):
    assert time_sort(500, sorter, seed=1) >= 0


def test_time_sort_negative_size():
    with pytest.raises(ValueError):
        time_sort(-1, sorted, seed=0)