import pytest

from algocollection.partitions import sum_combinations


def test_four():
    assert list(sum_combinations(4)) == [
        (1, 1, 1, 1),
        (1, 1, 2),
        (1, 3),
        (2, 2),
        (4,),
    ]


def test_zero_yields_empty_combination():
    assert list(sum_combinations(0)) == [()]


def test_negative_yields_nothing():
    assert list(sum_combinations(-3)) == []


@pytest.mark.parametrize("n", range(1, 10))
def test_every_combination_sums_to_n_and_is_non_decreasing(n):
    combos = list(sum_combinations(n))
    for combo in combos:
        assert sum(combo) == n
        assert list(combo) == sorted(combo)
        assert all(part >= 1 for part in combo)


@pytest.mark.parametrize("n", range(1, 10))
def test_combinations_unique_and_ordered(n):
    combos = list(sum_combinations(n))
    assert len(set(combos)) == len(combos)
    assert combos == sorted(combos)
    assert combos[0] == (1,) * n
    assert combos[-1] == (n,)


@pytest.mark.parametrize("n", range(2, 9))
def test_count_grows(n):
    assert len(list(sum_combinations(n))) > len(list(sum_combinations(n - 1)))