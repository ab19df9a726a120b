"""Listing every way to write a number as a sum of positive integers."""

from collections.abc import Iterator


def _extend(remaining: int, smallest: int, prefix: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    if remaining == 0:
        yield prefix
        return
    for part in range(smallest, remaining + 1):
        yield from _extend(remaining - part, part, prefix + (part,))


def sum_combinations(n: int) -> Iterator[tuple[int, ...]]:
    """Yield each non-decreasing tuple of positive integers summing to ``n``.

    Tuples come in lexicographic order; a negative ``n`` yields nothing and
    zero yields the empty tuple.
    """
    if n < 0:
        return
    yield from _extend(n, 1, ())