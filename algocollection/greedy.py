"""Greedy algorithms: Egyptian fractions and the fractional knapsack."""

from collections.abc import Sequence
from fractions import Fraction


def egyptian_fraction(numerator: int, denominator: int) -> list[int]:
    """Split a proper fraction into distinct unit fractions, greedily.

    Returns the denominators in increasing order; a zero numerator gives an
    empty list.
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if numerator < 0:
        raise ValueError("numerator must not be negative")
    remaining = Fraction(numerator, denominator)
    if remaining >= 1:
        raise ValueError("fraction must be less than one")

    denominators = []
    while remaining > 0:
        unit = -(-remaining.denominator // remaining.numerator)
        denominators.append(unit)
        remaining -= Fraction(1, unit)
    return denominators


def fractional_knapsack(
    weights: Sequence[int], prices: Sequence[int], capacity: int
) -> int:
    """Best profit when items may be taken in part.

    Items are ranked by whole-number unit price (price floor-divided by
    weight), ties keeping their given order; a partly taken item earns its
    unit price for each unit of weight taken.
    """
    if len(weights) != len(prices):
        raise ValueError("weights and prices must have the same length")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    items = sorted(
        ((price // weight, weight, price) for weight, price in zip(weights, prices)),
        key=lambda item: -item[0],
    )

    profit = 0
    for unit_price, weight, price in items:
        if capacity <= 0:
            break
        if weight <= capacity:
            capacity -= weight
            profit += price
        else:
            profit += unit_price * capacity
            capacity = 0
    return profit