"""Solving a system of three linear equations in three unknowns."""

from collections.abc import Iterable, Sequence

Row = Sequence[float]


def _determinant(rows: Sequence[Row]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _replace_column(rows: Sequence[Row], column: int, values: Sequence[float]) -> list[list[float]]:
    replaced = []
    for row, value in zip(rows, values):
        new_row = list(row)
        new_row[column] = value
        replaced.append(new_row)
    return replaced


def solve_3x3(equations: Iterable[Sequence[float]]) -> tuple[float, float, float]:
    """Solve ``x*a + y*b + z*c = d`` for three equations using Cramer's rule.

    Each equation is given as the four numbers ``(a, b, c, d)``.
    Raises ValueError if the input is malformed or the system is singular.
    """
    rows = [tuple(float(value) for value in equation) for equation in equations]
    if len(rows) != 3 or any(len(row) != 4 for row in rows):
        raise ValueError("expected three equations of four numbers each")

    coefficients = [row[:3] for row in rows]
    constants = [row[3] for row in rows]

    determinant = _determinant(coefficients)
    if determinant == 0:
        raise ValueError("the system has no unique solution")

    x, y, z = (
        _determinant(_replace_column(coefficients, column, constants)) / determinant
        for column in range(3)
    )
    return x, y, z