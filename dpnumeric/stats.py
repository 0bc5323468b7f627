"""Summary statistics and small helpers over sequences of numbers."""

from __future__ import annotations

import math
from itertools import compress
from numbers import Real
from typing import Iterable, Sequence, TypeVar

__all__ = [
    "mean",
    "variance",
    "standard_deviation",
    "order_statistic",
    "correlation",
    "vector_filter",
    "vector_to_string",
]

_T = TypeVar("_T")

_CORRELATION_EPSILON = 1e-10


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values, 0.0) / len(values)


def variance(values: Sequence[float]) -> float:
    """Population variance; NaN for an empty sequence."""
    if not values:
        return math.nan
    centre = mean(values)
    return sum(((x - centre) ** 2 for x in values), 0.0) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation."""
    return variance(values) ** 0.5


def order_statistic(percentile: float, values: Iterable[float]) -> float:
    """Value at ``percentile`` (0 to 1), interpolating between neighbours.

    Returns 0.0 for an empty input.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0.0
    pos = n * percentile - 0.5
    if pos <= 0.0:
        return ordered[0]
    if pos >= n - 1:
        return ordered[-1]
    index = int(pos)
    fraction = pos - index
    return (1.0 - fraction) * ordered[index] + fraction * ordered[index + 1]


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of two equal-length sequences.

    NaN when there are fewer than two points, the lengths differ, or either
    variance is (almost) zero.
    """
    n = len(x)
    if n < 2 or n != len(y):
        return math.nan
    mean_x = sum(x) / n
    mean_y = sum(y) / n
    sum_xx = sum_yy = sum_xy = 0.0
    for xi, yi in zip(x, y):
        dx = xi - mean_x
        dy = yi - mean_y
        sum_xx += dx * dx
        sum_xy += dx * dy
        sum_yy += dy * dy
    if sum_xx > _CORRELATION_EPSILON and sum_yy > _CORRELATION_EPSILON:
        return sum_xy / math.sqrt(sum_xx * sum_yy)
    return math.nan


def vector_filter(values: Sequence[_T], selection: Sequence[bool]) -> list[_T]:
    """Elements of ``values`` whose matching ``selection`` flag is true, in order."""
    if len(values) != len(selection):
        raise ValueError("values and selection must have the same length")
    return list(compress(values, selection))


def _format_element(value: object) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Real):
        return format(float(value), ".6g")
    return str(value)


def vector_to_string(values: Iterable[object]) -> str:
    """Render a sequence as ``[a, b, c]``; floats use six significant digits."""
    return "[" + ", ".join(_format_element(v) for v in values) + "]"