"""Scalar helpers: string XOR, inverse normal CDF and overflow-checked integers."""

from __future__ import annotations

import math
from enum import Enum
from itertools import cycle
from typing import TypeVar

__all__ = [
    "IntType",
    "xor_strings",
    "default_epsilon",
    "next_power_of_two",
    "qnorm",
    "clamp",
    "safe_add",
    "safe_subtract",
    "safe_square",
]

_T = TypeVar("_T")
_S = TypeVar("_S", str, bytes)


class IntType(Enum):
    """Fixed-width integer types whose limits bound the safe operations."""

    INT8 = (8, True)
    INT16 = (16, True)
    INT32 = (32, True)
    INT64 = (64, True)
    UINT8 = (8, False)
    UINT16 = (16, False)
    UINT32 = (32, False)
    UINT64 = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    def min_value(self) -> int:
        """Lowest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    def max_value(self) -> int:
        """Highest representable value."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Whether ``value`` fits in this type."""
        return self.min_value() <= value <= self.max_value()


def xor_strings(longer: _S, shorter: _S) -> _S:
    """XOR two strings element by element, repeating the shorter one.

    If either argument is empty, the other is returned unchanged. Works on
    ``str`` (by code point) and on ``bytes``; both arguments must be the same type.
    """
    if isinstance(longer, str) and isinstance(shorter, str):
        combine = lambda pairs: "".join(chr(ord(a) ^ ord(b)) for a, b in pairs)  # noqa: E731
    elif isinstance(longer, bytes) and isinstance(shorter, bytes):
        combine = lambda pairs: bytes(a ^ b for a, b in pairs)  # noqa: E731
    else:
        raise TypeError("xor_strings needs two str or two bytes arguments")

    if len(shorter) > len(longer):
        longer, shorter = shorter, longer
    if not shorter:
        return longer
    return combine(zip(longer, cycle(shorter)))


def default_epsilon() -> float:
    """Arbitrary default epsilon, ln(3); meant for testing convenience only."""
    return math.log(3)


def next_power_of_two(n: float) -> float:
    """Smallest power of two (negative powers included) that is >= ``n``."""
    if not n > 0:
        raise ValueError("n must be greater than 0")
    return 2.0 ** math.ceil(math.log2(n))


_C = (2.515517, 0.802853, 0.010328)
_D = (1.432788, 0.189269, 0.001308)


def qnorm(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Approximate inverse CDF of N(mu, sigma) at ``p``.

    Uses Abramowitz and Stegun formula 26.2.23; the absolute error is bounded
    by 4.5e-4 for the standard normal.
    """
    if not 0.0 < p < 1.0:
        raise ValueError("Probability must be between 0 and 1, exclusive.")
    t = math.sqrt(-2.0 * math.log(min(p, 1.0 - p)))
    numerator = (_C[2] * t + _C[1]) * t + _C[0]
    denominator = ((_D[2] * t + _D[1]) * t + _D[0]) * t + 1.0
    normalized = t - numerator / denominator
    if p < 0.5:
        normalized = -normalized
    return normalized * sigma + mu


def clamp(low: _T, high: _T, value: _T) -> _T:
    """Restrict ``value`` to the closed interval [low, high]."""
    if high < low:
        raise ValueError("clamp bounds are out of order: high < low")
    if high < value:
        return high
    if value < low:
        return low
    return value


def _require_member(int_type: IntType, *values: int) -> None:
    for value in values:
        if not int_type.contains(value):
            raise ValueError(f"{value} is not representable as {int_type.name}")


def _checked(result: int, int_type: IntType, operation: str) -> int:
    if not int_type.contains(result):
        raise OverflowError(f"{operation} overflows {int_type.name}")
    return result


def safe_add(lhs: int, rhs: int, int_type: IntType = IntType.INT64) -> int:
    """Return ``lhs + rhs``, raising OverflowError if it leaves ``int_type``."""
    _require_member(int_type, lhs, rhs)
    return _checked(lhs + rhs, int_type, "addition")


def safe_subtract(lhs: int, rhs: int, int_type: IntType = IntType.INT64) -> int:
    """Return ``lhs - rhs``, raising OverflowError if it leaves ``int_type``."""
    _require_member(int_type, lhs, rhs)
    return _checked(lhs - rhs, int_type, "subtraction")


def safe_square(num: int, int_type: IntType = IntType.INT64) -> int:
    """Return ``num * num``, raising OverflowError if it leaves ``int_type``."""
    _require_member(int_type, num)
    return _checked(num * num, int_type, "squaring")