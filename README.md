# dpnumeric

Small numeric building blocks for differential privacy code. The package has
no third-party dependencies.

## Installation

```
pip install .
```

## Arithmetic helpers (`dpnumeric.arith`)

- `xor_strings(longer, shorter)` XORs two strings element by element. The
  shorter one repeats until it is as long as the longer one, and the order of
  the arguments does not matter. If either is empty, the other is returned
  unchanged. It accepts two `str` values (XOR by code point) or two `bytes`
  values; mixing them raises `TypeError`.
- `default_epsilon()` returns `log(3)`. This is a convenience epsilon for
  tests. Do not use it in production.
- `next_power_of_two(n)` returns the smallest power of two that is greater
  than or equal to `n`. The result can be a negative power, so
  `next_power_of_two(0.4)` gives `0.5`. It raises `ValueError` unless `n > 0`.
- `qnorm(p, mu=0.0, sigma=1.0)` estimates the inverse CDF of the normal
  distribution using Abramowitz and Stegun formula 26.2.23. For the standard
  normal the absolute error is at most about 4.5e-4. It raises `ValueError`
  unless `0 < p < 1`.
- `clamp(low, high, value)` limits `value` to the range `[low, high]`. It
  raises `ValueError` if `high < low`.
- `IntType` lists fixed-width integer types (`INT8` to `INT64`, `UINT8` to
  `UINT64`). Each member has `min_value()`, `max_value()` and
  `contains(value)`.
- `safe_add(lhs, rhs, int_type)`, `safe_subtract(lhs, rhs, int_type)` and
  `safe_square(num, int_type)` do overflow-checked integer arithmetic.
  `int_type` defaults to `IntType.INT64`. They raise `OverflowError` when the
  result does not fit in the type, and `ValueError` when an operand does not.

```python
from dpnumeric.arith import IntType, safe_add, safe_subtract, qnorm

safe_add(10, 20)                                       # 30
safe_subtract(1, 0, IntType.UINT64)                    # 1
safe_add(IntType.INT64.max_value(), 1, IntType.INT64)  # raises OverflowError
qnorm(0.975)                                           # about 1.96
```

## Statistics helpers (`dpnumeric.stats`)

- `mean(values)`, `variance(values)` and `standard_deviation(values)` are
  population statistics. They return `nan` for an empty sequence.
- `order_statistic(percentile, values)` sorts the values and interpolates
  linearly between neighbouring order statistics. `percentile` runs from 0
  to 1. It returns `0.0` for an empty input.
- `correlation(x, y)` returns the Pearson correlation. It returns `nan` when
  the sequences differ in length, have fewer than two items, or one of them
  has (almost) zero variance.
- `vector_filter(values, selection)` keeps the items whose flag in
  `selection` is true, in order. It raises `ValueError` if the lengths differ.
- `vector_to_string(values)` formats a sequence like `[1, 2, 2, 3]`. Floats
  are written with up to six significant digits.

```python
from dpnumeric.stats import mean, variance, order_statistic, vector_to_string

data = [1, 5, 7, 9, 13]
mean(data)                  # 7.0
variance(data)              # 16.0
order_statistic(0.6, data)  # 8.0
vector_to_string([1.0, 2.0, 2.0, 3.0])  # "[1, 2, 2, 3]"
```

## What this package does not do

It is a library of helpers only. It has no noise mechanisms, no private
aggregation algorithms and no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```