"""
mathfn Standard Library - Statistics.

Variadic reducers over scalars and flat lists. Arguments are flattened
one level, in order, before reducing:

    mean(1, [2, 3], 4)  ->  mean of [1, 2, 3, 4]

Reducers that have no meaningful result on empty input raise
``TypeError("<op>: no numeric values found")``. ``sum`` returns 0 instead,
and ``variance``/``stddev`` return 0 for a single value.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from mathfn.runtime.arity import AtLeast, Exact
from mathfn.runtime.flatten import flatten, iter_flat
from mathfn.runtime.operation import builtin
from mathfn.runtime.values import from_number, number_arg
from mathfn.utils.errors import TypeError as MathFnTypeError


def _values(op: str, args: Sequence[Any]) -> np.ndarray:
    """Flatten arguments, refusing empty input."""
    xs = flatten(op, args)
    if xs.size == 0:
        raise MathFnTypeError("no numeric values found", op=op)
    return xs


def _reduce(func: Callable[..., Any], xs: np.ndarray, **kwargs: Any) -> float:
    with np.errstate(all="ignore"):
        return float(func(xs, **kwargs))


# =============================================================================
# Extremes
# =============================================================================


def _extreme(
    op: str, args: Sequence[Any], better: Callable[[float, float], bool]
) -> float:
    best = None
    for _, x in iter_flat(op, args):
        if best is None or better(x, best):
            best = x
    if best is None:
        raise MathFnTypeError("no numeric values found", op=op)
    return from_number(best)


@builtin("max", AtLeast(1))
def math_max(args: Sequence[Any]) -> float:
    """Return maximum value (first occurrence wins ties)."""
    return _extreme("max", args, lambda x, best: x > best)


@builtin("min", AtLeast(1))
def math_min(args: Sequence[Any]) -> float:
    """Return minimum value (first occurrence wins ties)."""
    return _extreme("min", args, lambda x, best: x < best)


@builtin("clamp", Exact(3))
def math_clamp(args: Sequence[Any]) -> float:
    """
    Clamp value between min and max.

    The lower bound is checked first, so with min > max a value below min
    yields min and any other value above max yields max.
    """
    value = number_arg("clamp", args[0], "value")
    low = number_arg("clamp", args[1], "min")
    high = number_arg("clamp", args[2], "max")
    if value < low:
        return from_number(low)
    if value > high:
        return from_number(high)
    return from_number(value)


# =============================================================================
# Descriptive Statistics
# =============================================================================


@builtin("sum", AtLeast(0))
def math_sum(args: Sequence[Any]) -> float:
    """Sum of all values (0 for no values)."""
    return from_number(_reduce(np.sum, flatten("sum", args)))


@builtin("mean", AtLeast(1))
def math_mean(args: Sequence[Any]) -> float:
    """Arithmetic mean."""
    return from_number(_reduce(np.mean, _values("mean", args)))


@builtin("median", AtLeast(0))
def math_median(args: Sequence[Any]) -> float:
    """
    Middle value of the sorted input.

    For an even count, the average of the two middle values.
    """
    return from_number(_reduce(np.median, _values("median", args)))


@builtin("mode", AtLeast(0))
def math_mode(args: Sequence[Any]) -> float:
    """
    Most frequent value, compared by exact equality.

    Ties go to the value seen first.
    """
    xs = _values("mode", args)
    counts = Counter(float(x) for x in xs)
    value, _ = counts.most_common(1)[0]
    return from_number(value)


def _variance(op: str, args: Sequence[Any]) -> float:
    xs = _values(op, args)
    if xs.size <= 1:
        return 0.0
    return _reduce(np.var, xs, ddof=1)


@builtin("variance", AtLeast(1))
def math_variance(args: Sequence[Any]) -> float:
    """Sample variance with Bessel's correction (0 for a single value)."""
    return from_number(_variance("variance", args))


@builtin("stddev", AtLeast(1))
def math_stddev(args: Sequence[Any]) -> float:
    """Sample standard deviation (0 for a single value)."""
    variance = _variance("stddev", args)
    with np.errstate(all="ignore"):
        return from_number(float(np.sqrt(variance)))
