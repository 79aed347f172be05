"""
mathfn Standard Library - Number Theory.

Integer operations over doubles. Arguments are truncated toward zero
(after taking the absolute value for gcd and lcm); results are returned
as doubles holding exact integers while they fit.
"""

from __future__ import annotations

import math as _math
from collections.abc import Sequence
from typing import Any

from mathfn.runtime.arity import AtLeast, Exact
from mathfn.runtime.flatten import iter_flat
from mathfn.runtime.operation import builtin
from mathfn.runtime.values import from_number, number_arg, to_integer
from mathfn.utils.errors import TypeError as MathFnTypeError

NAN = float("nan")
INF = float("inf")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    return _math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return abs(a * b) // gcd(a, b) if a and b else 0


def _as_double(n: int) -> float:
    """Convert an exact integer result, overflowing to infinity."""
    try:
        return float(n)
    except OverflowError:
        return INF


def _integer_args(op: str, args: Sequence[Any]) -> list[int] | None:
    """
    Coerce arguments to non-negative integers.

    Returns None when any argument is NaN or infinite. Every argument is
    still coerced so that type errors are reported first.
    """
    values: list[int] = []
    finite = True
    for _, x in iter_flat(op, args):
        n = to_integer(abs(x))
        if n is None:
            finite = False
        else:
            values.append(n)
    if finite and not values:
        raise MathFnTypeError("no numeric values found", op=op)
    return values if finite else None


@builtin("gcd", AtLeast(2))
def math_gcd(args: Sequence[Any]) -> float:
    """
    Greatest common divisor of two or more numbers.

    Examples:
        gcd(12, 18, 24) -> 6
        gcd(7, 0) -> 7
    """
    values = _integer_args("gcd", args)
    if values is None:
        return from_number(NAN)
    result = values[0]
    for n in values[1:]:
        result = gcd(result, n)
    return from_number(_as_double(result))


@builtin("lcm", AtLeast(2))
def math_lcm(args: Sequence[Any]) -> float:
    """
    Least common multiple of two or more numbers.

    Any zero argument makes the result zero.

    Examples:
        lcm(4, 6) -> 12
        lcm(3, 0) -> 0
    """
    values = _integer_args("lcm", args)
    if values is None:
        return from_number(NAN)
    result = values[0]
    for n in values[1:]:
        result = lcm(result, n)
    return from_number(_as_double(result))


@builtin("factorial", Exact(1))
def math_factorial(args: Sequence[Any]) -> float:
    """
    Factorial of n, truncated to an integer.

    Negative n gives NaN. Results beyond the double range become +Infinity.
    """
    x = number_arg("factorial", args[0])
    n = to_integer(x)
    if n is None:
        return from_number(INF if x == INF else NAN)
    if n < 0:
        return from_number(NAN)

    result = 1.0
    for i in range(2, n + 1):
        result *= i
        if _math.isinf(result):
            break
    return from_number(result)
