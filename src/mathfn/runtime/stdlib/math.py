"""
mathfn Standard Library - Scalar Math.

Unary and binary operations over doubles:
- Sign, absolute value and rounding
- Powers, roots, exponentials and logarithms
- Trigonometry and hyperbolic functions
- Angle conversion
- Constants and number validation predicates

Domain errors never raise. They produce NaN, and overflow produces
an infinity, exactly as IEEE-754 double arithmetic does.
"""

from __future__ import annotations

import math as _math
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from mathfn.runtime.arity import Between, Exact
from mathfn.runtime.operation import builtin
from mathfn.runtime.values import from_bool, from_number, number_arg, to_integer

# =============================================================================
# Constants
# =============================================================================

PI = _math.pi
E = _math.e
PHI = (1 + _math.sqrt(5)) / 2  # Golden ratio
NAN = float("nan")

# 10**p is already 0 or inf for any |p| beyond this
_MAX_PRECISION = 400


def _ieee(func: Callable[..., Any], *xs: float) -> float:
    """Evaluate a numpy ufunc with IEEE results instead of warnings."""
    with np.errstate(all="ignore"):
        return float(func(*xs))


def _unary(op: str, args: Sequence[Any], func: Callable[..., Any]) -> float:
    return from_number(_ieee(func, number_arg(op, args[0])))


# =============================================================================
# Basic Math Functions
# =============================================================================


@builtin("abs", Exact(1))
def math_abs(args: Sequence[Any]) -> float:
    """Return absolute value."""
    return _unary("abs", args, np.abs)


@builtin("sign", Exact(1))
def math_sign(args: Sequence[Any]) -> float:
    """Return sign of x: -1, 0, or 1 (0 for NaN)."""
    x = number_arg("sign", args[0])
    if x > 0:
        return from_number(1)
    elif x < 0:
        return from_number(-1)
    return from_number(0)


# =============================================================================
# Rounding
# =============================================================================


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if _math.isnan(x) or _math.isinf(x):
        return x
    t = _math.trunc(x)
    if abs(x - t) >= 0.5:
        t += 1 if x > 0 else -1
    return _math.copysign(float(t), x)


@builtin("ceil", Exact(1))
def math_ceil(args: Sequence[Any]) -> float:
    """Round up to nearest integer."""
    return _unary("ceil", args, np.ceil)


@builtin("floor", Exact(1))
def math_floor(args: Sequence[Any]) -> float:
    """Round down to nearest integer."""
    return _unary("floor", args, np.floor)


@builtin("round", Between(1, 2))
def math_round(args: Sequence[Any]) -> float:
    """
    Round to a number of decimal places, halves away from zero.

    The precision is truncated to an integer. Negative precision rounds to
    tens, hundreds and so on.

    Examples:
        round(2.5) -> 3
        round(3.14159, 2) -> 3.14
        round(1234, -2) -> 1200
    """
    value = number_arg("round", args[0], "value")
    precision = 0
    if len(args) == 2:
        precision = to_integer(number_arg("round", args[1], "precision"))
        if precision is None:
            return from_number(NAN)

    if precision == 0:
        return from_number(_round_half_away(value))

    precision = max(-_MAX_PRECISION, min(_MAX_PRECISION, precision))
    with np.errstate(all="ignore"):
        multiplier = np.power(10.0, precision)
        scaled = float(np.multiply(value, multiplier))
        return from_number(float(np.divide(_round_half_away(scaled), multiplier)))


@builtin("trunc", Exact(1))
def math_trunc(args: Sequence[Any]) -> float:
    """Truncate toward zero."""
    return _unary("trunc", args, np.trunc)


# =============================================================================
# Powers and Roots
# =============================================================================


@builtin("pow", Exact(2))
def math_pow(args: Sequence[Any]) -> float:
    """Raise base to exponent."""
    base = number_arg("pow", args[0], "base")
    exponent = number_arg("pow", args[1], "exponent")
    return from_number(_ieee(np.power, base, exponent))


@builtin("sqrt", Exact(1))
def math_sqrt(args: Sequence[Any]) -> float:
    """Square root (NaN for negative input)."""
    x = number_arg("sqrt", args[0])
    if x < 0:
        return from_number(NAN)
    return from_number(_ieee(np.sqrt, x))


@builtin("cbrt", Exact(1))
def math_cbrt(args: Sequence[Any]) -> float:
    """Cube root."""
    return _unary("cbrt", args, np.cbrt)


@builtin("exp", Exact(1))
def math_exp(args: Sequence[Any]) -> float:
    """Exponential e^x."""
    return _unary("exp", args, np.exp)


@builtin("exp2", Exact(1))
def math_exp2(args: Sequence[Any]) -> float:
    """Power of two 2^x."""
    return _unary("exp2", args, np.exp2)


# =============================================================================
# Logarithms
# =============================================================================


def _log(op: str, args: Sequence[Any], func: Callable[..., Any]) -> float:
    x = number_arg(op, args[0])
    if x <= 0:
        return from_number(NAN)
    return from_number(_ieee(func, x))


@builtin("log", Exact(1))
def math_log(args: Sequence[Any]) -> float:
    """Natural logarithm (NaN for x <= 0)."""
    return _log("log", args, np.log)


@builtin("log10", Exact(1))
def math_log10(args: Sequence[Any]) -> float:
    """Base-10 logarithm (NaN for x <= 0)."""
    return _log("log10", args, np.log10)


@builtin("log2", Exact(1))
def math_log2(args: Sequence[Any]) -> float:
    """Base-2 logarithm (NaN for x <= 0)."""
    return _log("log2", args, np.log2)


# =============================================================================
# Trigonometry
# =============================================================================


@builtin("sin", Exact(1))
def math_sin(args: Sequence[Any]) -> float:
    """Sine of x (radians)."""
    return _unary("sin", args, np.sin)


@builtin("cos", Exact(1))
def math_cos(args: Sequence[Any]) -> float:
    """Cosine of x (radians)."""
    return _unary("cos", args, np.cos)


@builtin("tan", Exact(1))
def math_tan(args: Sequence[Any]) -> float:
    """Tangent of x (radians)."""
    return _unary("tan", args, np.tan)


def _arc(op: str, args: Sequence[Any], func: Callable[..., Any]) -> float:
    x = number_arg(op, args[0])
    if x < -1 or x > 1:
        return from_number(NAN)
    return from_number(_ieee(func, x))


@builtin("asin", Exact(1))
def math_asin(args: Sequence[Any]) -> float:
    """Arc sine in radians (NaN outside [-1, 1])."""
    return _arc("asin", args, np.arcsin)


@builtin("acos", Exact(1))
def math_acos(args: Sequence[Any]) -> float:
    """Arc cosine in radians (NaN outside [-1, 1])."""
    return _arc("acos", args, np.arccos)


@builtin("atan", Exact(1))
def math_atan(args: Sequence[Any]) -> float:
    """Arc tangent in radians."""
    return _unary("atan", args, np.arctan)


@builtin("atan2", Exact(2))
def math_atan2(args: Sequence[Any]) -> float:
    """Arc tangent of y/x in radians, handling quadrants."""
    y = number_arg("atan2", args[0], "y")
    x = number_arg("atan2", args[1], "x")
    return from_number(_ieee(np.arctan2, y, x))


# =============================================================================
# Hyperbolic Functions
# =============================================================================


@builtin("sinh", Exact(1))
def math_sinh(args: Sequence[Any]) -> float:
    """Hyperbolic sine."""
    return _unary("sinh", args, np.sinh)


@builtin("cosh", Exact(1))
def math_cosh(args: Sequence[Any]) -> float:
    """Hyperbolic cosine."""
    return _unary("cosh", args, np.cosh)


@builtin("tanh", Exact(1))
def math_tanh(args: Sequence[Any]) -> float:
    """Hyperbolic tangent."""
    return _unary("tanh", args, np.tanh)


# =============================================================================
# Angle Conversion
# =============================================================================


@builtin("radians", Exact(1))
def math_radians(args: Sequence[Any]) -> float:
    """Convert degrees to radians."""
    degrees = number_arg("radians", args[0])
    return from_number(degrees * PI / 180)


@builtin("degrees", Exact(1))
def math_degrees(args: Sequence[Any]) -> float:
    """Convert radians to degrees."""
    radians = number_arg("degrees", args[0])
    return from_number(radians * 180 / PI)


# =============================================================================
# Validation Predicates
# =============================================================================


@builtin("is_nan", Exact(1), published="isNan")
def math_is_nan(args: Sequence[Any]) -> bool:
    """Check if x is NaN."""
    return from_bool(_math.isnan(number_arg("is_nan", args[0])))


@builtin("is_inf", Exact(1), published="isInf")
def math_is_inf(args: Sequence[Any]) -> bool:
    """Check if x is positive or negative infinity."""
    return from_bool(_math.isinf(number_arg("is_inf", args[0])))


@builtin("is_finite", Exact(1), published="isFinite")
def math_is_finite(args: Sequence[Any]) -> bool:
    """Check if x is neither NaN nor infinite."""
    return from_bool(_math.isfinite(number_arg("is_finite", args[0])))


# =============================================================================
# Constants
# =============================================================================


@builtin("pi", Exact(0))
def math_pi(args: Sequence[Any]) -> float:
    """The ratio of a circle's circumference to its diameter."""
    return from_number(PI)


@builtin("e", Exact(0))
def math_e(args: Sequence[Any]) -> float:
    """Euler's number."""
    return from_number(E)


@builtin("phi", Exact(0))
def math_phi(args: Sequence[Any]) -> float:
    """The golden ratio."""
    return from_number(PHI)
