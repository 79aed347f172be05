"""
mathfn Value Adapter.

Converts host values to and from the floating-point scalars and booleans
the operations work with. Host values are plain Python objects:

- Number: ``int``, ``float`` or any other real number (numpy scalars too)
- Bool: ``bool``
- String: ``str``
- List: ``list`` or ``tuple``

Anything else is rejected as non-numeric. Booleans are never coerced.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Optional

import numpy as np

from mathfn.config import get_config
from mathfn.utils.errors import ConversionError, TypeError as MathFnTypeError

Value = Any

_BOOL_TYPES = (bool, np.bool_)
_LIST_TYPES = (list, tuple)


def is_bool(value: Value) -> bool:
    """Check whether a host value is a Bool."""
    return isinstance(value, _BOOL_TYPES)


def is_number(value: Value) -> bool:
    """Check whether a host value is a Number."""
    return isinstance(value, numbers.Real) and not is_bool(value)


def is_list(value: Value) -> bool:
    """Check whether a host value is a List."""
    return isinstance(value, _LIST_TYPES)


def to_number(value: Value) -> float:
    """
    Convert a host value to a double.

    Args:
        value: A host value

    Returns:
        The value as a Python float. Integers too large for a double
        become +/-Infinity.

    Raises:
        ConversionError: If the value is not a Number, or a String that
            parses as one while string coercion is enabled

    Examples:
        >>> to_number(3)
        3.0
        >>> to_number("2.5")
        2.5
    """
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            # Integers beyond the double range
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        return _parse_number(value)
    raise ConversionError(f"cannot convert {type(value).__name__} to number")


def _parse_number(text: str) -> float:
    if get_config().coerce_strings:
        try:
            return float(text)
        except ValueError:
            pass
    raise ConversionError(f"cannot convert string '{text}' to number")


def from_number(x: float) -> float:
    """Wrap a double as a host Number."""
    return float(x)


def from_bool(b: bool) -> bool:
    """Wrap a truth value as a host Bool."""
    return bool(b)


def to_integer(x: float) -> Optional[int]:
    """
    Truncate a double toward zero.

    Returns None for NaN and infinities, which have no integer value;
    callers decide what that means for their operation.
    """
    if math.isnan(x) or math.isinf(x):
        return None
    return math.trunc(x)


def number_arg(op: str, value: Value, context: Optional[str] = None) -> float:
    """
    Coerce one argument of an operation to a double.

    Args:
        op: Name of the calling operation, used in the error message
        value: The host value to convert
        context: Label identifying the argument ("base", "argument 2", ...)

    Raises:
        TypeError: If the value cannot be converted
    """
    try:
        return to_number(value)
    except ConversionError as exc:
        raise MathFnTypeError(exc.message, op=op, context=context) from exc
