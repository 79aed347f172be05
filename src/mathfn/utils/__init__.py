"""
mathfn Utilities Package.

Common utilities for error handling.
"""

from mathfn.utils.errors import (
    ArityError,
    ConversionError,
    MathFnError,
    TypeError,
)

__all__ = [
    "MathFnError",
    "ArityError",
    "ConversionError",
    "TypeError",
]
