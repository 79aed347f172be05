"""
mathfn - A math function library for expression-evaluation runtimes.

mathfn publishes arithmetic, rounding, powers and logarithms, trigonometry,
descriptive statistics, random numbers, number validation predicates,
elementary number theory and constants as a mapping from name to callable.
Every callable takes the ordered list of host argument values:

    from mathfn import MATH_FUNCTIONS

    MATH_FUNCTIONS["round"]([3.14159, 2])    # 3.14
    MATH_FUNCTIONS["median"]([[3, 1, 2]])    # 2.0
"""

from mathfn.config import MathConfig, configure, get_config, reset_config
from mathfn.registry import MATH_FUNCTIONS, REGISTRY, MathRegistry, export
from mathfn.utils.errors import ArityError, MathFnError, TypeError

__version__ = "0.1.0"
__all__ = [
    "MATH_FUNCTIONS",
    "REGISTRY",
    "MathRegistry",
    "export",
    "MathConfig",
    "configure",
    "get_config",
    "reset_config",
    "MathFnError",
    "ArityError",
    "TypeError",
]
