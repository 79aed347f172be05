"""
mathfn Standard Library.

Importing this package declares every operation: scalar math, statistics,
number theory and random numbers.
"""

from mathfn.runtime.stdlib.math import *
from mathfn.runtime.stdlib.statistics import *
from mathfn.runtime.stdlib.number_theory import *
from mathfn.runtime.stdlib.random import *

__all__ = [
    # Scalar math
    "math_abs", "math_sign", "math_ceil", "math_floor", "math_round", "math_trunc",
    "math_pow", "math_sqrt", "math_cbrt", "math_exp", "math_exp2",
    "math_log", "math_log10", "math_log2",
    "math_sin", "math_cos", "math_tan", "math_asin", "math_acos", "math_atan", "math_atan2",
    "math_sinh", "math_cosh", "math_tanh", "math_radians", "math_degrees",
    "math_is_nan", "math_is_inf", "math_is_finite",
    "math_pi", "math_e", "math_phi",
    # Statistics
    "math_max", "math_min", "math_clamp",
    "math_sum", "math_mean", "math_median", "math_mode", "math_variance", "math_stddev",
    # Number theory
    "math_gcd", "math_lcm", "math_factorial",
    # Random
    "math_random", "math_random_float", "math_random_seed",
    "RandomSource", "get_random_source", "reset_random_source",
]
