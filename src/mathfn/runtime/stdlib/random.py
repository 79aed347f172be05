"""
mathfn Standard Library - Random Module.

Pseudo-random number generation from a single process-wide generator.
The generator is created on first use with the configured initial seed,
so a fresh process always produces the same sequence until it is
reseeded. Access is serialized with a lock; after ``random_seed(S)`` a
single thread always observes the same draws.
"""

from __future__ import annotations

import logging
import random as _random
import threading
import time
from collections.abc import Sequence
from typing import Any, Optional

from mathfn.config import get_config
from mathfn.runtime.arity import Between, OneOf
from mathfn.runtime.operation import builtin
from mathfn.runtime.values import from_bool, from_number, number_arg, to_integer

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Seedable generator shared by all random operations.

    Wraps a private :class:`random.Random` behind a lock.
    """

    def __init__(self, seed: int) -> None:
        self._lock = threading.Lock()
        self._rng = _random.Random(seed)

    def seed(self, value: Optional[int] = None) -> int:
        """
        Reseed the generator.

        Args:
            value: Integer seed, or None to seed from the wall clock

        Returns:
            The seed that was applied
        """
        origin = "argument"
        if value is None:
            value = time.time_ns()
            origin = "wall clock"
        with self._lock:
            self._rng.seed(value)
        logger.debug(f"Random source reseeded with {value} (from {origin})")
        return value

    def random(self) -> float:
        """Return random float in [0, 1)."""
        with self._lock:
            return self._rng.random()

    def randrange(self, start: int, stop: int) -> int:
        """Return random integer in [start, stop). Requires start < stop."""
        with self._lock:
            return self._rng.randrange(start, stop)


_source: Optional[RandomSource] = None
_source_lock = threading.Lock()


def get_random_source() -> RandomSource:
    """Return the process-wide random source, creating it on first use."""
    global _source
    with _source_lock:
        if _source is None:
            seed = get_config().initial_seed
            _source = RandomSource(seed)
            logger.debug(f"Random source created with initial seed {seed}")
        return _source


def reset_random_source() -> None:
    """Discard the process-wide random source; the next draw recreates it."""
    global _source
    with _source_lock:
        _source = None


# =============================================================================
# Operations
# =============================================================================


@builtin("random", OneOf(frozenset({0, 1, 2})))
def math_random(args: Sequence[Any]) -> float:
    """
    Random number.

    - random() -> float in [0, 1)
    - random(max) -> integer in [0, max), or 0 when max <= 0
    - random(min, max) -> integer in [min, max), or min when max <= min

    Bounds are truncated to integers.
    """
    source = get_random_source()
    if len(args) == 0:
        return from_number(source.random())

    if len(args) == 1:
        high = to_integer(number_arg("random", args[0], "max"))
        if high is None or high <= 0:
            return from_number(0)
        return from_number(source.randrange(0, high))

    low_value = number_arg("random", args[0], "min")
    high_value = number_arg("random", args[1], "max")
    low = to_integer(low_value)
    high = to_integer(high_value)
    if low is None or high is None:
        return from_number(low_value)
    if high <= low:
        return from_number(low)
    return from_number(source.randrange(low, high))


@builtin("random_float", OneOf(frozenset({0, 1, 2})), published="randomFloat")
def math_random_float(args: Sequence[Any]) -> float:
    """
    Random float.

    - random_float() -> [0, 1)
    - random_float(max) -> rand * max
    - random_float(min, max) -> min + rand * (max - min)
    """
    source = get_random_source()
    if len(args) == 0:
        return from_number(source.random())

    if len(args) == 1:
        high = number_arg("random_float", args[0], "max")
        return from_number(source.random() * high)

    low = number_arg("random_float", args[0], "min")
    high = number_arg("random_float", args[1], "max")
    return from_number(low + source.random() * (high - low))


@builtin("random_seed", Between(0, 1), published="randomSeed")
def math_random_seed(args: Sequence[Any]) -> bool:
    """Seed the random source from the wall clock or an integer. Returns true."""
    source = get_random_source()
    if len(args) == 0:
        source.seed()
    else:
        seed = to_integer(number_arg("random_seed", args[0]))
        source.seed(0 if seed is None else seed)
    return from_bool(True)
