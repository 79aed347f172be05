"""
mathfn Registry.

Publishes the library's operations to a host runtime as a read-only
mapping from name to callable. Each callable takes the ordered list of
host argument values and returns one host value, or raises a
:class:`~mathfn.utils.errors.MathFnError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from mathfn.runtime import stdlib  # noqa: F401  (declares all operations)
from mathfn.runtime.operation import HostFunction, Operation, declared_operations

logger = logging.getLogger(__name__)

# Names published to the host, grouped as they are documented
PUBLISHED_NAMES: tuple[str, ...] = (
    # Basic operations
    "abs", "sign", "max", "min", "clamp",
    # Rounding
    "ceil", "floor", "round", "trunc",
    # Powers and roots
    "pow", "sqrt", "cbrt", "exp", "exp2",
    # Logarithms
    "log", "log10", "log2",
    # Trigonometry
    "sin", "cos", "tan", "asin", "acos", "atan", "atan2",
    # Hyperbolic
    "sinh", "cosh", "tanh",
    # Angle conversion
    "radians", "degrees",
    # Statistics
    "sum", "mean", "median", "mode", "variance", "stddev",
    # Random
    "random", "randomSeed", "randomFloat",
    # Utilities
    "isNan", "isInf", "isFinite", "gcd", "lcm", "factorial",
    # Constants
    "pi", "e", "phi",
)

# Lookup-only aliases, not part of the published mapping
ALIASES: dict[str, str] = {
    "avg": "mean",
}


class MathRegistry:
    """
    Read-only registry of library operations.

    Operations are published under their host-facing names. Internal
    snake_case names and the aliases in :data:`ALIASES` also resolve
    through :meth:`get_function`, but are not published.
    """

    def __init__(self, operations: Iterable[Operation]) -> None:
        self._operations: dict[str, Operation] = {}
        self._lookup: dict[str, Operation] = {}

        for operation in operations:
            if operation.published in self._operations:
                raise ValueError(f"Duplicate published name '{operation.published}'")
            self._operations[operation.published] = operation
            self._lookup[operation.published] = operation
            self._lookup.setdefault(operation.name, operation)

        for alias, target in ALIASES.items():
            if target in self._operations:
                self._lookup.setdefault(alias, self._operations[target])

        self._mapping: Mapping[str, HostFunction] = MappingProxyType(
            {name: op.func for name, op in self._operations.items()}
        )
        logger.debug(f"Registered {len(self._operations)} math functions")

    def get_function(self, name: str) -> HostFunction:
        """
        Get an operation's callable by name.

        Raises:
            KeyError: If the name is unknown
        """
        return self._lookup[name].func

    def has_function(self, name: str) -> bool:
        """Check if a name resolves to an operation."""
        return name in self._lookup

    def describe(self, name: str) -> Operation:
        """
        Get the descriptor (arity, summary) of an operation.

        Raises:
            KeyError: If the name is unknown
        """
        return self._lookup[name]

    def list_functions(self) -> list[str]:
        """Return the published names, sorted."""
        return sorted(self._operations)

    def as_mapping(self) -> Mapping[str, HostFunction]:
        """Return the read-only mapping of published name to callable."""
        return self._mapping

    def call(self, name: str, *values: Any) -> Any:
        """Invoke an operation with the given host values as its arguments."""
        return self.get_function(name)(list(values))

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)


def build_registry() -> MathRegistry:
    """
    Build the registry of published operations.

    Raises:
        RuntimeError: If the declared operations do not match
            :data:`PUBLISHED_NAMES`
    """
    by_name = {op.published: op for op in declared_operations()}
    missing = [name for name in PUBLISHED_NAMES if name not in by_name]
    extra = sorted(set(by_name) - set(PUBLISHED_NAMES))
    if missing or extra:
        raise RuntimeError(
            f"Published operations out of sync (missing: {missing}, undeclared: {extra})"
        )
    return MathRegistry(by_name[name] for name in PUBLISHED_NAMES)


REGISTRY = build_registry()

# The single export handed to host runtimes
MATH_FUNCTIONS: Mapping[str, Callable[..., Any]] = REGISTRY.as_mapping()


def export() -> Mapping[str, Callable[..., Any]]:
    """Return the mapping of published names to callables."""
    return MATH_FUNCTIONS
