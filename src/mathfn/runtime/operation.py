"""
mathfn Operation declarations.

Operations are plain functions taking the host's argument list. The
:func:`builtin` decorator attaches a name and an arity constraint to each
one, validates the argument count before the body runs, and records the
operation so the registry can publish it.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from mathfn.runtime.arity import Arity

HostFunction = Callable[[Sequence[Any]], Any]


@dataclass(frozen=True, slots=True)
class Operation:
    """
    Descriptor of a library operation.

    Attributes:
        name: Internal snake_case name, used in error messages
        published: Name under which the host sees the operation
        func: Callable taking the list of host arguments
        arity: Accepted argument counts
        summary: One-line description for host documentation
    """

    name: str
    published: str
    func: HostFunction
    arity: Arity
    summary: str = ""


# Declared operations in declaration order (internal name -> Operation)
_OPERATIONS: dict[str, Operation] = {}


def _summary(func: Callable[..., Any]) -> str:
    doc = (func.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


def builtin(
    name: str, arity: Arity, published: Optional[str] = None
) -> Callable[[HostFunction], HostFunction]:
    """
    Declare a library operation.

    Args:
        name: Internal name, reported in error messages
        arity: Argument count constraint checked on every call
        published: Host-visible name when it differs from ``name``

    Example:
        @builtin("abs", Exact(1))
        def math_abs(args):
            ...
    """

    def decorator(func: HostFunction) -> HostFunction:
        @functools.wraps(func)
        def wrapper(args: Sequence[Any]) -> Any:
            arity.validate(name, args)
            return func(args)

        operation = Operation(
            name=name,
            published=published or name,
            func=wrapper,
            arity=arity,
            summary=_summary(func),
        )
        if name in _OPERATIONS:
            raise ValueError(f"Operation '{name}' is already declared")
        _OPERATIONS[name] = operation
        wrapper.__operation__ = operation
        return wrapper

    return decorator


def declared_operations() -> list[Operation]:
    """Return every declared operation in declaration order."""
    return list(_OPERATIONS.values())
