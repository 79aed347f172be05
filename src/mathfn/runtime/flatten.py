"""
mathfn Flattener.

Reducers accept any mix of scalars and flat lists. The flattener expands
lists one level deep and coerces every element to a double, preserving
left-to-right order and remembering where each value came from so that
errors can point at the offending argument.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from mathfn.runtime.values import is_list, number_arg


@dataclass(frozen=True, slots=True)
class Provenance:
    """
    Position of a flattened value in the caller's argument list.

    Attributes:
        index: 0-based index of the argument
        item: 0-based index inside a list argument, None for scalars
    """

    index: int
    item: Optional[int] = None

    @property
    def label(self) -> str:
        if self.item is None:
            return f"argument {self.index}"
        return f"list argument {self.index} item {self.item}"

    def __str__(self) -> str:
        return self.label


def iter_flat(op: str, args: Sequence[Any]) -> Iterator[tuple[Provenance, float]]:
    """
    Yield ``(provenance, value)`` pairs for a mixed argument list.

    List arguments are expanded one level. Nested lists are not unwrapped
    and fail coercion like any other non-numeric value.

    Raises:
        TypeError: On the first value that cannot be coerced

    Example:
        >>> [(str(p), x) for p, x in iter_flat("sum", [1, [2, 3]])]
        [('argument 0', 1.0), ('list argument 1 item 0', 2.0), ('list argument 1 item 1', 3.0)]
    """
    for i, arg in enumerate(args):
        if is_list(arg):
            for j, item in enumerate(arg):
                where = Provenance(i, j)
                yield where, number_arg(op, item, where.label)
        else:
            where = Provenance(i)
            yield where, number_arg(op, arg, where.label)


def flatten(op: str, args: Sequence[Any]) -> np.ndarray:
    """Flatten a mixed argument list into a float64 array."""
    return np.fromiter((x for _, x in iter_flat(op, args)), dtype=np.float64)
