"""
mathfn Argument Validator.

Arity constraints for operations. Each constraint knows which argument
counts it accepts and how to phrase the error when a call does not match.
Validation always runs before any argument is coerced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from mathfn.utils.errors import ArityError


def _arguments(n: int) -> str:
    return "argument" if n == 1 else "arguments"


class Arity(ABC):
    """Base class for arity constraints."""

    @abstractmethod
    def accepts(self, count: int) -> bool:
        """Return True if a call with ``count`` arguments is allowed."""

    @abstractmethod
    def describe(self) -> str:
        """Return the expectation used in error messages."""

    def validate(self, op: str, args: Sequence[Any]) -> None:
        """
        Check the argument list of a call.

        Raises:
            ArityError: If the number of arguments is not accepted
        """
        if not self.accepts(len(args)):
            raise ArityError(f"expected {self.describe()}", op=op)


@dataclass(frozen=True, slots=True)
class Exact(Arity):
    """Exactly ``n`` arguments."""

    n: int

    def accepts(self, count: int) -> bool:
        return count == self.n

    def describe(self) -> str:
        return f"{self.n} {_arguments(self.n)}"


@dataclass(frozen=True, slots=True)
class AtLeast(Arity):
    """``n`` or more arguments."""

    n: int

    def accepts(self, count: int) -> bool:
        return count >= self.n

    def describe(self) -> str:
        return f"at least {self.n} {_arguments(self.n)}"


@dataclass(frozen=True, slots=True)
class Between(Arity):
    """Between ``lo`` and ``hi`` arguments, inclusive."""

    lo: int
    hi: int

    def accepts(self, count: int) -> bool:
        return self.lo <= count <= self.hi

    def describe(self) -> str:
        return f"between {self.lo} and {self.hi} arguments"


@dataclass(frozen=True, slots=True)
class OneOf(Arity):
    """Any argument count from a fixed set."""

    counts: frozenset[int]

    def accepts(self, count: int) -> bool:
        return count in self.counts

    def describe(self) -> str:
        listed = ", ".join(str(k) for k in sorted(self.counts))
        return f"one of {{{listed}}} arguments"
