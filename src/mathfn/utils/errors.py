"""
Error types raised by mathfn operations.

Every error surfaced to the host carries the name of the operation that
failed and, where one exists, a label for the offending argument.
"""

import builtins
from typing import Optional


class MathFnError(Exception):
    """Base exception for all mathfn errors."""

    def __init__(
        self,
        message: str,
        op: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        self.message = message
        self.op = op
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.context:
            parts.append(self.context)

        parts.append(self.message)

        body = " ".join(parts)
        if self.op:
            return f"{self.op}: {body}"
        return body


class ConversionError(MathFnError):
    """
    Raised by the value adapter when a host value is not numeric.

    Carries only the underlying cause; operations re-raise it as
    :class:`TypeError` with their name and the argument position.
    """

    pass


class ArityError(MathFnError, builtins.TypeError):
    """Raised when an operation receives the wrong number of arguments."""

    pass


class TypeError(MathFnError, builtins.TypeError):
    """Raised when an argument cannot be used as a number."""

    pass
