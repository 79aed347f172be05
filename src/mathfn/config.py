"""
mathfn Configuration.

Process-wide settings for the function library. Configuration lives in
memory only; hosts adjust it with :func:`configure` before evaluating
expressions.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MathConfig:
    """
    Settings shared by all operations.

    Attributes:
        coerce_strings: Parse string arguments as decimal numbers. When
            disabled, every string argument is a type error.
        initial_seed: Seed for the process-wide random source when it is
            first created. Keeps a fresh process deterministic.
    """

    coerce_strings: bool = True
    initial_seed: int = 1


_config = MathConfig()


def get_config() -> MathConfig:
    """Return the active configuration."""
    return _config


def configure(**changes: Any) -> MathConfig:
    """
    Replace fields of the active configuration.

    Args:
        **changes: Field names of :class:`MathConfig` and their new values

    Returns:
        The new active configuration

    Raises:
        ValueError: If a field name is unknown
    """
    global _config

    known = {f.name for f in dataclasses.fields(MathConfig)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValueError(f"Unknown configuration option(s): {', '.join(unknown)}")

    _config = dataclasses.replace(_config, **changes)
    logger.debug(f"Configuration updated: {_config}")
    return _config


def reset_config() -> MathConfig:
    """Restore the default configuration."""
    global _config
    _config = MathConfig()
    return _config
