"""Library-wide settings."""

from __future__ import annotations

from enum import Enum


class FunctionSafety(Enum):
    """Whether a function checks its arguments before using them."""

    UNSAFE = 0
    SAFE = 1
    DEFAULT = 1


def is_safe(safety: FunctionSafety) -> bool:
    return safety is FunctionSafety.SAFE