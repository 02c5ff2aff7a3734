"""Typed 32-bit index values with a distinguished null value."""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar, TypeVar

UINT32_MASK = 0xFFFFFFFF

_T = TypeVar("_T", bound="IndexLike")


@total_ordering
class IndexLike:
    """An unsigned 32-bit index tagged with its own type.

    A default-constructed index is null. Indexes of different types never
    compare equal and cannot be ordered against each other.
    """

    __slots__ = ("_value",)

    NULL_VALUE: ClassVar[int] = UINT32_MASK

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            self._value = self.NULL_VALUE
        else:
            self._value = int(value) & UINT32_MASK

    @classmethod
    def make(cls: type[_T], value: int) -> _T:
        """Build an index from an integer, wrapped to 32 bits."""
        return cls(value)

    @classmethod
    def null(cls: type[_T]) -> _T:
        """Return the null index of this type."""
        return cls(cls.NULL_VALUE)

    def to_int(self) -> int:
        return self._value

    def is_valid(self) -> bool:
        return self._value != self.NULL_VALUE

    def is_null(self) -> bool:
        return self._value == self.NULL_VALUE

    def next(self: _T) -> _T:
        """Return the index that follows this one."""
        return type(self).make(self._value + 1)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        if self.is_null():
            return f"{type(self).__name__}.null()"
        return f"{type(self).__name__}({self._value})"