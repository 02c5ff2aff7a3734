"""Cursors over component storage handed to per-entity jobs."""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Generic, MutableSequence, TypeVar

T = TypeVar("T")

_NULL_DEREFERENCE = "null component handler dereference"


class ComponentHandler(Generic[T]):
    """A position inside a mutable sequence of components, or null.

    A handler created without storage is null: it is falsy and reading or
    writing through it raises RuntimeError. Required handlers always move
    when advanced; optional ones stay null once null; shared ones never move.
    """

    __slots__ = ("_storage", "_position")

    required: ClassVar[bool] = True
    shared: ClassVar[bool] = False

    def __init__(self, storage: MutableSequence[T] | None = None, position: int = 0) -> None:
        if position < 0:
            raise IndexError(f"position must not be negative, got {position}")
        self._storage = storage
        self._position = position if storage is not None else 0

    @property
    def position(self) -> int:
        """Offset of the current component inside the storage."""
        return self._position

    def _checked_storage(self) -> MutableSequence[T]:
        if self._storage is None:
            raise RuntimeError(_NULL_DEREFERENCE)
        return self._storage

    def get(self) -> T:
        """Return the component the handler points at."""
        return self._checked_storage()[self._position]

    def set(self, value: T) -> None:
        """Replace the component the handler points at."""
        self._checked_storage()[self._position] = value

    def advance(self, count: int = 1) -> ComponentHandler[T]:
        """Move forward by ``count`` components and return the handler as it was."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if self.shared:
            return self
        before = copy.copy(self)
        if self._storage is not None:
            self._position += count
        return before

    def at(self, offset: int) -> Any:
        """Component ``offset`` places ahead.

        Required handlers return the component itself; optional handlers
        return a handler to it, which stays null when this one is null.
        """
        if offset < 0:
            raise IndexError(f"offset must not be negative, got {offset}")
        if self.required:
            return self._checked_storage()[self._position + offset]
        if self._storage is None:
            return type(self)()
        return type(self)(self._storage, self._position + offset)

    def __getitem__(self, offset: int) -> Any:
        return self.at(offset)

    def __iadd__(self, count: int) -> ComponentHandler[T]:
        self.advance(count)
        return self

    def __bool__(self) -> bool:
        return self._storage is not None

    def __copy__(self) -> ComponentHandler[T]:
        return type(self)(self._storage, self._position)

    def __repr__(self) -> str:
        if self._storage is None:
            return f"{type(self).__name__}(null)"
        return f"{type(self).__name__}(position={self._position})"


class RequiredComponent(ComponentHandler[T]):
    """Handler for a component every matched entity has."""

    __slots__ = ()
    required = True


class OptionalComponent(ComponentHandler[T]):
    """Handler for a component an entity may lack; null when absent."""

    __slots__ = ()
    required = False


class SharedComponent(ComponentHandler[T]):
    """Handler for one component shared by a whole archetype; never moves."""

    __slots__ = ()
    required = True
    shared = True