"""A list addressed only through one typed index."""

from __future__ import annotations

import copy
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from whisker.index_like import IndexLike

T = TypeVar("T")
I = TypeVar("I", bound=IndexLike)

_MISSING = object()


class ArrayWrapper(Generic[T, I]):
    """Sequence whose items are reached with indexes of ``index_type`` only."""

    def __init__(self, index_type: type[I], items: Iterable[T] = (),
                 factory: Callable[[], T] | None = None) -> None:
        self._index_type = index_type
        self._items: list[T] = list(items)
        self._factory = factory

    @property
    def index_type(self) -> type[I]:
        return self._index_type

    def _position(self, index: I) -> int:
        if not isinstance(index, self._index_type):
            raise TypeError(
                f"expected {self._index_type.__name__}, got {type(index).__name__}"
            )
        return index.to_int()

    def __getitem__(self, index: I) -> T:
        return self._items[self._position(index)]

    def __setitem__(self, index: I, value: T) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ArrayWrapper({self._index_type.__name__}, {self._items!r})"

    def append(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    def erase(self, index: I) -> T:
        """Remove and return the item at ``index``, shifting later items down."""
        return self._items.pop(self._position(index))

    def has(self, index: I) -> bool:
        return self._position(index) < len(self._items)

    def back_index(self) -> I:
        """Index of the last item, or the null index when empty."""
        if not self._items:
            return self._index_type.null()
        return self._index_type.make(len(self._items) - 1)

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of empty array")
        return self._items[-1]

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty array")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def resize(self, new_size: int, value: object = _MISSING) -> None:
        """Truncate or extend to ``new_size`` items.

        New items are copies of ``value``; without it they come from the
        factory, or are None when there is no factory.
        """
        if new_size < 0:
            raise ValueError(f"size must not be negative, got {new_size}")
        current = len(self._items)
        if new_size <= current:
            del self._items[new_size:]
            return
        for _ in range(new_size - current):
            if value is not _MISSING:
                self._items.append(copy.copy(value))  # type: ignore[arg-type]
            elif self._factory is not None:
                self._items.append(self._factory())
            else:
                self._items.append(None)  # type: ignore[arg-type]