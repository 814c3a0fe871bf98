"""Fixed-size array container."""

from __future__ import annotations

from typing import Any, Iterator

from hostlink.common import ValueType

__all__ = ["Array"]


class Array:
    """A fixed-size sequence of elements of one declared value type.

    Slots start out as ``None`` until assigned or filled.
    """

    def __init__(self, value_type: ValueType, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.value_type = value_type
        self._items: list[Any] = [None] * size

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Array({self.value_type.name}, {self._items!r})"

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of empty array")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of empty array")
        return self._items[-1]

    def fill(self, value: Any) -> None:
        """Set every slot to ``value``."""
        self._items = [value] * len(self._items)

    def swap(self, other: Array) -> None:
        """Exchange contents, size and value type with ``other``."""
        if not isinstance(other, Array):
            raise TypeError("can only swap with another Array")
        self._items, other._items = other._items, self._items
        self.value_type, other.value_type = other.value_type, self.value_type