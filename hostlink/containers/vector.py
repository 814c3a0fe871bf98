"""Growable vector container with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from hostlink.common import ValueType

__all__ = ["Vector"]


class Vector:
    """A dynamically sized sequence of elements of one declared value type.

    Capacity is tracked separately from length and grows by doubling on
    single-element pushes, the way a contiguous buffer would.
    """

    def __init__(self, value_type: ValueType) -> None:
        self.value_type = value_type
        self._items: list[Any] = []
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range")

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
        return f"Vector({self.value_type.name}, {self._items!r})"

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def capacity(self) -> int:
        """Return the number of elements that fit without growing."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Grow capacity to at least ``n``; never shrinks."""
        if n > self._capacity:
            self._capacity = n

    def shrink_to_fit(self) -> None:
        """Reduce capacity to the current length (no effect when empty)."""
        size = len(self._items)
        if size == 0 or size == self._capacity:
            return
        self._capacity = size

    def clear(self) -> None:
        """Remove all elements, keeping capacity."""
        self._items.clear()

    def insert(self, index: int, value: Any) -> int:
        """Insert ``value`` before ``index`` and return the index it landed at."""
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError(f"insert position {index} out of range")
        if size == self._capacity:
            self.reserve(self._capacity * 2)
        if index == size:
            self.push_back(value)
            return len(self._items) - 1
        self._items.insert(index, value)
        return index

    def insert_range(self, index: int, values: Iterable[Any]) -> int:
        """Insert all ``values`` before ``index`` and return the index of the first."""
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError(f"insert position {index} out of range")
        new = list(values)
        if not new:
            return index
        if size + len(new) > self._capacity:
            self.reserve(size + len(new))
        self._items[index:index] = new
        return index

    def erase(self, start: int, stop: int) -> int:
        """Remove elements in ``[start, stop)`` and return the index following them."""
        if not 0 <= start <= stop <= len(self._items):
            raise IndexError(f"erase range [{start}, {stop}) out of range")
        del self._items[start:stop]
        return start

    def push_back(self, value: Any) -> None:
        """Append ``value``, doubling capacity when full."""
        if len(self._items) == self._capacity:
            self.reserve(1 if self._capacity == 0 else self._capacity * 2)
        self._items.append(value)

    def append_range(self, values: Iterable[Any]) -> None:
        """Append all ``values``, growing capacity to exactly what is needed."""
        new = list(values)
        if not new:
            return
        needed = len(self._items) + len(new)
        if needed > self._capacity:
            self.reserve(needed)
        self._items.extend(new)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def resize(self, n: int, value: Any) -> None:
        """Set the length to ``n``, padding with ``value`` when growing."""
        if n < 0:
            raise ValueError("size must not be negative")
        size = len(self._items)
        if n > size:
            self.reserve(n)
            self._items.extend([value] * (n - size))
        else:
            del self._items[n:]

    def swap(self, other: Vector) -> None:
        """Exchange contents and capacity with a vector of the same value type."""
        if not isinstance(other, Vector):
            raise TypeError("can only swap with another Vector")
        if other.value_type is not self.value_type:
            raise TypeError("cannot swap vectors of different value types")
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity