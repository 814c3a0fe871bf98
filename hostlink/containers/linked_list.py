"""Doubly linked list container with bidirectional cursors."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator

from hostlink.common import ValueType

__all__ = ["ListCursor", "LinkedList"]


class _Node:
    __slots__ = ("next", "prev", "value")

    def __init__(self, value: Any) -> None:
        self.next: _Node | None = None
        self.prev: _Node | None = None
        self.value = value


class ListCursor:
    """A position in a :class:`LinkedList`, moving forwards or in reverse.

    A cursor whose node is ``None`` stands past the end of its direction.
    Cursors are values: moving one returns a new cursor.
    """

    __slots__ = ("_owner", "_node", "reverse")

    def __init__(self, owner: LinkedList, node: _Node | None, reverse: bool = False) -> None:
        self._owner = owner
        self._node = node
        self.reverse = reverse

    def _base(self) -> _Node | None:
        """Return the node a forward cursor at the same insertion point would hold."""
        if not self.reverse:
            return self._node
        if self._node is None:
            return self._owner._head
        return self._node.next

    def next(self) -> ListCursor:
        """Step one element in the cursor's direction; a past-the-end cursor stays put."""
        node = self._node
        if node is None:
            return self
        return ListCursor(self._owner, node.prev if self.reverse else node.next, self.reverse)

    def prev(self) -> ListCursor:
        """Step one element against the cursor's direction; from past-the-end, onto the last element."""
        node = self._node
        if self.reverse:
            target = self._owner._head if node is None else node.next
        else:
            target = self._owner._tail if node is None else node.prev
        return ListCursor(self._owner, target, self.reverse)

    def __add__(self, n: int) -> ListCursor:
        if n < 0:
            return self - (-n)
        cursor = self
        for _ in range(n):
            if cursor._node is None:
                break
            cursor = cursor.next()
        return cursor

    def __sub__(self, n: int) -> ListCursor:
        if n < 0:
            return self + (-n)
        cursor = self
        for _ in range(n):
            cursor = cursor.prev()
            if cursor._node is None:
                break
        return cursor

    def advance(self, n: int) -> ListCursor:
        """Move ``n`` steps in the list's forward order, whatever the cursor's direction."""
        if n == 0:
            return self
        return self - n if self.reverse else self + n

    def value(self) -> Any:
        """Return the element under the cursor."""
        if self._node is None:
            raise IndexError("cursor is past the end of the list")
        return self._node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self._owner is other._owner and self._base() is other._base()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        where = "end" if self._node is None else repr(self._node.value)
        return f"ListCursor({where}, reverse={self.reverse})"


class LinkedList:
    """A doubly linked list of elements of one declared value type."""

    def __init__(self, value_type: ValueType) -> None:
        self.value_type = value_type
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    # -- inspection -----------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            nxt = node.next
            yield node
            node = nxt

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self._size:
            raise IndexError(f"list index {index} out of range")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        return node.value  # type: ignore[union-attr]

    def __repr__(self) -> str:
        return f"LinkedList({self.value_type.name}, {list(self)!r})"

    def front(self) -> Any:
        """Return the first element."""
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.value

    def back(self) -> Any:
        """Return the last element."""
        if self._tail is None:
            raise IndexError("back of empty list")
        return self._tail.value

    # -- cursors --------------------------------------------------------

    def begin(self) -> ListCursor:
        return ListCursor(self, self._head, False)

    def end(self) -> ListCursor:
        return ListCursor(self, None, False)

    def rbegin(self) -> ListCursor:
        return ListCursor(self, self._tail, True)

    def rend(self) -> ListCursor:
        return ListCursor(self, None, True)

    def _own(self, cursor: ListCursor) -> None:
        if not isinstance(cursor, ListCursor):
            raise TypeError("expected a ListCursor")
        if cursor._owner is not self:
            raise ValueError("cursor belongs to a different list")

    # -- linking helpers ------------------------------------------------

    def _link_before(self, first: _Node, last: _Node, before: _Node | None, count: int) -> None:
        prev = self._tail if before is None else before.prev
        first.prev = prev
        last.next = before
        if prev is None:
            self._head = first
        else:
            prev.next = first
        if before is None:
            self._tail = last
        else:
            before.prev = last
        self._size += count

    def _unlink(self, first: _Node, last: _Node, count: int) -> None:
        prev, nxt = first.prev, last.next
        if prev is None:
            self._head = nxt
        else:
            prev.next = nxt
        if nxt is None:
            self._tail = prev
        else:
            nxt.prev = prev
        first.prev = None
        last.next = None
        self._size -= count

    @staticmethod
    def _chain(values: Iterable[Any]) -> tuple[_Node | None, _Node | None, int]:
        first = last = None
        count = 0
        for value in values:
            node = _Node(value)
            if last is None:
                first = node
            else:
                last.next = node
                node.prev = last
            last = node
            count += 1
        return first, last, count

    # -- modification ---------------------------------------------------

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def insert(self, pos: ListCursor, value: Any) -> ListCursor:
        """Insert ``value`` at ``pos`` and return a forward cursor on it."""
        self._own(pos)
        node = _Node(value)
        self._link_before(node, node, pos._base(), 1)
        return ListCursor(self, node, False)

    def insert_range(self, pos: ListCursor, values: Iterable[Any]) -> ListCursor:
        """Insert ``values`` in order at ``pos`` and return a forward cursor on the first."""
        self._own(pos)
        before = pos._base()
        first, last, count = self._chain(values)
        if first is None:
            return ListCursor(self, before, False)
        self._link_before(first, last, before, count)  # type: ignore[arg-type]
        return ListCursor(self, first, False)

    def erase(self, start: ListCursor, stop: ListCursor) -> ListCursor:
        """Remove the elements from ``start`` up to ``stop`` and return ``stop``."""
        self._own(start)
        self._own(stop)
        if start.reverse != stop.reverse:
            raise ValueError("start and stop must run in the same direction")
        doomed = []
        node = start._node
        while node is not stop._node:
            if node is None:
                raise ValueError("stop is not reachable from start")
            doomed.append(node)
            node = node.prev if start.reverse else node.next
        for node in doomed:
            self._unlink(node, node, 1)
        return ListCursor(self, stop._node, stop.reverse)

    def push_back(self, value: Any) -> None:
        """Append ``value``."""
        self.insert(self.end(), value)

    def append_range(self, values: Iterable[Any]) -> None:
        """Append every one of ``values`` in order."""
        self.insert_range(self.end(), values)

    def pop_back(self) -> None:
        """Remove the last element; does nothing when empty."""
        if self._tail is not None:
            self._unlink(self._tail, self._tail, 1)

    def push_front(self, value: Any) -> None:
        """Prepend ``value``."""
        self.insert(self.begin(), value)

    def prepend_range(self, values: Iterable[Any]) -> None:
        """Insert ``values`` at the front, keeping their order."""
        self.insert_range(self.begin(), values)

    def pop_front(self) -> None:
        """Remove the first element; does nothing when empty."""
        if self._head is not None:
            self._unlink(self._head, self._head, 1)

    def resize(self, n: int, value: Any) -> None:
        """Truncate to ``n`` elements or pad with ``value`` up to ``n``."""
        if n <= 0:
            self.clear()
        elif n < self._size:
            self.erase(self.begin() + n, self.end())
        else:
            self.append_range([value] * (n - self._size))

    def swap(self, other: LinkedList) -> None:
        """Exchange contents with ``other``."""
        if not isinstance(other, LinkedList):
            raise TypeError("can only swap with another LinkedList")
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._size, other._size = other._size, self._size

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        for node in self._nodes():
            node.next, node.prev = node.prev, node.next
        self._head, self._tail = self._tail, self._head

    def merge(self, other: LinkedList) -> None:
        """Move all of ``other``'s elements onto the end of this list."""
        if not isinstance(other, LinkedList):
            raise TypeError("can only merge another LinkedList")
        if other is self:
            raise ValueError("cannot merge a list into itself")
        if other.value_type is not self.value_type:
            raise TypeError("cannot merge lists of different value types")
        if other._head is None:
            return
        first, last, count = other._head, other._tail, other._size
        other.clear()
        self._link_before(first, last, None, count)  # type: ignore[arg-type]

    def splice(self, pos: ListCursor, other: LinkedList, start: ListCursor, stop: ListCursor) -> None:
        """Move ``other``'s elements in ``[start, stop)`` to before ``pos`` in this list."""
        self._own(pos)
        other._own(start)
        other._own(stop)
        if start.reverse or stop.reverse:
            raise ValueError("splice range must use forward cursors")
        moved = []
        node = start._node
        while node is not stop._node:
            if node is None:
                raise ValueError("stop is not reachable from start")
            moved.append(node)
            node = node.next
        if not moved:
            return
        before = pos._base()
        if before is not None and any(n is before for n in moved):
            raise ValueError("insertion point lies inside the spliced range")
        first, last = moved[0], moved[-1]
        other._unlink(first, last, len(moved))
        self._link_before(first, last, before, len(moved))

    def _drop_where(self, condition: Callable[[Any], bool]) -> None:
        for node in self._nodes():
            if condition(node.value):
                self._unlink(node, node, 1)

    def remove(self, value: Any) -> None:
        """Remove every element equal to ``value``."""
        self._drop_where(lambda item: item == value)

    def remove_if(self, predicate: Callable[[Any], Any]) -> None:
        """Remove every element for which ``predicate`` is true."""
        self._drop_where(lambda item: bool(predicate(item)))

    def unique(self) -> None:
        """Collapse each run of equal adjacent elements to its first element."""
        node = self._head
        while node is not None and node.next is not None:
            if node.next.value == node.value:
                dup = node.next
                self._unlink(dup, dup, 1)
            else:
                node = node.next

    def sort(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        """Stable sort; ``compare(a, b)`` returns negative, zero or positive."""
        nodes = list(self._nodes())
        if compare is None:
            nodes.sort(key=lambda n: n.value)
        else:
            nodes.sort(key=cmp_to_key(lambda a, b: compare(a.value, b.value)))
        self.clear()
        for node in nodes:
            node.next = node.prev = None
            self._link_before(node, node, None, 1)