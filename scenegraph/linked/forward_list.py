"""Singly linked list containers with list-splicing, rotation and reversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _index_by_identity(items: deque, item: Any) -> int:
    position = next((i for i, x in enumerate(items) if x is item), None)
    if position is None:
        raise ValueError(f"{item!r} is not in the list")
    return position


def _remove_by_identity(items: deque, item: Any) -> Any:
    """Remove the given object from ``items`` and return it."""
    position = _index_by_identity(items, item)
    items.rotate(-position)
    removed = items.popleft()
    items.rotate(position)
    return removed


class ForwardList(Generic[T]):
    """A singly linked list of items.

    Items are tracked by identity: removing an item removes that very
    object, not merely an equal one.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque(items or ())

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ForwardList({list(self._items)!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def front(self) -> T:
        """Return the first item; raise IndexError if the list is empty."""
        if not self._items:
            raise IndexError("front() of empty ForwardList")
        return self._items[0]

    def back(self) -> T:
        """Return the last item; raise IndexError if the list is empty."""
        if not self._items:
            raise IndexError("back() of empty ForwardList")
        return self._items[-1]

    def push_front(self, item: T) -> None:
        """Insert an item at the front."""
        self._items.appendleft(item)

    def push_back(self, item: T) -> None:
        """Insert an item at the back."""
        self._items.append(item)

    def prepend_list(self, other: ForwardList[T]) -> None:
        """Move all items of ``other`` in front of this list's items."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        other._items.extend(self._items)
        self._items = other._items
        other._items = deque()

    def append_list(self, other: ForwardList[T]) -> None:
        """Move all items of ``other`` behind this list's items."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        self._items.extend(other._items)
        other._items.clear()

    def remove(self, item: T) -> T:
        """Remove the given item object and return it; raise ValueError if absent."""
        return _remove_by_identity(self._items, item)

    def rotate(self, n: int = 1) -> None:
        """Move the front item to the back, n times."""
        if n < 0:
            raise ValueError("rotation count must not be negative")
        self._items.rotate(-n)

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._items.reverse()

    def swap(self, other: Any) -> None:
        """Exchange contents with another ForwardList."""
        if not isinstance(other, ForwardList):
            raise TypeError(f"cannot swap ForwardList with {type(other).__name__}")
        self._items, other._items = other._items, self._items


class CircularForwardList(Generic[T]):
    """A circular singly linked list; iteration starts at the front item.

    Items are tracked by identity, as in ForwardList.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque(items or ())

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"CircularForwardList({list(self._items)!r})"

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def front(self) -> T:
        """Return the first item; raise IndexError if the list is empty."""
        if not self._items:
            raise IndexError("front() of empty CircularForwardList")
        return self._items[0]

    def back(self) -> T:
        """Return the last item; raise IndexError if the list is empty."""
        if not self._items:
            raise IndexError("back() of empty CircularForwardList")
        return self._items[-1]

    def push_front(self, item: T) -> None:
        """Insert an item at the front."""
        self._items.appendleft(item)

    def push_back(self, item: T) -> None:
        """Insert an item at the back."""
        self._items.append(item)

    def remove(self, item: T) -> T:
        """Remove the given item object and return it; raise ValueError if absent."""
        return _remove_by_identity(self._items, item)

    def rotate(self, n: int = 1) -> None:
        """Advance the start of the circle by n items."""
        if n < 0:
            raise ValueError("rotation count must not be negative")
        self._items.rotate(-n)

    def reverse(self) -> None:
        """Reverse the order of the items in place."""
        self._items.reverse()

    def swap(self, other: Any) -> None:
        """Exchange contents with another CircularForwardList."""
        if not isinstance(other, CircularForwardList):
            raise TypeError(f"cannot swap CircularForwardList with {type(other).__name__}")
        self._items, other._items = other._items, self._items