"""A stack of integers that the push_swap operations work on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from pushswap.printf import printf


class Stack:
    """An ordered pile of integers whose first element is the top."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._items: deque[int] = deque(values or ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """The first value of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def push_front(self, value: int) -> None:
        """Put *value* on top of the stack."""
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        """Put *value* at the bottom of the stack."""
        self._items.append(value)

    def pop_front(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def pop_back(self) -> int:
        """Remove and return the bottom value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) > 1:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if len(self._items) > 1:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if len(self._items) > 1:
            self._items.rotate(1)

    def is_sorted(self) -> bool:
        """True when the values never decrease from top to bottom."""
        items = list(self._items)
        return all(a <= b for a, b in zip(items, items[1:]))

    def has_duplicate(self) -> bool:
        """True when some value occurs more than once."""
        return len(set(self._items)) != len(self._items)

    def max_value(self) -> int:
        """The largest value."""
        if not self._items:
            raise ValueError("max of an empty stack")
        return max(self._items)

    def min_value(self) -> int:
        """The smallest value."""
        if not self._items:
            raise ValueError("min of an empty stack")
        return min(self._items)

    def copy(self) -> Stack:
        """An independent stack holding the same values."""
        return Stack(self._items)

    def remove_value(self, value: int) -> None:
        """Rotate until *value* is on top, then remove it."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value} is not in the stack") from None
        self._items.rotate(-index)
        self._items.popleft()

    def show(self) -> int:
        """Print every value on its own line, top first; return how many were printed."""
        for value in self._items:
            printf("%d\n", value)
        return len(self._items)