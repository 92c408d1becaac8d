"""A simple last-in, first-out stack."""

from typing import Any


class Stack:
    """LIFO stack of values."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return not self._items

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)