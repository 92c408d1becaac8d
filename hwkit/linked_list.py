"""Singly linked list with a sentinel head and position-based editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Position:
    """A cell of a linked list: a value and a link to the following cell."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Position | None = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Position({self.value!r})"


class LinkedList:
    """Singly linked list whose head is a sentinel cell holding no value.

    Insertion and removal happen after a given position, so the sentinel
    returned by :meth:`head` addresses the front of the list.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = Position()
        self._size = 0
        tail = self._head
        for value in values:
            tail = self.insert_after(tail, value)

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._head.next is None

    def head(self) -> Position:
        """Return the sentinel position that precedes the first value."""
        return self._head

    def insert_after(self, position: Position, value: Any) -> Position:
        """Insert ``value`` right after ``position`` and return its new cell."""
        if position is None:
            raise ValueError("position must not be None")
        cell = Position(value, position.next)
        position.next = cell
        self._size += 1
        return cell

    def remove_after(self, position: Position) -> Any:
        """Remove the cell after ``position`` and return its value.

        Raises IndexError if nothing follows ``position``.
        """
        if position is None:
            raise ValueError("position must not be None")
        removed = position.next
        if removed is None:
            raise IndexError("no element after the given position")
        position.next = removed.next
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        cell = self._head.next
        while cell is not None:
            yield cell.value
            cell = cell.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def delete_odd_indexes(linked_list: LinkedList) -> None:
    """Remove every element at an odd zero-based index, in place."""
    position = linked_list.head().next
    while position is not None and position.next is not None:
        linked_list.remove_after(position)
        position = position.next


def only_odd_values(linked_list: LinkedList) -> bool:
    """Return True if every value in the list is odd."""
    return all(value % 2 == 1 for value in linked_list)