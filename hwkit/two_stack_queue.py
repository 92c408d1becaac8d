"""A first-in, first-out queue built from two stacks."""

from typing import Any

from hwkit.stack import Stack


class TwoStackQueue:
    """FIFO queue using an inbound and an outbound stack."""

    def __init__(self) -> None:
        self._inbound = Stack()
        self._outbound = Stack()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the end of the queue."""
        self._inbound.push(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError if empty."""
        if self._outbound.is_empty():
            while not self._inbound.is_empty():
                self._outbound.push(self._inbound.pop())
        if self._outbound.is_empty():
            raise IndexError("dequeue from empty queue")
        return self._outbound.pop()

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return self._inbound.is_empty() and self._outbound.is_empty()

    def __len__(self) -> int:
        return len(self._inbound) + len(self._outbound)