"""Binary tree node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node with a value and optional left and right children."""

    value: Any
    left: Node | None = None
    right: Node | None = None

    def in_order(self) -> Iterator[Any]:
        """Yield the values of this subtree in symmetric (in-order) order."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right