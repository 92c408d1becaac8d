"""Sorting by building a binary search tree and walking it in order."""

from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any

from hwkit.tree import Node


def insert_into_search_tree(root: Node, value: Any) -> Node:
    """Insert ``value`` below ``root``; equal values go to the left.

    Returns the newly created node.
    """
    node = root
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = Node(value)
                return node.left
            node = node.left
        else:
            if node.right is None:
                node.right = Node(value)
                return node.right
            node = node.right


def tree_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using a binary search tree."""
    iterator = iter(values)
    try:
        root = Node(next(iterator))
    except StopIteration:
        return []
    for value in iterator:
        insert_into_search_tree(root, value)
    return list(root.in_order())


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if no value is greater than the one after it."""
    return all(left <= right for left, right in pairwise(values))