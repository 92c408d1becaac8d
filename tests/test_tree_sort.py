from collections import Counter

import pytest

from hwkit.tree import Node
from hwkit.tree_sort import insert_into_search_tree, is_sorted, tree_sort


@pytest.mark.parametrize(
    "values",
    [[1, -2, 94, 94, 0, 5], [0, 0, 0], [1000], []],
)
def test_tree_sort_sorts_and_keeps_values(values):
    result = tree_sort(values)
    assert is_sorted(result)
    assert Counter(result) == Counter(values)


def test_tree_sort_pinned_example():
    assert tree_sort([1, -2, 94, 94, 0, 5]) == [-2, 0, 1, 5, 94, 94]


def test_tree_sort_empty():
    assert tree_sort([]) == []


def test_tree_sort_accepts_iterator():
    assert tree_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([2, 1])
    assert is_sorted([])
    assert is_sorted([1000])


def test_insert_equal_goes_left():
    root = Node(5)
    created = insert_into_search_tree(root, 5)
    assert root.left is created
    assert root.right is None
    assert created.value == 5


def test_insert_greater_goes_right():
    root = Node(5)
    insert_into_search_tree(root, 7)
    insert_into_search_tree(root, 6)
    assert root.right.value == 7
    assert root.right.left.value == 6
    assert list(root.in_order()) == [5, 6, 7]