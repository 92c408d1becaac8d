import pytest

from hwkit.linked_list import LinkedList, delete_odd_indexes, only_odd_values


def test_new_list_is_empty():
    linked_list = LinkedList()
    assert linked_list.is_empty()
    assert len(linked_list) == 0
    assert list(linked_list) == []


def test_add_and_remove():
    linked_list = LinkedList()
    head = linked_list.head()
    linked_list.insert_after(head, 1)
    linked_list.insert_after(head.next, 2)
    linked_list.insert_after(head.next.next, 3)
    assert list(linked_list) == [1, 2, 3]

    assert linked_list.remove_after(head.next) == 2
    assert head.next.value == 1
    assert linked_list.remove_after(head) == 1
    assert linked_list.remove_after(head) == 3
    assert linked_list.is_empty()


def test_insert_after_returns_new_cell():
    linked_list = LinkedList([1, 3])
    cell = linked_list.insert_after(linked_list.head().next, 2)
    assert cell.value == 2
    assert list(linked_list) == [1, 2, 3]
    assert len(linked_list) == 3


def test_remove_after_last_raises():
    linked_list = LinkedList([7])
    with pytest.raises(IndexError):
        linked_list.remove_after(linked_list.head().next)


def test_remove_from_empty_raises():
    linked_list = LinkedList()
    with pytest.raises(IndexError):
        linked_list.remove_after(linked_list.head())


def test_constructor_keeps_order():
    values = [5, 4, 9, 1]
    assert list(LinkedList(values)) == values
    assert len(LinkedList(values)) == len(values)


def test_delete_odd_indexes_even_count():
    linked_list = LinkedList(range(1, 6))
    delete_odd_indexes(linked_list)
    assert only_odd_values(linked_list)
    assert list(linked_list) == [1, 3, 5]


def test_delete_odd_indexes_hundred():
    linked_list = LinkedList(range(1, 101))
    delete_odd_indexes(linked_list)
    assert only_odd_values(linked_list)
    assert list(linked_list) == list(range(1, 101, 2))
    assert len(linked_list) == 50


def test_delete_odd_indexes_empty():
    linked_list = LinkedList()
    delete_odd_indexes(linked_list)
    assert linked_list.is_empty()


def test_only_odd_values_detects_even():
    assert not only_odd_values(LinkedList([1, 2, 3]))
    assert only_odd_values(LinkedList([1, 3]))