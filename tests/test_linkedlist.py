import pytest

from minitalk.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back(1)
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node


def test_last_returns_tail_node():
    lst = LinkedList(["x", "y"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "y"
    assert tail.next is None


def test_pop_front_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList([10, 20])
    assert lst.pop_front(deleted.append) == 10
    assert deleted == [10]
    assert list(lst) == [20]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]


def test_map_failure_deletes_built_contents():
    deleted = []

    def func(x):
        if x == 3:
            raise ValueError("boom")
        return x

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [1, 2]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0