import pytest

from fractol.libft.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_constructor_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_back_appends_and_is_last():
    lst = LinkedList()
    first = lst.add_back("x")
    assert lst.head is first
    second = lst.add_back("y")
    assert lst.last() is second
    assert first.next is second
    assert list(lst) == ["x", "y"]


def test_last_single_node():
    lst = LinkedList(["only"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "only"
    assert tail.next is None


def test_iterate_visits_in_order():
    seen = []
    LinkedList([5, 6, 7]).iterate(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]


def test_clear_calls_delete_on_each_and_empties():
    deleted = []
    lst = LinkedList(["a", "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_len_matches_iteration():
    lst = LinkedList(range(8))
    lst.add_front(-1)
    lst.add_back(99)
    assert len(lst) == len(list(lst))
    assert list(lst)[0] == -1
    assert list(lst)[-1] == 99