import pytest

from minishell.linked import LinkedList, Node


def test_values_kept_in_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.last() is None


def test_push_front_and_back():
    lst = LinkedList(["b"])
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back(7)
    assert lst.head is node
    assert lst.last() is node


def test_last_is_final_node():
    lst = LinkedList([4, 5, 6])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.value == 6
    assert tail.next is None


def test_nodes_are_linked():
    lst = LinkedList(["x", "y"])
    assert lst.head.value == "x"
    assert lst.head.next.value == "y"
    assert lst.head.next.next is None


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_value():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_for_each_requires_function():
    with pytest.raises(TypeError):
        LinkedList([1]).for_each(None)


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    doubled = lst.map(lambda v: v * 2)
    assert list(doubled) == [v * 2 for v in lst]
    assert list(lst) == [1, 2, 3]
    assert doubled.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_requires_function():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None)