import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.errors import UnderflowError
from dsakit.linked_list import CircularLinkedList, LinkedList


def test_traversal_keeps_order():
    assert list(LinkedList([7, 1, 18, 3])) == [7, 1, 18, 3]


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_first():
    lst = LinkedList([15, 5, 20, 10])
    node = lst.insert_first(40)
    assert node.data == 40
    assert list(lst) == [40, 15, 5, 20, 10]
    assert len(lst) == 5


def test_insert_at_index():
    lst = LinkedList([15, 5, 20, 10])
    lst.insert_at(2, 13)
    assert list(lst) == [15, 5, 13, 20, 10]


def test_insert_at_zero_and_end():
    lst = LinkedList([1, 2])
    lst.insert_at(0, 0)
    lst.insert_at(3, 3)
    assert list(lst) == [0, 1, 2, 3]


def test_insert_at_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([1, 2]).insert_at(5, 9)


def test_append():
    lst = LinkedList([15, 5, 20, 10])
    lst.append(25)
    assert list(lst) == [15, 5, 20, 10, 25]


def test_append_to_empty():
    lst = LinkedList()
    lst.append(25)
    assert list(lst) == [25]


def test_insert_after_node():
    lst = LinkedList([15, 5, 20, 10])
    lst.insert_after(lst.node_at(2), 78)
    assert list(lst) == [15, 5, 20, 78, 10]


def test_insert_after_foreign_node():
    other = LinkedList([1])
    with pytest.raises(ValueError):
        LinkedList([2]).insert_after(other.node_at(0), 3)


def test_delete_first():
    lst = LinkedList([5, 10, 15, 20])
    assert lst.delete_first() == 5
    assert list(lst) == [10, 15, 20]


def test_delete_first_empty():
    with pytest.raises(UnderflowError):
        LinkedList().delete_first()


def test_delete_at():
    lst = LinkedList([5, 10, 15, 20])
    assert lst.delete_at(2) == 15
    assert list(lst) == [5, 10, 20]


def test_delete_at_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([5, 10]).delete_at(2)


def test_delete_last():
    lst = LinkedList([5, 10, 15, 20])
    assert lst.delete_last() == 20
    assert list(lst) == [5, 10, 15]


def test_delete_last_single():
    lst = LinkedList([5])
    assert lst.delete_last() == 5
    assert list(lst) == []


def test_delete_after_head():
    lst = LinkedList([5, 10, 15, 20])
    assert lst.delete_after(lst.head) == 10
    assert list(lst) == [5, 15, 20]


def test_delete_after_tail_raises():
    lst = LinkedList([5, 10])
    with pytest.raises(ValueError):
        lst.delete_after(lst.node_at(1))


def test_remove_value():
    lst = LinkedList([5, 10, 15, 20])
    lst.remove(15)
    assert list(lst) == [5, 10, 20]
    assert len(lst) == 3


def test_remove_head_value():
    lst = LinkedList([5, 10])
    lst.remove(5)
    assert list(lst) == [10]


def test_remove_missing():
    with pytest.raises(ValueError):
        LinkedList([5, 10]).remove(99)


def test_node_at_out_of_range():
    with pytest.raises(IndexError):
        LinkedList([1]).node_at(1)


@given(st.lists(st.integers()), st.integers(), st.data())
def test_insert_then_delete_round_trip(values, value, data):
    index = data.draw(st.integers(min_value=0, max_value=len(values)))
    lst = LinkedList(values)
    lst.insert_at(index, value)
    assert lst.node_at(index).data == value
    assert lst.delete_at(index) == value
    assert list(lst) == values
    assert len(lst) == len(values)


def test_circular_insert_first():
    circle = CircularLinkedList([1, 5, 10, 15])
    circle.insert_first(20)
    circle.insert_first(25)
    assert list(circle) == [25, 20, 1, 5, 10, 15]
    assert len(circle) == 6


def test_circular_links_back_to_head():
    circle = CircularLinkedList([1, 5, 10])
    node = circle.head
    for _ in range(len(circle)):
        node = node.next
    assert node is circle.head


def test_circular_insert_into_empty():
    circle = CircularLinkedList()
    assert list(circle) == []
    node = circle.insert_first(7)
    assert node.next is node
    assert list(circle) == [7]


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_circular_prepend_invariant(values, extra):
    circle = CircularLinkedList(values)
    for value in extra:
        circle.insert_first(value)
    assert list(circle) == list(reversed(extra)) + values
    assert len(circle) == len(values) + len(extra)