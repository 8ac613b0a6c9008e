import pytest

from dsakit.linkedlist import DoublyLinkedList, DoublyNode, SinglyLinkedList, main


def test_singly_init_keeps_order():
    assert list(SinglyLinkedList([4, 5, 6])) == [4, 5, 6]


def test_singly_empty():
    items = SinglyLinkedList()
    assert len(items) == 0
    assert list(items) == []


def test_push_front_puts_value_first():
    items = SinglyLinkedList([2, 3])
    items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_insert_at_middle():
    items = SinglyLinkedList([1, 3])
    items.insert_at(1, 2)
    assert list(items) == [1, 2, 3]


def test_insert_at_ends():
    items = SinglyLinkedList([2])
    items.insert_at(0, 1)
    items.insert_at(2, 3)
    assert list(items) == [1, 2, 3]


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_at_invalid_index(index):
    items = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at(index, 9)
    assert list(items) == [1, 2]


def test_delete_at_returns_value():
    items = SinglyLinkedList([7, 8, 9])
    assert items.delete_at(1) == 8
    assert list(items) == [7, 9]
    assert items.delete_at(0) == 7
    assert list(items) == [9]
    assert len(items) == 1


@pytest.mark.parametrize("index", [-1, 2])
def test_delete_at_invalid_index(index):
    items = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        items.delete_at(index)


def test_doubly_append_and_links():
    items = DoublyLinkedList([1, 2, 3])
    assert list(items) == [1, 2, 3]
    backwards = []
    node = items.tail
    while node is not None:
        backwards.append(node.data)
        node = node.prev
    assert backwards == [3, 2, 1]


def test_doubly_insert_after():
    items = DoublyLinkedList([10, 20, 30])
    node = items.search(20)
    new = items.insert_after(node, 25)
    assert list(items) == [10, 20, 25, 30]
    assert new.prev is node
    assert new.next.prev is new


def test_doubly_insert_after_tail_updates_tail():
    items = DoublyLinkedList([1])
    new = items.insert_after(items.tail, 2)
    assert items.tail is new
    assert list(items) == [1, 2]


def test_doubly_insert_after_none_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList([1]).insert_after(None, 2)


def test_doubly_remove_head_middle_tail():
    items = DoublyLinkedList([1, 2, 3, 4])
    items.remove(items.search(1))
    assert list(items) == [2, 3, 4]
    items.remove(items.search(3))
    assert list(items) == [2, 4]
    items.remove(items.search(4))
    assert list(items) == [2]
    assert items.head is items.tail


def test_doubly_remove_none_is_noop():
    items = DoublyLinkedList([1, 2])
    items.remove(None)
    assert list(items) == [1, 2]


def test_doubly_search_missing():
    assert DoublyLinkedList([1, 2]).search(5) is None


def test_doubly_search_returns_node():
    node = DoublyLinkedList([1, 2]).search(2)
    assert isinstance(node, DoublyNode) and node.data == 2


def test_main_doubly_demo(capsys):
    assert main(["doubly"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Doubly Linked List: 10 20 30 40"
    assert out[-1] == "Element 30 found in the list."


def test_main_count(capsys):
    assert main(["count", "5", "6", "7"]) == 0
    assert "The number of nodes in the linked list are:-3" in capsys.readouterr().out


def test_main_builds_by_pushing_front(capsys):
    assert main(["push-front", "9", "1", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == ["Element:9", "Element:2", "Element:1"]


def test_main_invalid_position(capsys):
    assert main(["delete", "5", "1", "2"]) == 1
    assert "Please enter a valid location" in capsys.readouterr().out