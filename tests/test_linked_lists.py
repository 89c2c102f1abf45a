import pytest

from beginnerkit.linked_lists import DoublyLinkedList, EmptyListError, SinglyLinkedList


def make_doubly(*values):
    items = DoublyLinkedList()
    for value in reversed(values):
        items.push_front(value)
    return items


def test_push_front_orders_newest_first():
    items = DoublyLinkedList()
    for value in (1, 2, 3):
        items.push_front(value)
    assert list(items) == [3, 2, 1]
    assert len(items) == 3


def test_push_back_on_empty_list_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().push_back(1)


def test_push_back_appends():
    items = make_doubly(1)
    items.push_back(2)
    items.push_back(3)
    assert list(items) == [1, 2, 3]


def test_insert_after_middle_and_last():
    items = make_doubly(10, 20, 30)
    items.insert_after(1, 15)
    assert list(items) == [10, 15, 20, 30]
    items.insert_after(4, 40)
    assert list(items) == [10, 15, 20, 30, 40]
    items.push_back(50)
    assert list(items)[-1] == 50
    assert len(items) == 6


def test_insert_after_on_empty_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().insert_after(1, 5)


@pytest.mark.parametrize("position", [0, 4, -1])
def test_insert_after_out_of_range(position):
    items = make_doubly(1, 2, 3)
    with pytest.raises(IndexError):
        items.insert_after(position, 9)
    assert list(items) == [1, 2, 3]


def test_pop_front_and_back():
    items = make_doubly(1, 2, 3)
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert items.pop_back() == 2
    assert list(items) == []
    assert len(items) == 0


def test_pop_on_empty_raises():
    items = DoublyLinkedList()
    with pytest.raises(EmptyListError):
        items.pop_front()
    with pytest.raises(EmptyListError):
        items.pop_back()


def test_list_reusable_after_emptying():
    items = make_doubly(7)
    items.pop_front()
    items.push_front(8)
    items.push_back(9)
    assert list(items) == [8, 9]


@pytest.mark.parametrize("position", [1, 2, 3])
def test_remove_at_each_position(position):
    values = [5, 6, 7]
    items = make_doubly(*values)
    assert items.remove_at(position) == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert list(items) == expected
    assert len(items) == 2


def test_remove_at_out_of_range():
    items = make_doubly(1, 2)
    with pytest.raises(IndexError):
        items.remove_at(3)
    with pytest.raises(EmptyListError):
        DoublyLinkedList().remove_at(1)


def test_backward_links_stay_consistent():
    items = make_doubly(1, 2, 3, 4)
    items.remove_at(2)
    items.insert_after(1, 9)
    popped = [items.pop_back() for _ in range(len(items))]
    assert popped == [4, 3, 9, 1]


def test_singly_append_and_prepend():
    items = SinglyLinkedList()
    items.append(100)
    items.append(200)
    items.prepend(300)
    assert list(items) == [300, 100, 200]


def test_singly_prepend_on_empty_then_append():
    items = SinglyLinkedList()
    items.prepend(1)
    items.append(2)
    assert list(items) == [1, 2]


def test_render_empty():
    assert SinglyLinkedList().render() == "\nEmpty List"


def test_render_sample_list():
    items = SinglyLinkedList()
    items.append(100)
    items.append(200)
    items.prepend(300)
    items.prepend(400)
    items.prepend(500)
    assert items.render() == (
        "List:\n| 00500 |--->| 00400 |--->| 00300 |--->| 00100 |--->| 00200 |\n\n"
    )


def test_render_single_item_has_no_arrow():
    items = SinglyLinkedList()
    items.append(7)
    assert items.render() == "List:\n| 00007 |\n\n"