import pytest

from orderbox.container import ElementNotFoundError, OrderedContainer
from orderbox.traversal import Traversal


def _filled(*values):
    container = OrderedContainer()
    for value in values:
        container.add(value)
    return container


def test_default_container_holds_ints():
    container = _filled(1, 2)
    assert len(container) == 2


def test_basic_operations():
    container = OrderedContainer()
    assert len(container) == 0
    container.add(5)
    container.add(10)
    container.add(3)
    assert len(container) == 3
    container.remove(10)
    assert len(container) == 2
    with pytest.raises(ElementNotFoundError):
        container.remove(99)


def test_remove_error_is_runtime_error_with_message():
    container = _filled(5)
    with pytest.raises(RuntimeError, match="Element not found in container"):
        container.remove(99)


def test_remove_drops_every_occurrence():
    container = _filled(4, 1, 4, 2)
    container.remove(4)
    assert list(container) == [1, 2]


def test_constructor_takes_elements():
    container = OrderedContainer([5, 2, 8])
    assert list(container) == [5, 2, 8]


def test_ascending():
    container = _filled(7, 2, 5)
    assert list(container.ascending()) == [2, 5, 7]


def test_ascending_cursor_steps():
    container = _filled(7, 2, 5)
    cursor = container.ascending()
    assert cursor.current() == 2
    cursor.advance()
    assert cursor.current() == 5


def test_ascending_past_end():
    cursor = _filled(7, 2, 5).ascending()
    cursor.advance().advance().advance()
    with pytest.raises(IndexError):
        cursor.current()
    with pytest.raises(IndexError):
        cursor.advance()


def test_descending():
    container = _filled(1, 4, 3)
    assert list(container.descending()) == [4, 3, 1]
    cursor = container.descending()
    assert cursor.current() == 4
    cursor.advance().advance().advance()
    with pytest.raises(IndexError):
        cursor.current()


def test_side_cross():
    container = _filled(1, 3, 5, 7, 9)
    assert list(container.side_cross()) == [1, 9, 3, 7, 5]
    cursor = container.side_cross()
    cursor.advance()
    assert cursor.current() == 9
    for _ in range(4):
        cursor.advance()
    with pytest.raises(IndexError):
        cursor.current()


def test_reverse():
    container = _filled(10, 20, 30)
    assert list(container.reverse()) == [30, 20, 10]
    cursor = container.reverse()
    assert cursor.current() == 30
    cursor.advance().advance().advance()
    with pytest.raises(IndexError):
        cursor.current()


def test_insertion():
    container = _filled(5, 2, 8)
    assert list(container.insertion()) == [5, 2, 8]
    cursor = container.insertion()
    cursor.advance()
    assert cursor.current() == 2
    cursor.advance().advance()
    with pytest.raises(IndexError):
        cursor.current()


def test_middle_out():
    container = _filled(10, 20, 30, 40, 50)
    assert list(container.middle_out()) == [30, 20, 40, 10, 50]
    cursor = container.middle_out()
    assert cursor.current() == 30
    for _ in range(5):
        cursor.advance()
    with pytest.raises(IndexError):
        cursor.current()


@pytest.mark.parametrize("traversal", list(Traversal))
def test_empty_begin_equals_end(traversal):
    empty = OrderedContainer()
    assert empty.traverse(traversal) == empty.traverse(traversal, len(empty))


def test_empty_dereference_raises():
    empty = OrderedContainer()
    assert list(empty.ascending()) == []
    with pytest.raises(IndexError):
        empty.ascending().current()
    with pytest.raises(IndexError):
        empty.reverse().current()
    with pytest.raises(IndexError):
        empty.middle_out().current()


def test_begin_differs_from_end_when_filled():
    container = _filled(1, 2)
    assert not container.ascending() == container.traverse(Traversal.ASCENDING, len(container))


def test_cursors_of_different_containers_are_unequal():
    first = _filled(1)
    second = _filled(1)
    assert not first.insertion() == second.insertion()


def test_strings():
    names = _filled("Alice", "Bob", "Eden")
    assert len(names) == 3
    assert list(names.ascending()) == ["Alice", "Bob", "Eden"]
    assert list(names.reverse()) == ["Eden", "Bob", "Alice"]
    names.remove("Bob")
    assert len(names) == 2
    with pytest.raises(ElementNotFoundError):
        names.remove("yovel")


def test_str_formats_elements():
    assert str(_filled("Alice", "Bob")) == "[Alice, Bob]"
    assert str(OrderedContainer()) == "[]"


def test_every_order_is_a_permutation():
    container = _filled(7, 15, 6, 1, 2)
    for traversal in Traversal:
        assert sorted(container.traverse(traversal)) == sorted(container)