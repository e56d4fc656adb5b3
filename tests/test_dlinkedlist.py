import pytest

from dstructs.dlinkedlist import DNode, DoublyLinkedList, demo


def assert_consistent(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)


def test_tail_insertion_keeps_order():
    items = list("abcdef")
    lst = DoublyLinkedList(items)
    assert list(lst) == items
    assert_consistent(lst)


def test_head_insertion_reverses_order():
    items = list("abcdef")
    lst = DoublyLinkedList.from_head_insertion(items)
    assert list(lst) == items[::-1]
    assert_consistent(lst)


def test_prior_links():
    lst = DoublyLinkedList("ab")
    first = lst.head.next
    assert isinstance(first, DNode)
    assert first.prior is lst.head
    assert first.next.prior is first


def test_empty_list():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert list(reversed(lst)) == []


@pytest.mark.parametrize("pos", [0, 4])
def test_get_out_of_range(pos):
    with pytest.raises(IndexError):
        DoublyLinkedList("abc").get(pos)


def test_get_and_locate_agree():
    lst = DoublyLinkedList("klmn")
    for pos in range(1, len(lst) + 1):
        assert lst.locate(lst.get(pos)) == pos


def test_locate_missing():
    with pytest.raises(ValueError):
        DoublyLinkedList("abc").locate("z")


def test_insert_matches_builtin_list():
    lst = DoublyLinkedList("abcde")
    model = list("abcde")
    for pos, ch in [(4, "f"), (1, "s"), (8, "t"), (3, "u")]:
        lst.insert(pos, ch)
        model.insert(pos - 1, ch)
        assert list(lst) == model
        assert_consistent(lst)


@pytest.mark.parametrize("pos", [0, -1, 5])
def test_insert_bad_position(pos):
    with pytest.raises(IndexError):
        DoublyLinkedList("abc").insert(pos, "q")


def test_delete_round_trip():
    lst = DoublyLinkedList("abcdef")
    model = list("abcdef")
    for pos in (6, 1, 2, 3, 1, 1):
        assert lst.delete(pos) == model.pop(pos - 1)
        assert list(lst) == model
        assert_consistent(lst)
    assert lst.is_empty()


@pytest.mark.parametrize("pos", [0, 4])
def test_delete_bad_position(pos):
    with pytest.raises(IndexError):
        DoublyLinkedList("abc").delete(pos)


def test_demo_transcript():
    lines = demo()
    assert lines[-2].endswith("a b f d e")
    assert lines[0].startswith("Basic operations of a doubly linked list")