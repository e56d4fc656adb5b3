import pytest

from dstructs.linkedlist import LinkedList, Node, demo


def test_tail_insertion_keeps_order():
    items = list("daxgdchaeb")
    assert list(LinkedList(items)) == items


def test_head_insertion_reverses_order():
    items = list("12345678")
    assert list(LinkedList.from_head_insertion(items)) == items[::-1]


def test_nodes_are_linked_from_header():
    lst = LinkedList("ab")
    assert isinstance(lst.head, Node)
    assert lst.head.next.data == "a"
    assert lst.head.next.next.data == "b"
    assert lst.head.next.next.next is None


def test_length_and_empty():
    assert LinkedList().is_empty()
    lst = LinkedList("abc")
    assert len(lst) == 3
    assert not lst.is_empty()


def test_str_matches_items():
    lst = LinkedList("xyz")
    assert str(lst).split(" ") == list(lst)


@pytest.mark.parametrize("pos", [0, -3, 4])
def test_get_out_of_range(pos):
    with pytest.raises(IndexError):
        LinkedList("abc").get(pos)


def test_get_and_locate_agree():
    lst = LinkedList("pqrs")
    for pos in range(1, len(lst) + 1):
        assert lst.locate(lst.get(pos)) == pos


def test_locate_missing():
    with pytest.raises(ValueError):
        LinkedList("abc").locate("z")


def test_insert_matches_builtin_list():
    lst = LinkedList("abcde")
    model = list("abcde")
    for pos, ch in [(4, "f"), (1, "s"), (8, "t")]:
        lst.insert(pos, ch)
        model.insert(pos - 1, ch)
        assert list(lst) == model


@pytest.mark.parametrize("pos", [0, 5])
def test_insert_bad_position(pos):
    lst = LinkedList("abc")
    with pytest.raises(IndexError):
        lst.insert(pos, "q")
    assert list(lst) == ["a", "b", "c"]


def test_delete_round_trip():
    lst = LinkedList("abcde")
    model = list("abcde")
    while model:
        pos = (len(model) + 1) // 2
        assert lst.delete(pos) == model.pop(pos - 1)
        assert list(lst) == model
    assert lst.is_empty()


@pytest.mark.parametrize("pos", [0, 4, 9])
def test_delete_bad_position(pos):
    with pytest.raises(IndexError):
        LinkedList("abc").delete(pos)


def test_demo_transcript():
    lines = demo()
    assert lines[-2].endswith("a b f d e")
    assert any(line.endswith("position of a: 1") for line in lines)