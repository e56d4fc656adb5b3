import pytest

from dstructs.linkstring import LinkedString

S = LinkedString("abcdefghijklmn")
S1 = LinkedString("123")


def test_substring_worked_example():
    assert str(S.substring(2, 10)) == "bcdefghijk"


def test_concat_worked_example():
    assert str(S1.concat(S.replace(2, 5, S1))) == "123a123ghijklmn"


def test_insert_worked_example():
    assert str(S.insert(9, S1)) == "abcdefgh123ijklmn"


def test_iteration_and_length():
    assert list(S1) == ["1", "2", "3"]
    assert len(S) == len("abcdefghijklmn")
    assert len(LinkedString()) == 0


def test_equality():
    assert LinkedString("abc") == LinkedString("abc")
    assert not LinkedString("abc") == LinkedString("ab")
    assert not LinkedString("ab") == LinkedString("abc")


def test_copy_is_equal_but_separate():
    duplicate = S.copy()
    assert duplicate == S
    assert duplicate.head is not S.head
    assert duplicate.head.next is not S.head.next


@pytest.mark.parametrize("i", [1, 7, 15])
def test_insert_then_delete_restores(i):
    assert S.insert(i, S1).delete(i, len(S1)) == S


@pytest.mark.parametrize("i,j", [(1, 0), (2, 5), (14, 1)])
def test_replace_properties(i, j):
    result = S.replace(i, j, S1)
    assert len(result) == len(S) - j + len(S1)
    assert result.substring(i, len(S1)) == S1


def test_concat_splits_back():
    joined = S.concat(S1)
    assert joined.substring(1, len(S)) == S
    assert joined.substring(len(S) + 1, len(S1)) == S1


@pytest.mark.parametrize("i,j", [(0, 1), (15, 0), (3, -1), (12, 4)])
def test_invalid_spans(i, j):
    with pytest.raises(IndexError):
        S.substring(i, j)
    with pytest.raises(IndexError):
        S.delete(i, j)
    with pytest.raises(IndexError):
        S.replace(i, j, S1)


@pytest.mark.parametrize("i", [0, 16])
def test_insert_invalid(i):
    with pytest.raises(IndexError):
        S.insert(i, S1)