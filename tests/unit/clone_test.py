from pytest import mark
from slicekit import clone, equal


def test_clone_none_stays_absent():
    assert clone(None) is None


def test_clone_empty_is_new_list():
    s = []
    got = clone(s)
    assert got == []
    assert got is not s


@mark.parametrize("s", [[1, 3, 4], [1.0, 10.2, 39.2], ["a"]], ids=["ints", "floats", "strings"])
def test_clone_equal_and_independent(s):
    got = clone(s)
    assert equal(got, s)
    before = list(s)
    got[0] = object()
    assert s == before


def test_clone_is_shallow():
    inner = [1]
    s = [inner]
    got = clone(s)
    got[0].append(2)
    assert s[0] is inner
    assert inner == [1, 2]
