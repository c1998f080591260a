import pytest

from trialkit.stringset import StringSet


def test_contains():
    s = StringSet(["a", "b"])
    assert "a" in s


def test_not_contain():
    s = StringSet(["a"])
    assert "b" not in s


def test_remove():
    s = StringSet(["a", "c"])
    assert s.remove_item("b") is False
    assert s.remove_item("a") is True
    assert s == StringSet(["c"])


def test_copy():
    expected = StringSet(["1", "2"])
    actual = expected.copy()
    assert actual == expected
    assert isinstance(actual, StringSet)
    actual.add_all("3")
    assert "3" not in expected


def test_intersection():
    s1 = StringSet(["a", "b"])
    s2 = StringSet(["b", "c"])
    assert s1.intersection_size(s2) == 1


def test_union():
    s1 = StringSet(["a", "b"])
    s2 = StringSet(["b", "c"])
    assert s1.union_size(s2) == 3


def test_jaccard():
    s1 = StringSet(["a", "b"])
    s2 = StringSet(["b", "c"])
    assert s1.jaccard(s2) == pytest.approx(1 / 3)
    assert s1.jaccard(StringSet(["x"])) == 0.0
    assert s1.jaccard(s1) == 1.0


def test_add_all_and_sorted_items():
    s = StringSet()
    s.add_all("c", "a", "b", "a")
    assert s.sorted_items() == ["a", "b", "c"]
    assert str(s) == "a, b, c"


def test_get_any():
    assert StringSet().get_any() is None
    s = StringSet(["x", "y"])
    assert s.get_any() in {"x", "y"}