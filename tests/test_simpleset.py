import pytest

from utilkit.simpleset import SetComparison, SimpleSet, default_hash


def make(keys, **kwargs):
    s = SimpleSet(**kwargs)
    for key in keys:
        s.add(key)
    return s


def test_default_hash_of_empty_is_offset_basis():
    assert default_hash(b"") == 14695981039346656037


def test_default_hash_str_and_bytes_agree():
    assert default_hash("hello") == default_hash(b"hello")
    assert default_hash("a") != default_hash("b")


def test_add_and_contains():
    s = SimpleSet()
    assert s.add("apple") is True
    assert s.add("apple") is False
    assert len(s) == 1
    assert "apple" in s
    assert "pear" not in s
    assert 5 not in s


def test_remove():
    s = make(["a", "b", "c"])
    s.remove("b")
    assert len(s) == 2
    assert "b" not in s
    assert sorted(s) == ["a", "c"]


def test_remove_missing_raises():
    s = make(["a"])
    with pytest.raises(KeyError):
        s.remove("z")
    assert len(s) == 1


def test_invalid_key_type():
    with pytest.raises(TypeError):
        SimpleSet().add(42)


def test_invalid_size():
    with pytest.raises(ValueError):
        SimpleSet(0)


def test_growth_keeps_every_key():
    keys = [str(i) for i in range(1000)]
    s = make(keys, num_els=4)
    assert len(s) == 1000
    assert all(k in s for k in keys)
    assert sorted(s.to_list()) == sorted(keys)


def test_colliding_hash_remove_relayout():
    s = make(["k0", "k1", "k2", "k3", "k4"], num_els=64, hash_function=lambda data: 0)
    s.remove("k1")
    assert "k1" not in s
    assert all(k in s for k in ["k0", "k2", "k3", "k4"])
    s.remove("k0")
    assert all(k in s for k in ["k2", "k3", "k4"])
    assert len(s) == 3


def test_clear():
    s = make(["x", "y"])
    s.clear()
    assert len(s) == 0
    assert "x" not in s
    assert s.add("x") is True


def test_union():
    result = make(["a", "b"]).union(make(["b", "c"]))
    assert sorted(result) == ["a", "b", "c"]


def test_intersection():
    result = make(["a", "b", "c"]).intersection(make(["b", "c", "d"]))
    assert sorted(result) == ["b", "c"]


def test_difference():
    result = make(["a", "b", "c"]).difference(make(["b"]))
    assert sorted(result) == ["a", "c"]


def test_symmetric_difference():
    result = make(["a", "b", "c"]).symmetric_difference(make(["b", "c", "d"]))
    assert sorted(result) == ["a", "d"]


def test_subset_and_superset():
    small = make(["a", "b"])
    big = make(["a", "b", "c"])
    assert small.is_subset(big)
    assert not big.is_subset(small)
    assert big.is_superset(small)
    assert small.is_subset(small)
    assert small.is_strict_subset(big)
    assert not small.is_strict_subset(make(["a", "b"]))
    assert big.is_strict_superset(small)
    assert not big.is_strict_superset(big)


def test_compare():
    ab = make(["a", "b"])
    assert ab.compare(make(["a", "b"])) is SetComparison.EQUAL
    assert ab.compare(make(["a", "c"])) is SetComparison.UNEQUAL
    assert ab.compare(make(["a", "b", "c"])) is SetComparison.RIGHT_GREATER
    assert ab.compare(make(["a"])) is SetComparison.LEFT_GREATER


def test_compare_results_carry_documented_codes():
    ab = make(["a", "b"])
    assert ab.compare(make(["a", "b"])).value == 0
    assert ab.compare(make(["a"])).value == 1
    assert ab.compare(make(["a", "c"])).value == 2
    assert ab.compare(make(["a", "b", "c"])).value == 3


def test_bytes_keys_round_trip():
    s = make([b"\x00\xff", b"abc"])
    assert b"\x00\xff" in s
    assert sorted(s) == [b"\x00\xff", b"abc"]