from vcutil.sets import KeySet


def test_has_and_len():
    s = KeySet()
    s.add("a")
    s.add("a")
    s.add("b")
    assert s.has("a")
    assert not s.has("z")
    assert len(s) == 2


def test_remove_and_clear():
    s = KeySet(["a", "b"])
    s.discard("a")
    assert not s.has("a")
    s.clear()
    assert len(s) == 0


def test_to_list_round_trip():
    s = KeySet([3, 1, 2])
    listed = s.to_list()
    assert sorted(listed) == [1, 2, 3]
    assert KeySet(listed) == s


def test_set_operations_return_keyset():
    a = KeySet([1, 2, 3])
    b = KeySet([2, 3, 4])
    union = a.union(b)
    inter = a.intersection(b)
    diff = a.difference(b)
    assert isinstance(union, KeySet) and union == {1, 2, 3, 4}
    assert isinstance(inter, KeySet) and inter == {2, 3}
    assert isinstance(diff, KeySet) and diff == {1}
    assert isinstance(a | b, KeySet) and (a | b) == union
    assert isinstance(a & b, KeySet) and (a & b) == inter
    assert isinstance(a - b, KeySet) and (a - b) == diff


def test_overlaps():
    a = KeySet([1, 2])
    assert a.overlaps(KeySet([2, 5]))
    assert not a.overlaps(KeySet([7]))
    assert not KeySet().overlaps(a)


def test_enumerate_positions_and_members():
    s = KeySet(["x", "y", "z"])
    pairs = list(s.enumerate())
    assert [i for i, _ in pairs] == list(range(len(s)))
    assert {member for _, member in pairs} == s