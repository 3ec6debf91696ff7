import math
from dataclasses import dataclass

import pytest

from vcutil import mapping


def test_invert_round_trip():
    m = {"a": 1, "b": 2, "c": 3}
    inverted = mapping.invert(m)
    assert set(inverted) == set(m.values())
    assert mapping.invert(inverted) == m


def test_diff_reports_new_and_changed_entries():
    base = {"a": 1, "b": 2}
    another = {"a": 1, "b": 20, "c": 3}
    assert mapping.diff(base, another) == {"b": 20, "c": 3}
    assert mapping.diff(another, another) == {}


def test_diff_counts_none_value_as_present():
    assert mapping.diff({"a": None}, {"a": None}) == {}


def test_keys_and_values_if():
    m = {"a": 1, "b": 2, "c": 3}
    assert sorted(mapping.keys_if(m, lambda k, v: v > 1)) == ["b", "c"]
    assert sorted(mapping.values_if(m, lambda k, v: k != "b")) == [1, 3]


def test_items_map_and_items_if():
    m = {"a": 1, "b": 2}
    assert sorted(mapping.items_map(m, lambda k, v: (v, k))) == [(1, "a"), (2, "b")]
    assert mapping.items_if(m, lambda k, v: (k, v % 2 == 0)) == ["b"]


def test_contains_any_key_and_any_match():
    m = {"a": 1, "b": 2}
    assert mapping.contains_any_key(m, "x", "b") is True
    assert mapping.contains_any_key(m, "x", "y") is False
    assert mapping.contains_any_key(m) is False
    assert mapping.any_match(m, lambda k, v: v == 2) is True
    assert mapping.any_match(m, lambda k, v: v == 5) is False


def test_sub_map_skips_missing_keys():
    m = {"a": 1, "b": 2, "c": 3}
    assert mapping.sub_map(m, ["a", "c", "z"]) == {"a": 1, "c": 3}


@pytest.mark.parametrize("size", [1, 2, 3, 4, 10])
def test_chunked_covers_all_entries(size):
    m = {str(i): i for i in range(7)}
    chunks = mapping.chunked(m, size)
    assert len(chunks) == math.ceil(len(m) / size)
    assert all(0 < len(chunk) <= size for chunk in chunks)
    merged = {}
    for chunk in chunks:
        merged.update(chunk)
    assert merged == m


def test_chunked_empty_and_invalid():
    assert mapping.chunked({}, 3) == []
    with pytest.raises(ValueError):
        mapping.chunked({"a": 1}, 0)


def test_group_by_keeps_order():
    words = ["apple", "avocado", "banana", "blueberry", "cherry"]
    groups = mapping.group_by(words, lambda w: w[0])
    assert groups["a"] == ["apple", "avocado"]
    assert groups["b"] == ["banana", "blueberry"]
    assert sum(len(g) for g in groups.values()) == len(words)


def test_group_kv():
    pairs = [("x", 1), ("y", 2), ("x", 3)]
    groups = mapping.group_kv(pairs, lambda p: p)
    assert groups == {"x": [1, 3], "y": [2]}


def test_maps_equal():
    assert mapping.maps_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}) is True
    assert mapping.maps_equal({"a": 1}, {"a": 2}) is False
    assert mapping.maps_equal({"a": 1}, {"b": 1}) is False
    assert mapping.maps_equal({"a": 1}, {"a": 1, "b": 2}) is False


def test_ordered_str_format():
    assert mapping.ordered_str({"b": 2, "a": 1}) == "[{a 1} {b 2}]"
    assert mapping.ordered_str({}) == "[]"
    assert mapping.ordered_str({"b": 2, "a": 1}, key=lambda v: -v) == "[{b 2} {a 1}]"


def test_map_values_and_keys():
    m = {"a": 1, "b": 2}
    assert mapping.map_values(m, str) == {"a": "1", "b": "2"}
    assert mapping.map_keys(m, str.upper) == {"A": 1, "B": 2}
    assert mapping.map_values_if(m, lambda v: (v, v > 1)) == {"b": 2}
    assert mapping.map_keys_if(m, lambda k: (k.upper(), k == "a")) == {"A": 1}


def test_put_if_absent():
    m = {"a": 1}
    assert mapping.put_if_absent(m, "a", 5) is False
    assert m["a"] == 1
    assert mapping.put_if_absent(m, "b", 2) is True
    assert m["b"] == 2


def test_to_dict_from_dataclass():
    @dataclass
    class Item:
        name: str
        count: int

    assert mapping.to_dict(Item("pen", 4)) == {"name": "pen", "count": 4}


def test_to_dict_rejects_non_object():
    with pytest.raises(TypeError):
        mapping.to_dict([1, 2])
    with pytest.raises(TypeError):
        mapping.to_dict(object())


def test_chain_yields_all_pairs_in_order():
    first = {"a": 1}
    second = {"b": 2, "c": 3}
    assert list(mapping.chain(first, second)) == [("a", 1), ("b", 2), ("c", 3)]
    assert list(mapping.chain()) == []