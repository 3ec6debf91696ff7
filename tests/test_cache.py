import threading

import pytest

from vcutil.cache import Cache, ShardCache


def test_set_get_delete():
    cache = Cache()
    cache.set("a", 1)
    assert cache.get("a") == 1
    assert "a" in cache
    cache.delete("a")
    assert cache.get("a") is None
    assert cache.get("a", "fallback") == "fallback"
    cache.delete("missing")
    assert len(cache) == 0


def test_keys_values_items_agree():
    cache = Cache()
    data = {"x": 1, "y": 2, "z": 3}
    for key, value in data.items():
        cache.set(key, value)
    assert len(cache) == len(data)
    assert sorted(cache.keys()) == sorted(data)
    assert sorted(cache.values()) == sorted(data.values())
    assert dict(cache.items()) == data


def test_clear():
    cache = Cache()
    cache.set("a", 1)
    cache.clear()
    assert len(cache) == 0
    assert cache.keys() == []


def test_get_or_set_keeps_existing():
    cache = Cache()
    assert cache.get_or_set("a", 1) == 1
    assert cache.get_or_set("a", 2) == 1
    assert cache.get("a") == 1


def test_get_or_set_func_calls_factory_once():
    cache = Cache()
    calls = []

    def factory():
        calls.append(1)
        return object()

    first = cache.get_or_set_func("k", factory)
    second = cache.get_or_set_func("k", factory)
    assert first is second
    assert cache.get("k") is first
    assert len(calls) == 1


def test_write_can_modify():
    cache = Cache()
    cache.write(lambda m: m.update({"a": 1, "b": 2}))
    assert dict(cache.items()) == {"a": 1, "b": 2}


def test_concurrent_get_or_set_agrees():
    cache = Cache()
    results = []
    lock = threading.Lock()

    def worker(n):
        value = cache.get_or_set("shared", n)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 20
    assert len(set(results)) == 1
    assert cache.get("shared") == results[0]


def test_shard_cache_same_length_same_shard():
    shards = ShardCache(4)
    assert len(shards) == 4
    assert shards.shard("ab") is shards.shard("cd")
    assert shards.shard("a") is not shards.shard("ab")
    shards.shard("key").set("key", 1)
    assert shards.shard("key").get("key") == 1


def test_shard_cache_index_wraps_by_mask():
    shards = ShardCache(4)
    assert shards.shard("") is shards.shard("abcd")


def test_shard_cache_rejects_non_positive():
    with pytest.raises(ValueError):
        ShardCache(0)