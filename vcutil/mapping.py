"""Dict helpers: inversion, filtering, grouping, chunking and key/value mapping."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")
N = TypeVar("N", bound=Hashable)


def invert(m: Mapping[K, N]) -> dict[N, K]:
    """Swap keys and values; for repeated values the last key wins."""
    return {value: key for key, value in m.items()}


def diff(base: Mapping[K, V], another: Mapping[K, V]) -> dict[K, V]:
    """Entries of ``another`` that are missing from ``base`` or differ from it."""
    missing = object()
    return {
        key: value
        for key, value in another.items()
        if base.get(key, missing) is missing or base[key] != value
    }


def keys_if(m: Mapping[K, V], f: Callable[[K, V], bool]) -> list[K]:
    """Keys whose ``(key, value)`` pair passes ``f``."""
    return [key for key, value in m.items() if f(key, value)]


def values_if(m: Mapping[K, V], f: Callable[[K, V], bool]) -> list[V]:
    """Values whose ``(key, value)`` pair passes ``f``."""
    return [value for key, value in m.items() if f(key, value)]


def items_map(m: Mapping[K, V], f: Callable[[K, V], T]) -> list[T]:
    """Apply ``f`` to every ``(key, value)`` pair."""
    return [f(key, value) for key, value in m.items()]


def items_if(m: Mapping[K, V], f: Callable[[K, V], tuple[T, bool]]) -> list[T]:
    """Apply ``f`` returning ``(result, ok)``; keep results whose ok is true."""
    result = []
    for key, value in m.items():
        item, ok = f(key, value)
        if ok:
            result.append(item)
    return result


def contains_any_key(m: Mapping[K, Any], *args: K) -> bool:
    """Whether any of the given keys is in ``m``."""
    return any(key in m for key in args)


def any_match(m: Mapping[K, V], f: Callable[[K, V], bool]) -> bool:
    """Whether any ``(key, value)`` pair passes ``f``."""
    return any(f(key, value) for key, value in m.items())


def sub_map(m: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """The entries of ``m`` for those of ``keys`` that it contains."""
    return {key: m[key] for key in keys if key in m}


def chunked(m: Mapping[K, V], size: int) -> list[dict[K, V]]:
    """Split into dicts of at most ``size`` entries, in iteration order."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    chunks: list[dict[K, V]] = []
    current: dict[K, V] = {}
    for key, value in m.items():
        current[key] = value
        if len(current) == size:
            chunks.append(current)
            current = {}
    if current:
        chunks.append(current)
    return chunks


def group_by(items: Iterable[V], key: Callable[[V], K]) -> dict[K, list[V]]:
    """Group items into lists by ``key``, keeping their order."""
    groups: dict[K, list[V]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def group_kv(items: Iterable[T], kv: Callable[[T], tuple[K, V]]) -> dict[K, list[V]]:
    """Group the values of the ``(key, value)`` pairs that ``kv`` gives for each item."""
    groups: dict[K, list[V]] = {}
    for item in items:
        key, value = kv(item)
        groups.setdefault(key, []).append(value)
    return groups


def maps_equal(a: Mapping[K, V], b: Mapping[K, V]) -> bool:
    """Whether both mappings hold the same keys with equal values."""
    if len(a) != len(b):
        return False
    missing = object()
    return all(b.get(key, missing) is not missing and b[key] == value for key, value in a.items())


def ordered_str(m: Mapping[K, V], key: Optional[Callable[[V], Any]] = None) -> str:
    """Render entries sorted by value (or ``key(value)``) as ``[{k v} {k v}]``."""
    sort_key = (lambda pair: key(pair[1])) if key else (lambda pair: pair[1])
    pairs = sorted(m.items(), key=sort_key)
    return "[" + " ".join(f"{{{k} {v}}}" for k, v in pairs) + "]"


def map_values(m: Mapping[K, V], f: Callable[[V], T]) -> dict[K, T]:
    """A new dict with ``f`` applied to every value."""
    return {key: f(value) for key, value in m.items()}


def map_values_if(m: Mapping[K, V], f: Callable[[V], tuple[T, bool]]) -> dict[K, T]:
    """Apply ``f`` returning ``(value, ok)`` to each value; keep entries whose ok is true."""
    result: dict[K, T] = {}
    for key, value in m.items():
        new_value, ok = f(value)
        if ok:
            result[key] = new_value
    return result


def map_keys(m: Mapping[K, V], f: Callable[[K], N]) -> dict[N, V]:
    """A new dict with ``f`` applied to every key; later entries win on collisions."""
    return {f(key): value for key, value in m.items()}


def map_keys_if(m: Mapping[K, V], f: Callable[[K], tuple[N, bool]]) -> dict[N, V]:
    """Apply ``f`` returning ``(key, ok)`` to each key; keep entries whose ok is true."""
    result: dict[N, V] = {}
    for key, value in m.items():
        new_key, ok = f(key)
        if ok:
            result[new_key] = value
    return result


def put_if_absent(m: MutableMapping[K, V], k: K, v: V) -> bool:
    """Store ``v`` under ``k`` unless present; return whether it was stored."""
    if k in m:
        return False
    m[k] = v
    return True


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serialisable")


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert an object to a plain dict through its JSON form.

    Raises TypeError when the object does not encode as a JSON object.
    """
    result = json.loads(json.dumps(obj, default=_json_default))
    if not isinstance(result, dict):
        raise TypeError(f"{type(obj).__name__} does not encode as a JSON object")
    return result


def chain(*args: Mapping[K, V]) -> Iterator[tuple[K, V]]:
    """Yield the ``(key, value)`` pairs of each mapping in turn."""
    for m in args:
        yield from m.items()