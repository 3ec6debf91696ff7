"""List helpers: filtering, set-like operations, slicing and reordering."""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, MutableSequence, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def filter_in_place(items: MutableSequence[T], check: Callable[[T], bool]) -> None:
    """Keep only the items for which ``check`` is true, modifying the list."""
    items[:] = [item for item in items if check(item)]


def map_if(items: Iterable[T], f: Callable[[T], tuple[U, bool]]) -> list[U]:
    """Map each item with ``f`` returning ``(value, ok)``; keep values whose ok is true."""
    result = []
    for item in items:
        value, ok = f(item)
        if ok:
            result.append(value)
    return result


def flat_map(items: Iterable[T], f: Callable[[T], Iterable[U]]) -> list[U]:
    """Concatenate the results of ``f`` over all items."""
    return [value for item in items for value in f(item)]


def partition(items: Iterable[T], check: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Split into (items passing ``check``, items failing it)."""
    hit: list[T] = []
    miss: list[T] = []
    for item in items:
        (hit if check(item) else miss).append(item)
    return hit, miss


def has_intersection(a: Sequence[K], b: Sequence[K]) -> bool:
    """Whether the two sequences share at least one element."""
    if not a or not b:
        return False
    if len(a) > len(b):
        a, b = b, a
    seen = set(a)
    return any(item in seen for item in b)


def intersection(a: Sequence[K], b: Sequence[K]) -> list[K]:
    """Elements of the longer sequence that also appear in the shorter one.

    The longer sequence's order and repetitions are kept.
    """
    if not a or not b:
        return []
    if len(a) > len(b):
        a, b = b, a
    seen = set(a)
    return [item for item in b if item in seen]


def remove_dups(items: Iterable[T], key: Optional[Callable[[T], Hashable]] = None) -> list[T]:
    """Drop later items whose key was already seen; order is preserved."""
    seen: set[Hashable] = set()
    result = []
    for item in items:
        k = item if key is None else key(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return result


def get_part(items: Sequence[T], offset: int, limit: int) -> list[T]:
    """At most ``limit`` items starting at ``offset``; empty when offset is past the end."""
    if offset < 0 or limit < 0:
        raise ValueError("offset and limit must not be negative")
    if len(items) <= offset:
        return []
    return list(items[offset:offset + limit])


def top_n(items: Sequence[T], n: int) -> list[T]:
    """The first ``n`` items (all of them if there are fewer)."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(items[:n])


def last_n(items: Sequence[T], n: int) -> list[T]:
    """The last ``n`` items (all of them if there are fewer)."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(items[max(0, len(items) - n):])


def clamp_slice(items: Sequence[T], start: int, end: int) -> list[T]:
    """Slice with both bounds clamped into range; never raises."""
    lo = min(max(0, start), len(items))
    hi = max(min(len(items), end), lo)
    return list(items[lo:hi])


def diff(
    items: Iterable[T],
    other: Iterable[T],
    key: Optional[Callable[[T], Hashable]] = None,
) -> list[T]:
    """Items whose key does not occur among the keys of ``other``."""
    if key is None:
        excluded = set(other)
        return [item for item in items if item not in excluded]
    excluded = {key(item) for item in other}
    return [item for item in items if key(item) not in excluded]


def compare(a: Iterable[K], b: Iterable[K]) -> tuple[list[K], list[K], list[K]]:
    """Return (in b but not a, in a but not b, in both), each without duplicates."""
    first = dict.fromkeys(a)
    second = dict.fromkeys(b)
    less = [item for item in second if item not in first]
    more = [item for item in first if item not in second]
    equal = [item for item in first if item in second]
    return less, more, equal


def try_get(items: Sequence[T], idx: int, default: Optional[T] = None) -> Optional[T]:
    """Item at ``idx`` (negative counts from the end), or ``default`` when out of range."""
    length = len(items)
    if idx < 0:
        idx += length
    if idx < 0 or idx >= length:
        return default
    return items[idx]


def merge_distinct(*args: Iterable[K]) -> list[K]:
    """Concatenate the iterables, keeping only the first occurrence of each element."""
    return list(dict.fromkeys(item for seq in args for item in seq))


def merge_in_order(*args: Sequence[T]) -> list[T]:
    """Interleave sequences round-robin: first items of each, then second items, ..."""
    result = []
    depth = max((len(seq) for seq in args), default=0)
    for position in range(depth):
        result.extend(seq[position] for seq in args if position < len(seq))
    return result


def remove_value(items: Iterable[T], target: T) -> list[T]:
    """A new list without any element equal to ``target``."""
    return [item for item in items if item != target]


def move_to_front(items: MutableSequence[T], check: Callable[[T], bool]) -> int:
    """Swap matching items to the front in place; return how many there are.

    Relative order is not preserved.
    """
    if not items:
        return 0
    left, right = 0, len(items) - 1
    while left != right:
        if check(items[right]):
            items[left], items[right] = items[right], items[left]
            left += 1
        else:
            right -= 1
    return left + 1 if check(items[left]) else left


def move_to_front_in_order(items: MutableSequence[T], check: Callable[[T], bool]) -> MutableSequence[T]:
    """Move matching items to the front in place, keeping relative order of both groups."""
    hit, miss = partition(items, check)
    items[:] = hit + miss
    return items


def element_at_percentage(items: Sequence[T], percentage: float) -> Optional[T]:
    """Item at the given fraction of a sorted sequence, clamped to its bounds; None if empty."""
    if not items:
        return None
    idx = int(len(items) * percentage)
    idx = min(max(idx, 0), len(items) - 1)
    return items[idx]


def rand_get(items: MutableSequence[T], n: int) -> list[T]:
    """Shuffle ``items`` in place and return up to ``n`` of them."""
    random.shuffle(items)
    if n >= len(items):
        return list(items)
    return list(items[:max(n, 0)])


def first_m_from_every_n(items: Sequence[T], m: int, n: int) -> list[T]:
    """The first ``m`` items of every consecutive group of ``n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    result: list[T] = []
    for start in range(0, len(items), n):
        result.extend(items[start:min(start + m, len(items))] if m > 0 else [])
    return result


def first_if(items: Sequence[T], check: Callable[[T], bool]) -> tuple[Optional[T], int]:
    """First matching item and its index, or (None, -1)."""
    for idx, item in enumerate(items):
        if check(item):
            return item, idx
    return None, -1


def last_if(items: Sequence[T], check: Callable[[T], bool]) -> tuple[Optional[T], int]:
    """Last matching item and its index, or (None, -1)."""
    for idx in range(len(items) - 1, -1, -1):
        if check(items[idx]):
            return items[idx], idx
    return None, -1


def split_and_strip(text: str, sep: str) -> list[str]:
    """Split on ``sep`` (into characters when empty) and strip whitespace from each part."""
    parts = list(text) if sep == "" else text.split(sep)
    return [part.strip() for part in parts]


def value_index_map(items: Iterable[K]) -> dict[K, int]:
    """Map each value to the index of its last occurrence."""
    return {value: idx for idx, value in enumerate(items)}


def percentile(
    items: MutableSequence[T],
    percent: float,
    key: Optional[Callable[[T], Any]] = None,
) -> T:
    """Element at ``percent`` (0..1) after sorting ``items`` in place."""
    if not items:
        raise ValueError("items must not be empty")
    if percent < 0 or percent > 1:
        raise ValueError("percent must be between 0 and 1")
    items.sort(key=key)
    idx = max(int(len(items) * percent) - 1, 0)
    return items[idx]


def to_key_map(items: Iterable[V], key: Callable[[V], K]) -> dict[K, V]:
    """Index items by ``key``; later items win on collisions."""
    return {key(item): item for item in items}


def to_kv_map(items: Iterable[T], kv: Callable[[T], tuple[K, V]]) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pair ``kv`` gives for each item."""
    return dict(kv(item) for item in items)