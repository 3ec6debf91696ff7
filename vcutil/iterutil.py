"""Iterator helpers: summing, chunking and concatenation."""

from __future__ import annotations

import itertools
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def total(iterable: Iterable[Any]) -> Any:
    """Add up the items with ``+``; 0 for an empty iterable."""
    iterator = iter(iterable)
    try:
        result = next(iterator)
    except StopIteration:
        return 0
    for item in iterator:
        result = result + item
    return result


def chunk(iterable: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield lists of ``size`` items; the last one may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    iterator = iter(iterable)
    while True:
        piece = list(itertools.islice(iterator, size))
        if not piece:
            return
        yield piece


def merge(*args: Iterable[T]) -> Iterator[T]:
    """Yield the items of each iterable in turn."""
    return itertools.chain.from_iterable(args)


def merge_distinct(*args: Iterable[K]) -> list[K]:
    """Distinct items of all iterables, in order of first appearance."""
    return list(dict.fromkeys(merge(*args)))