"""A set with a few convenience queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class KeySet(set):
    """A built-in set whose set operations also return KeySet."""

    def has(self, value: Any) -> bool:
        """Whether ``value`` is a member."""
        return value in self

    def to_list(self) -> list:
        """The members as a list, in iteration order."""
        return list(self)

    def overlaps(self, other: Iterable[Any]) -> bool:
        """Whether any member of this set is also in ``other``."""
        return not self.isdisjoint(other)

    def enumerate(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(position, member)`` pairs."""
        yield from enumerate(self)

    def union(self, *others: Iterable[Any]) -> KeySet:
        return KeySet(super().union(*others))

    def intersection(self, *others: Iterable[Any]) -> KeySet:
        return KeySet(super().intersection(*others))

    def difference(self, *others: Iterable[Any]) -> KeySet:
        return KeySet(super().difference(*others))

    def __or__(self, other: Any) -> KeySet:
        return KeySet(set(self) | set(other))

    def __and__(self, other: Any) -> KeySet:
        return KeySet(set(self) & set(other))

    def __sub__(self, other: Any) -> KeySet:
        return KeySet(set(self) - set(other))