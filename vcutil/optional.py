"""Helpers for optional values, zero values and loose type checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def _zero(kind: type) -> Any:
    """The value a type's no-argument constructor gives, or None if it has none."""
    try:
        return kind()
    except TypeError:
        return None


def value_or(value: Optional[T], default: Optional[T] = None) -> Optional[T]:
    """``value`` unless it is None, in which case ``default``."""
    return default if value is None else value


def none_if_zero(value: Optional[T]) -> Optional[T]:
    """None when ``value`` is its type's zero value (0, "", 0.0), else ``value``."""
    if value is None or value == _zero(type(value)):
        return None
    return value


def equal_values(a: Any, b: Any) -> bool:
    """Whether two optional values are equal; two Nones are equal."""
    if a is None:
        return b is None
    if b is None:
        return False
    return a == b


def bool_to_int(flag: bool) -> int:
    """1 for true, 0 for false."""
    return int(bool(flag))


def int_to_bool(value: int) -> bool:
    """True for strictly positive values."""
    return value > 0


def non_default_or(judge: Any, other: Any) -> Any:
    """``judge`` unless it is None or its type's zero value, then ``other``."""
    if judge is None or judge == _zero(type(judge)):
        return other
    return judge


def int_assertion(value: Any) -> tuple[int, bool]:
    """``(value, True)`` when ``value`` is an integer (not a bool), else ``(0, False)``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value, True
    return 0, False


def assertion(value: Any, kind: type) -> Any:
    """``value`` if it is an instance of ``kind``, else the zero value of ``kind``."""
    if isinstance(value, kind):
        return value
    return _zero(kind)


def must(fn: Callable[[], T]) -> T:
    """Call ``fn`` and return its result; any exception it raises propagates."""
    return fn()