"""String helpers: longest common subsequence, parsing and formatting."""

from __future__ import annotations

import dataclasses
import json
import math
import re
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def lcs_length(s1: str | bytes, s2: str | bytes) -> int:
    """Length of the longest common subsequence, compared byte by byte (UTF-8)."""
    a = s1.encode("utf-8") if isinstance(s1, str) else s1
    b = s2.encode("utf-8") if isinstance(s2, str) else s2
    previous = [0] * (len(b) + 1)
    for ca in a:
        current = [0]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serialisable")


def struct_to_string(obj: Any) -> str:
    """Pretty JSON with four-space indent, or ``str(obj)`` if it cannot be encoded."""
    try:
        text = json.dumps(obj, indent=4, ensure_ascii=False, default=_json_default, allow_nan=False)
    except (TypeError, ValueError):
        return str(obj)
    for char, escape in (("<", "\\u003c"), (">", "\\u003e"), ("&", "\\u0026"),
                         ("\u2028", "\\u2028"), ("\u2029", "\\u2029")):
        text = text.replace(char, escape)
    return text


def _split(text: str, sep: str) -> list[str]:
    return list(text) if sep == "" else text.split(sep)


def _parse_int64(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _parse_each(parts: Iterable[str]) -> Iterable[int]:
    for part in parts:
        try:
            yield _parse_int64(part)
        except ValueError:
            continue


def split_int64(text: str, sep: str) -> list[int]:
    """Split and parse decimal integers, skipping parts that do not parse."""
    if text == "":
        return []
    return list(_parse_each(_split(text, sep)))


def split_int32(text: str, sep: str) -> list[int]:
    """Like :func:`split_int64`, with each value truncated to 32 bits."""
    return [_wrap_int32(v) for v in split_int64(text, sep)]


def split_nonempty(text: str, sep: str) -> list[str]:
    """Split and drop empty parts."""
    if text == "":
        return []
    return [part for part in _split(text, sep) if part]


def join_ints(values: Iterable[int], sep: str) -> str:
    """Join integers in decimal with ``sep``."""
    return sep.join(str(int(v)) for v in values)


def parse_ints(values: Sequence[str]) -> list[int]:
    """Parse every string as a decimal integer; raise ValueError on the first failure."""
    result = []
    for text in values:
        try:
            result.append(_parse_int64(text))
        except ValueError as exc:
            raise ValueError(f"failed to convert string to int: {text}") from exc
    return result


def format_float(value: float) -> str:
    """Shortest decimal form without exponent, e.g. ``1`` for 1.0."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(float(value))).normalize(), "f")


def format_bool(value: bool) -> str:
    """``"true"`` or ``"false"``."""
    return json.dumps(bool(value))