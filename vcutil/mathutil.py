"""Numeric helpers: rounding, safe division, decay curves and normalisation."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from decimal import ROUND_HALF_UP, Context, Decimal

from .strutil import format_float

_EPSILON = 1e-10


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def to_fixed(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` decimal places, halves away from zero.

    A negative precision rounds the integer part to a power of ten.
    """
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot round non-finite value {value!r}")
    number = Decimal(repr(value))
    exponent = Decimal(1).scaleb(-precision)
    digits = max(28, number.adjusted() + precision + 2)
    context = Context(prec=digits, rounding=ROUND_HALF_UP)
    return float(number.quantize(exponent, context=context))


def divide(dividend: float, divisor: float) -> float:
    """Divide, returning 0.0 when the divisor is (almost) zero."""
    if abs(divisor) <= _EPSILON:
        return 0.0
    return float(dividend) / float(divisor)


def sigmoid(x: float) -> float:
    """The logistic function 1 / (1 + e^-x)."""
    return 1.0 / (1.0 + math.exp(-x))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; arguments should be positive."""
    while True:
        remainder = a - _trunc_div(a, b) * b
        if remainder == 0:
            return b
        a, b = b, remainder


def lcm(a: int, b: int) -> int:
    """Least common multiple; arguments should be positive."""
    return _trunc_div(a, gcd(a, b)) * b


def linear_interpolator(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """Return the function of the straight line through (x1, y1) and (x2, y2)."""

    def line(x: float) -> float:
        return y1 + (y2 - y1) / (x2 - x1) * (x - x1)

    return line


def exponential_decay(base_value: float, decay_rate: float, elapsed_time: int, min_value: float) -> float:
    """Exponential time decay, never falling below ``min_value``."""
    weighted = base_value * math.exp(-decay_rate * float(elapsed_time))
    return max(weighted, min_value)


def half_life_decay(base_value: float, scala: int, half_life: int, elapsed_time: int) -> float:
    """Half-life decay that starts only after ``scala`` time units."""
    factor = math.pow(0.5, max(0.0, float(elapsed_time - scala)) / float(half_life))
    return base_value * factor


def steps_decay(
    base_value: float,
    scala: int,
    linear_rate: float,
    linear_window: int,
    exp_rate: float,
    elapsed_time: int,
) -> float:
    """Piecewise decay: flat, then linear, then a blend into exponential decay."""
    if elapsed_time <= scala:
        return base_value
    if elapsed_time <= linear_window:
        return base_value * (1 - linear_rate * float(elapsed_time - scala))
    exponential = base_value * math.exp(-exp_rate * float(elapsed_time - scala))
    if elapsed_time <= 2 * linear_window:
        linear_end = base_value * (1 - linear_rate * float(linear_window - scala))
        share = float(elapsed_time - linear_window) / float(linear_window)
        return linear_end + share * (exponential - linear_end)
    return exponential


def log_base(x: float, base: float) -> float:
    """Logarithm of ``x`` in an arbitrary base."""
    return math.log(x) / math.log(base)


def safe_division(numerator: int, denominator: int) -> float:
    """Divide two integers as floats, returning 0 for a zero denominator."""
    if denominator == 0:
        return 0.0
    return float(numerator) / float(denominator)


def atan_normalize(num: int, dis: int) -> float:
    """Map a non-negative value into [0, 1) with arctangent of the integer quotient."""
    if num == 0 or dis == 0:
        return 0.0
    return math.atan(float(_trunc_div(num, dis))) * 2 / math.pi


def safe_division_str(numerator: int, denominator: int, prec: int) -> str:
    """Divide and format with ``prec`` decimals; "0" for a zero denominator.

    A negative precision gives the shortest exact representation.
    """
    if denominator == 0:
        return "0"
    quotient = float(numerator) / float(denominator)
    if prec < 0:
        return format_float(quotient)
    return f"{quotient:.{prec}f}"


def l2_normalize(values: Sequence[float]) -> list[float]:
    """Return the values scaled to unit Euclidean length.

    An empty or all-zero input is returned unchanged (as a list).
    """
    norm = math.sqrt(sum(v * v for v in values))
    if norm == 0:
        return list(values)
    return [v / norm for v in values]