"""Dense vector operations: dot product, norm and cosine similarity."""

from __future__ import annotations

import math
from collections.abc import Sequence


def dot(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Dot product of two vectors of equal length."""
    if len(v1) != len(v2):
        raise ValueError("vectors differ in length")
    return sum(a * b for a, b in zip(v1, v2))


def l2_norm(v: Sequence[float]) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(sum(x * x for x in v))


def cosine(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Cosine similarity; NaN when either vector has zero length."""
    product = dot(v1, v2)
    norm1 = l2_norm(v1)
    norm2 = l2_norm(v2)
    if norm1 == 0 or norm2 == 0:
        return math.nan
    return product / norm1 / norm2


def cosine_normalized(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Cosine similarity mapped from [-1, 1] to [0, 1]."""
    return (cosine(v1, v2) + 1) / 2