"""Small vector helpers for lists of floats."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence


def distance(u: Sequence[float], v: Sequence[float]) -> float:
    """Euclidean distance between u and v."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(u, v, strict=True)))


def add_into(total: MutableSequence[float], u: Sequence[float]) -> None:
    """Add u to total element by element, in place."""
    if len(total) != len(u):
        raise ValueError("vectors differ in length")
    for i, value in enumerate(u):
        total[i] += value


def divide(u: Sequence[float], scalar: float) -> list[float]:
    """u with every element divided by scalar."""
    return [value / scalar for value in u]


def avg_abs_diff(u: Sequence[float], v: Sequence[float]) -> float:
    """Mean absolute element-wise difference of u and v."""
    if not u and not v:
        raise ValueError("vectors are empty")
    return sum(abs(a - b) for a, b in zip(u, v, strict=True)) / len(u)