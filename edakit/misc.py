"""Primality test and maximum subsequence sum in three complexities."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import accumulate
from typing import NamedTuple


class Subsequence(NamedTuple):
    """Bounds (inclusive) and sum of a maximum subsequence."""

    start: int
    end: int
    total: int


_NOTHING = Subsequence(0, 0, -1)


def is_prime(n: int) -> bool:
    """Return True when no integer in [2, round(sqrt(n))] divides n."""
    limit = int(math.sqrt(n) + 0.5)
    return all(n % i for i in range(2, limit + 1))


def mss_cubic(values: Sequence[int]) -> Subsequence:
    """Maximum subsequence sum by summing every range from scratch."""
    best = _NOTHING
    count = len(values)
    for i in range(count):
        for j in range(count):
            total = sum(values[i : j + 1])
            if total > best.total:
                best = Subsequence(i, j, total)
    return best


def mss_quadratic(values: Sequence[int]) -> Subsequence:
    """Maximum subsequence sum using running sums from each start."""
    best = _NOTHING
    for i in range(len(values)):
        for j, total in enumerate(accumulate(values[i:]), start=i):
            if total > best.total:
                best = Subsequence(i, j, total)
    return best


def mss_linear(values: Sequence[int]) -> Subsequence:
    """Maximum subsequence sum in a single pass."""
    best = _NOTHING
    total = 0
    start = 0
    for i, value in enumerate(values):
        total += value
        if total > best.total:
            best = Subsequence(start, i, total)
        if total < 0:
            start = i + 1
            total = 0
    return best