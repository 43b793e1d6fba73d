"""Selection sort, randomized quicksort and quickselect on float lists."""

from __future__ import annotations

import random
from collections.abc import MutableSequence


def _source(rng):
    return random if rng is None else rng


def random_int(low: int, high: int, rng=None) -> int:
    """Uniform integer in [low, high], rounding a scaled random fraction."""
    fraction = _source(rng).random()
    return int(fraction * (high - low) + low + 0.5)


def random_array(n: int, rng=None) -> list[float]:
    """List of n random floats in [0, 1)."""
    source = _source(rng)
    return [source.random() for _ in range(n)]


def random_int_array(n: int, min_val: int = 0, max_val: int = 100, rng=None) -> list[float]:
    """List of n random integral floats in [min_val, max_val]."""
    return [float(random_int(min_val, max_val, rng)) for _ in range(n)]


def linspace(maximum: int, n_parts: int) -> list[int]:
    """The n_parts multiples of maximum // n_parts."""
    part_size = maximum // n_parts
    return [part_size * i for i in range(1, n_parts + 1)]


def selection_sort(values: MutableSequence[float]) -> None:
    """Sort values in place by repeatedly selecting the smallest."""
    count = len(values)
    for i in range(count - 1):
        smallest = min(range(i, count), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def split(values: MutableSequence[float], i: int, j: int, rng=None) -> int:
    """Partition values[i..j] around a random pivot; return its final index."""
    p = random_int(i, j, rng)
    while i < j:
        while i < p and values[i] <= values[p]:
            i += 1
        while j > p and values[j] >= values[p]:
            j -= 1
        values[i], values[j] = values[j], values[i]
        if i == p:
            p = j
        elif j == p:
            p = i
    return p


def quick_sort(values: MutableSequence[float], rng=None) -> None:
    """Sort values in place with randomized quicksort."""
    pending = [(0, len(values) - 1)]
    while pending:
        i, j = pending.pop()
        if i < j:
            k = split(values, i, j, rng)
            pending.append((i, k - 1))
            pending.append((k + 1, j))


def k_smallest(values: MutableSequence[float], k: int, rng=None) -> int:
    """Value at zero-based rank k, truncated to int; reorders values."""
    if not 0 <= k < len(values):
        raise IndexError(f"rank {k} out of range for {len(values)} values")
    i, j = 0, len(values) - 1
    while True:
        p = split(values, i, j, rng)
        if k == p:
            return int(values[p])
        if k < p:
            j = p - 1
        else:
            i = p + 1