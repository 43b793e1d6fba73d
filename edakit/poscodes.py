"""Postal codes of the form ddddLL and three ways of sorting them."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

DEFAULT_FILE = "../../codes_500K.txt"
DEFAULT_N = 500000
DEFAULT_PRINT = 10
FILLER_CODE = "0000AA"


@dataclass(frozen=True, order=True)
class Poscode:
    """A postal code: four digits followed by two letters."""

    data: str = ""

    def value(self, i: int) -> str:
        """Character at position i."""
        return self.data[i]

    def __str__(self) -> str:
        return self.data


def read_codes(path: str | Path, n: int) -> list[Poscode]:
    """Read up to n non-empty lines as codes, padding with a filler code if short."""
    codes: list[Poscode] = []
    with open(path, encoding="utf-8", newline="") as handle:
        for line in handle:
            if len(codes) >= n:
                break
            text = line.rstrip("\n")
            if text:
                codes.append(Poscode(text))
    if len(codes) < n:
        print(
            f"Warning: file had only {len(codes)} lines; padding with dummy codes.",
            file=sys.stderr,
        )
        codes.extend(Poscode(FILLER_CODE) for _ in range(n - len(codes)))
    return codes


def _digit_key(code: Poscode, pos: int) -> int:
    char = code.value(pos)
    if not ("0" <= char <= "9"):
        raise ValueError(f"expected a digit at position {pos} of {code.data!r}")
    return ord(char) - ord("0")


def _letter_key(code: Poscode, pos: int) -> int:
    char = code.value(pos).upper()
    if not ("A" <= char <= "Z"):
        raise ValueError(f"expected a letter at position {pos} of {code.data!r}")
    return ord(char) - ord("A")


def _counting_pass(
    codes: MutableSequence[Poscode], buckets: int, key: Callable[[Poscode], int]
) -> None:
    groups: list[list[Poscode]] = [[] for _ in range(buckets)]
    for code in codes:
        groups[key(code)].append(code)
    codes[:] = list(chain.from_iterable(groups))


def radix_sort(codes: MutableSequence[Poscode]) -> None:
    """Sort in place, least significant character first; letters ignore case."""
    if len(codes) <= 1:
        return
    for pos in (5, 4):
        _counting_pass(codes, 26, lambda code, p=pos: _letter_key(code, p))
    for pos in (3, 2, 1, 0):
        _counting_pass(codes, 10, lambda code, p=pos: _digit_key(code, p))


def _merged(items: list[Poscode]) -> list[Poscode]:
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    left, right = _merged(items[:middle]), _merged(items[middle:])
    result: list[Poscode] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(codes: MutableSequence[Poscode]) -> None:
    """Sort in place with top-down merge sort."""
    if len(codes) <= 1:
        return
    codes[:] = _merged(list(codes))


def quick_sort(codes: MutableSequence[Poscode]) -> None:
    """Sort in place with three-way quicksort and a median-of-three pivot."""
    pending = [(0, len(codes) - 1)]
    while pending:
        low, high = pending.pop()
        if high <= low:
            continue
        mid = low + (high - low) // 2
        if codes[mid] < codes[low]:
            codes[mid], codes[low] = codes[low], codes[mid]
        if codes[high] < codes[mid]:
            codes[high], codes[mid] = codes[mid], codes[high]
        if codes[mid] < codes[low]:
            codes[mid], codes[low] = codes[low], codes[mid]
        pivot = codes[mid]
        i = lt = low
        gt = high
        while i <= gt:
            if codes[i] < pivot:
                codes[i], codes[lt] = codes[lt], codes[i]
                i += 1
                lt += 1
            elif pivot < codes[i]:
                codes[i], codes[gt] = codes[gt], codes[i]
                gt -= 1
            else:
                i += 1
        pending.append((low, lt - 1))
        pending.append((gt + 1, high))


def is_sorted(codes: Sequence[Poscode]) -> bool:
    """True when no code is greater than the one after it."""
    return all(a.data <= b.data for a, b in zip(codes, codes[1:]))


_SORTERS: dict[str, Callable[[MutableSequence[Poscode]], None]] = {
    "radix": radix_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="poscodes",
        usage="%(prog)s --algo=radix|merge|quick --file=PATH --n=N [--print=K]",
        description="Sort postal codes read from a file and time the sort.",
    )
    parser.add_argument("--algo", default="radix")
    parser.add_argument("--file", default=DEFAULT_FILE)
    parser.add_argument("--n", type=int, default=DEFAULT_N)
    parser.add_argument("--print", dest="to_print", type=int, default=DEFAULT_PRINT)
    args, extra = parser.parse_known_args(argv)
    if extra:
        print(f"Argumento no reconocido: {extra[0]}", file=sys.stderr)
        parser.print_usage()
        return 1

    try:
        codes = read_codes(args.file, args.n)
    except OSError:
        print(f"Error leyendo archivo: {args.file}", file=sys.stderr)
        return 1

    sorter = _SORTERS.get(args.algo)
    if sorter is None:
        print(f"Algoritmo no reconocido: {args.algo}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    sorter(codes)
    elapsed = time.perf_counter() - start

    print(f"Algo={args.algo} n={args.n} time={elapsed:.6f} s")
    print(f"Sorted? {'YES' if is_sorted(codes) else 'NO'}")
    for code in codes[: max(args.to_print, 0)]:
        print(code.data)
    return 0