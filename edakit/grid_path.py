"""Depth-first path search on a square labyrinth of open and blocked cells."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

LABYRINTH: tuple[tuple[bool, ...], ...] = tuple(
    tuple(bool(v) for v in row)
    for row in (
        (1, 1, 1, 0, 1, 0, 1, 1),
        (1, 0, 1, 1, 1, 1, 0, 1),
        (0, 0, 1, 1, 1, 1, 0, 1),
        (1, 0, 1, 1, 0, 1, 0, 1),
        (1, 0, 0, 0, 1, 1, 1, 1),
        (1, 1, 0, 1, 1, 0, 0, 0),
        (1, 1, 1, 1, 0, 1, 1, 1),
        (1, 1, 1, 1, 0, 1, 1, 1),
    )
)

# Pushed in this order, so the last one (right) is explored first.
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Cell:
    """A position in the grid."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def _as_cell(value: Cell | Sequence[int]) -> Cell:
    if isinstance(value, Cell):
        return value
    row, col = value
    return Cell(row, col)


def is_valid_cell(cell: Cell, size: int) -> bool:
    """True when cell lies inside a size x size grid."""
    return 0 <= cell.row < size and 0 <= cell.col < size


def _grid_size(lab: Sequence[Sequence[bool]]) -> int:
    size = len(lab)
    if any(len(row) != size for row in lab):
        raise ValueError("labyrinth must be square")
    return size


def _check_inside(cell: Cell, size: int, name: str) -> None:
    if not is_valid_cell(cell, size):
        raise ValueError(f"{name} cell {cell} is outside a {size}x{size} labyrinth")


def _open_neighbours(
    lab: Sequence[Sequence[bool]], cell: Cell, visited: set[Cell]
) -> Iterator[Cell]:
    size = len(lab)
    for d_row, d_col in _MOVES:
        neighbour = Cell(cell.row + d_row, cell.col + d_col)
        if (
            is_valid_cell(neighbour, size)
            and lab[neighbour.row][neighbour.col]
            and neighbour not in visited
        ):
            yield neighbour


def path_exists(
    lab: Sequence[Sequence[bool]], start: Cell | Sequence[int], end: Cell | Sequence[int]
) -> bool:
    """True when end can be reached from start through open cells."""
    start, end = _as_cell(start), _as_cell(end)
    size = _grid_size(lab)
    _check_inside(start, size, "start")
    _check_inside(end, size, "end")
    visited: set[Cell] = set()
    stack = [start]
    while stack:
        cell = stack.pop()
        visited.add(cell)
        if cell == end:
            return True
        stack.extend(_open_neighbours(lab, cell, visited))
    return False


def find_path(
    lab: Sequence[Sequence[bool]], start: Cell | Sequence[int], end: Cell | Sequence[int]
) -> list[Cell] | None:
    """Cells from start to end found by depth-first search, or None if unreachable."""
    start, end = _as_cell(start), _as_cell(end)
    size = _grid_size(lab)
    _check_inside(start, size, "start")
    _check_inside(end, size, "end")
    visited: set[Cell] = set()
    # Each entry is (cell, entry it was reached from).
    stack: list[tuple[Cell, tuple | None]] = [(start, None)]
    while stack:
        entry = stack[-1]
        cell = entry[0]
        if cell in visited:
            stack.pop()
            continue
        visited.add(cell)
        if cell == end:
            path: list[Cell] = []
            link: tuple | None = entry
            while link is not None:
                path.append(link[0])
                link = link[1]
            path.reverse()
            return path
        stack.extend((n, entry) for n in _open_neighbours(lab, cell, visited))
    return None


def format_path(path: Iterable[Cell]) -> str:
    """Cells written as (row,col), each followed by a dash."""
    return "".join(f"{cell}-" for cell in path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a path in the built-in labyrinth.")
    parser.add_argument("--start", nargs=2, type=int, default=[1, 2], metavar=("ROW", "COL"))
    parser.add_argument("--end", nargs=2, type=int, default=[5, 4], metavar=("ROW", "COL"))
    args = parser.parse_args(argv)
    try:
        path = find_path(LABYRINTH, Cell(*args.start), Cell(*args.end))
    except ValueError as error:
        parser.error(str(error))
    if path is None:
        print("No Existe Ruta")
    else:
        print("Existe Ruta")
        print(format_path(path))
    return 0