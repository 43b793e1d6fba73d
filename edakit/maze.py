"""Random maze generation by depth-first carving on a grid."""

from __future__ import annotations

import random
from enum import IntEnum


class Direction(IntEnum):
    """Compass directions used while carving."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column step (dy, dx) for this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


class Maze:
    """A height x width grid of walls (1) and corridors (0)."""

    WALL = "@"
    EMPTY = "-"
    _LIMIT = "="

    def __init__(self, height: int, width: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._dirs = list(Direction)
        self.height = 0
        self.width = 0
        self.grid: list[list[int]] = []
        self.generate(height, width)

    def reset(self, height: int, width: int) -> None:
        """Resize the grid and fill it with walls."""
        if height < 0 or width < 0:
            raise ValueError("maze dimensions must not be negative")
        self.height = height
        self.width = width
        self.grid = [[1] * width for _ in range(height)]

    def generate(self, height: int, width: int) -> None:
        """Build a new maze, carving from the top-left corner."""
        if height < 1 or width < 1:
            raise ValueError("maze dimensions must be positive")
        self.reset(height, width)
        self._carve(0, 0)

    def in_range(self, i: int, j: int) -> bool:
        return 0 <= i < self.height and 0 <= j < self.width

    def _shuffle_dirs(self) -> None:
        for i in range(4):
            r = self._rng.randrange(4)
            self._dirs[r], self._dirs[i] = self._dirs[i], self._dirs[r]

    def _carve(self, i: int, j: int) -> None:
        # Each frame is [row, col, next direction slot]; the direction order
        # is shared across frames, so a deeper cell reshuffles it for its callers.
        stack: list[list[int]] = []

        def enter(row: int, col: int) -> None:
            self.grid[row][col] = 0
            self._shuffle_dirs()
            stack.append([row, col, 0])

        enter(i, j)
        while stack:
            frame = stack[-1]
            row, col, k = frame
            if k == 4:
                stack.pop()
                continue
            frame[2] = k + 1
            dy, dx = self._dirs[k].delta
            next_row, next_col = row + 2 * dy, col + 2 * dx
            if self.in_range(next_row, next_col) and self.grid[next_row][next_col] == 1:
                self.grid[next_row - dy][next_col - dx] = 0
                enter(next_row, next_col)

    def render(self) -> str:
        """Text drawing of the maze with its frame."""
        border = f" {self._LIMIT * self.width} \n"
        rows = "".join(
            "|" + "".join(self.EMPTY if cell == 0 else self.WALL for cell in row) + "|\n"
            for row in self.grid
        )
        return f" Maze ( {self.height} x {self.width} ) \n{border}{rows}{border}"

    def __str__(self) -> str:
        return self.render()