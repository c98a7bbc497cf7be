"""Dynamic programming and counting over two-dimensional grids."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = [
    "min_repaint",
    "downhill_paths",
    "largest_square",
    "PrefixSums2D",
    "rectangle_union_area",
    "matrix_max",
]

_BOARD = 8
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _rectangular(rows: Iterable[Sequence]) -> list[Sequence]:
    rows = list(rows)
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return rows


def min_repaint(board: Iterable[str]) -> int:
    """Return the fewest squares to repaint to cut an 8x8 chessboard from board.

    ``board`` holds rows of 'B' and 'W'.
    """
    rows = _rectangular(board)
    height, width = len(rows), len(rows[0])
    if height < _BOARD or width < _BOARD:
        raise ValueError("the board must be at least 8 by 8")
    best = _BOARD * _BOARD // 2
    for top in range(height - _BOARD + 1):
        for left in range(width - _BOARD + 1):
            off_black = sum(
                (rows[top + i][left + j] == "B") != ((i + j) % 2 == 0)
                for i in range(_BOARD)
                for j in range(_BOARD)
            )
            best = min(best, off_black, _BOARD * _BOARD - off_black)
    return best


def downhill_paths(heights: Iterable[Sequence[int]]) -> int:
    """Count the strictly downhill paths from the top-left to the bottom-right cell."""
    grid = _rectangular(heights)
    rows, cols = len(grid), len(grid[0])
    paths = [[0] * cols for _ in range(rows)]
    paths[0][0] = 1
    cells = sorted(
        ((height, r, c) for r, row in enumerate(grid) for c, height in enumerate(row)),
        reverse=True,
    )
    for height, r, c in cells:
        arriving = paths[r][c]
        if not arriving or (r, c) == (rows - 1, cols - 1):
            continue
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] < height:
                paths[nr][nc] += arriving
    return paths[-1][-1]


def largest_square(rows: Iterable[str]) -> int:
    """Return the area of the largest square made only of '1' cells."""
    previous: list[int] = []
    best = 0
    for line in rows:
        current: list[int] = []
        for j, cell in enumerate(line):
            if cell == "1":
                up = previous[j] if previous else 0
                diagonal = previous[j - 1] if previous and j else 0
                left = current[j - 1] if j else 0
                side = min(up, diagonal, left) + 1
            else:
                side = 0
            current.append(side)
            best = max(best, side)
        previous = current
    return best * best


class PrefixSums2D:
    """Constant-time sums over rectangular regions of a grid."""

    def __init__(self, grid: Iterable[Sequence[int]]) -> None:
        rows = _rectangular(grid)
        self._rows, self._cols = len(rows), len(rows[0])
        table = [[0] * (self._cols + 1)]
        for row in rows:
            above = table[-1]
            line = [0]
            for x, value in enumerate(row, start=1):
                line.append(above[x] + line[x - 1] - above[x - 1] + value)
            table.append(line)
        self._table = table

    def region_sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum the cells in columns x1..x2 and rows y1..y2, counted from 1."""
        if not (1 <= x1 <= x2 <= self._cols and 1 <= y1 <= y2 <= self._rows):
            raise IndexError("region lies outside the grid")
        t = self._table
        return t[y2][x2] - t[y1 - 1][x2] - t[y2][x1 - 1] + t[y1 - 1][x1 - 1]


def rectangle_union_area(rectangles: Iterable[tuple[int, int, int, int]]) -> int:
    """Return the area covered by axis-aligned rectangles (x1, y1, x2, y2)."""
    covered = {
        (x, y)
        for x1, y1, x2, y2 in rectangles
        for x in range(x1, x2)
        for y in range(y1, y2)
    }
    return len(covered)


def matrix_max(grid: Iterable[Sequence[int]]) -> tuple[int, int, int]:
    """Return the largest value and its first 1-based (row, column) position."""
    best: tuple[int, int, int] | None = None
    for r, row in enumerate(grid, start=1):
        for c, value in enumerate(row, start=1):
            if best is None or value > best[0]:
                best = (value, r, c)
    if best is None:
        raise ValueError("the grid must not be empty")
    return best