"""Word search: count XMAS in every direction and X-shaped MAS crosses."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

_TARGET = "XMAS"
_DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)
# Each diagonal of a cross, as two offsets from the centre.
_DIAGONALS = (
    ((-1, -1), (1, 1)),
    ((-1, 1), (1, -1)),
)


def _grid(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n")]


def _ray(grid: list[str], row: int, col: int, d_row: int, d_col: int, length: int) -> str:
    """Characters read from (row, col) along a direction, stopping at the edge."""
    rows, cols = len(grid), len(grid[0])
    chars = [grid[row][col]]
    for step in range(1, length):
        r, c = row + d_row * step, col + d_col * step
        if not (0 <= r < rows and 0 <= c < cols):
            break
        chars.append(grid[r][c])
    return "".join(chars)


def part_1(text: str) -> int:
    """Number of times XMAS appears horizontally, vertically or diagonally."""
    grid = _grid(text)
    count = sum(
        1
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == _TARGET[0]
        for d_row, d_col in _DIRECTIONS
        if _ray(grid, row, col, d_row, d_col, len(_TARGET)) == _TARGET
    )
    log.info("XMAS count: %d", count)
    return count


def _is_cross(grid: list[str], row: int, col: int) -> bool:
    rows, cols = len(grid), len(grid[0])
    correct = 0
    for (r1, c1), (r2, c2) in _DIAGONALS:
        a_row, a_col = row + r1, col + c1
        b_row, b_col = row + r2, col + c2
        if not (0 <= a_row < rows and 0 <= a_col < cols):
            break
        if not (0 <= b_row < rows and 0 <= b_col < cols):
            break
        if {grid[a_row][a_col], grid[b_row][b_col]} == {"M", "S"}:
            correct += 1
    return correct == len(_DIAGONALS)


def part_2(text: str) -> int:
    """Number of A cells that sit at the centre of two crossing MAS words."""
    grid = _grid(text)
    count = sum(
        1
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "A" and _is_cross(grid, row, col)
    )
    log.info("X-MAS count: %d", count)
    return count