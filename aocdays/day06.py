"""Guard patrol: cells covered by the walk and obstacle spots that trap it in a loop."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)

# Up, right, down, left: the guard turns right on each obstacle.
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_OBSTACLE = "#"
_GUARD = "^"

Position = tuple[int, int]


def _parse_grid(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n")]


def _find_start(grid: list[str]) -> Position:
    """Position of the last guard marker in the grid, or the top-left corner."""
    start = (0, 0)
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == _GUARD:
                start = (row, col)
    return start


def _walk(
    grid: list[str],
    start: Position,
    visited: set[Position],
    extra_obstacle: Position | None = None,
) -> bool:
    """Walk the guard until it leaves the grid, recording every cell entered.

    With an extra obstacle the walk also watches for a repeated turn, and
    returns True as soon as the guard is caught in a loop.
    """
    rows, cols = len(grid), len(grid[0])
    row, col = start
    direction = 0
    turns: set[tuple[int, int, int]] = set()
    while True:
        d_row, d_col = _DIRECTIONS[direction]
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < rows and 0 <= next_col < cols):
            return False
        if grid[next_row][next_col] == _OBSTACLE or (next_row, next_col) == extra_obstacle:
            if extra_obstacle is not None:
                state = (row, col, direction)
                if state in turns:
                    return True
                turns.add(state)
            direction = (direction + 1) % len(_DIRECTIONS)
        else:
            row, col = next_row, next_col
            visited.add((row, col))


def part_1(text: str) -> int:
    """Number of distinct cells the guard covers before leaving the grid."""
    grid = _parse_grid(text)
    start = _find_start(grid)
    visited = {start}
    _walk(grid, start, visited)
    log.info("Visited cells: %d", len(visited))
    return len(visited)


def part_2(text: str) -> int:
    """Number of single obstacle placements that make the guard walk in a loop.

    Candidate cells are those marked as visited; cells reached during the
    trial walks are marked too and become candidates later in the scan.
    """
    grid = _parse_grid(text)
    start = _find_start(grid)
    visited = {start}
    _walk(grid, start, visited)

    loops = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if (row, col) not in visited or char == _OBSTACLE:
                continue
            if _walk(grid, start, visited, extra_obstacle=(row, col)):
                log.debug("loop with obstacle at %s", (row, col))
                loops += 1
    log.info("Loop positions: %d", loops)
    return loops