"""Resonant collinearity: antinodes produced by pairs of same-frequency antennas."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator
from itertools import combinations

log = logging.getLogger(__name__)

_EMPTY = "."

Position = tuple[int, int]


def _parse_grid(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n")]


def find_antennas(grid: list[str]) -> dict[str, list[Position]]:
    """Map each antenna frequency to its positions, in row-major order."""
    antennas: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != _EMPTY:
                antennas[char].append((row, col))
    log.debug("antennas: %s", dict(antennas))
    return dict(antennas)


def _pairs(antennas: dict[str, list[Position]]) -> Iterator[tuple[Position, Position]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def _bounds(grid: list[str]) -> tuple[int, int]:
    return len(grid), len(grid[0])


def _inside(position: Position, rows: int, cols: int) -> bool:
    row, col = position
    return 0 <= row < rows and 0 <= col < cols


def _format_antinodes(antinodes: set[Position], rows: int, cols: int) -> str:
    return "\n".join(
        "".join("#" if (row, col) in antinodes else _EMPTY for col in range(cols))
        for row in range(rows)
    )


def part_1(text: str) -> int:
    """Number of distinct in-grid cells that hold an antinode of some antenna pair."""
    grid = _parse_grid(text)
    rows, cols = _bounds(grid)
    antinodes: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(find_antennas(grid)):
        d_row, d_col = r2 - r1, c2 - c1
        for candidate in ((r1 - d_row, c1 - d_col), (r2 + d_row, c2 + d_col)):
            if _inside(candidate, rows, cols):
                antinodes.add(candidate)
    log.info("Amount of antinodes: %d", len(antinodes))
    return len(antinodes)


def part_2(text: str) -> int:
    """Number of distinct in-grid cells on the line through any antenna pair.

    Positions are counted at whole multiples of the pair's offset, including
    the antennas themselves.
    """
    grid = _parse_grid(text)
    rows, cols = _bounds(grid)
    antinodes: set[Position] = set()
    for first, second in _pairs(find_antennas(grid)):
        antinodes.update((first, second))
        d_row, d_col = second[0] - first[0], second[1] - first[1]
        for (row, col), step in ((first, -1), (second, 1)):
            while True:
                row, col = row + step * d_row, col + step * d_col
                if not _inside((row, col), rows, cols):
                    break
                antinodes.add((row, col))
    log.debug("antinodes:\n%s", _format_antinodes(antinodes, rows, cols))
    log.info("Amount of antinodes: %d", len(antinodes))
    return len(antinodes)