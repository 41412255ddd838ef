"""Garden plots: fence prices by perimeter and by number of sides."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from itertools import pairwise

log = logging.getLogger(__name__)

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Matrix = list[list[int]]


def _parse_grid(text: str) -> list[str]:
    grid = [line.strip() for line in text.split("\n")]
    width = len(grid[0])
    if any(len(line) != width for line in grid):
        raise ValueError("all rows of the garden must have the same length")
    return grid


def label_regions(grid: Sequence[str]) -> Matrix:
    """Give each 4-connected region of equal plants an id, numbered from 1 in row-major order."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    labels = [[0] * cols for _ in range(rows)]
    next_id = 1
    for row in range(rows):
        for col in range(cols):
            if labels[row][col]:
                continue
            plant = grid[row][col]
            labels[row][col] = next_id
            stack = [(row, col)]
            while stack:
                r, c = stack.pop()
                for d_row, d_col in _DIRECTIONS:
                    nr, nc = r + d_row, c + d_col
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and not labels[nr][nc]
                        and grid[nr][nc] == plant
                    ):
                        labels[nr][nc] = next_id
                        stack.append((nr, nc))
            next_id += 1
    return labels


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with every value right-aligned in a four-character column."""
    return "\n".join("".join(f"{value:4}" for value in row) for row in matrix)


def _pad(labels: Matrix) -> Matrix:
    """Surround the label matrix with a border of zeros."""
    cols = len(labels[0]) if labels else 0
    border = [0] * (cols + 2)
    return [border] + [[0, *row, 0] for row in labels] + [list(border)]


def _labelled(text: str) -> tuple[Matrix, Counter[int]]:
    labels = label_regions(_parse_grid(text))
    log.debug("regions:\n%s", format_matrix(labels))
    areas = Counter(value for row in labels for value in row)
    log.debug("areas: %s", dict(areas))
    return labels, areas


def part_1(text: str) -> int:
    """Total fence price: sum of area times perimeter for every region."""
    labels, areas = _labelled(text)
    padded = _pad(labels)
    perimeters: Counter[int] = Counter()
    for row, line in enumerate(labels, start=1):
        for col, region in enumerate(line, start=1):
            perimeters[region] += sum(
                1 for d_row, d_col in _DIRECTIONS if padded[row + d_row][col + d_col] != region
            )
    log.debug("perimeters: %s", dict(perimeters))
    total = sum(area * perimeters[region] for region, area in areas.items())
    log.info("Total price: %d", total)
    return total


def part_2(text: str) -> int:
    """Discounted fence price: sum of area times number of sides for every region.

    Sides are counted as corners, found by sliding a 2x2 window over the
    zero-padded label matrix.
    """
    labels, areas = _labelled(text)
    padded = _pad(labels)
    corners: Counter[int] = Counter()
    for upper, lower in pairwise(padded):
        for (top_left, top_right), (bottom_left, bottom_right) in zip(
            pairwise(upper), pairwise(lower)
        ):
            window = (top_left, top_right, bottom_left, bottom_right)
            for region in set(window) - {0}:
                same = window.count(region)
                if same in (1, 3):
                    corners[region] += 1
                elif same == 2 and (
                    (top_left == region and bottom_right == region)
                    or (bottom_left == region and top_right == region)
                ):
                    corners[region] += 2
    log.debug("corners: %s", dict(corners))
    total = sum(area * corners[region] for region, area in areas.items())
    log.info("Total discounted price: %d", total)
    return total