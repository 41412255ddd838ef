"""Restroom robots: wrap-around movement, quadrant safety factor and tree frames."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from PIL import Image

log = logging.getLogger(__name__)

WIDTH = 101
HEIGHT = 103
_SECONDS = 1
_FRAMES = 500
_MIN_FILLED = 5000
_MAX_FILLED = 10000

Vector = tuple[int, int]
Robot = tuple[Vector, Vector]
Grid = list[list[int]]


def _parse_pair(field: str) -> Vector:
    parts = field.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected two comma-separated integers: {field!r}")
    return int(parts[0]), int(parts[1])


def parse_robots(text: str) -> list[Robot]:
    """Parse lines of the form ``p=x,y v=dx,dy`` into (position, velocity) pairs."""
    robots: list[Robot] = []
    for line in text.split("\n"):
        fields = line.strip().replace("p=", "").replace("v=", "").split(" ")
        if len(fields) != 2:
            raise ValueError(f"malformed robot line: {line!r}")
        position, velocity = (_parse_pair(field) for field in fields)
        robots.append((position, velocity))
    log.debug("robots: %s", robots)
    return robots


def _step(position: Vector, velocity: Vector, seconds: int = _SECONDS) -> Vector:
    x, y = position
    dx, dy = velocity
    return (x + dx * seconds) % WIDTH, (y + dy * seconds) % HEIGHT


def _empty_grid() -> Grid:
    """A grid indexed as grid[x][y]."""
    return [[0] * HEIGHT for _ in range(WIDTH)]


def _quadrant(position: Vector) -> int | None:
    x, y = position
    mid_x, mid_y = WIDTH // 2, HEIGHT // 2
    if x == mid_x or y == mid_y:
        return None
    return (1 if x > mid_x else 0) + (2 if y > mid_y else 0)


def _format_counts(grid: Sequence[Sequence[int]]) -> str:
    return "\n".join(
        "".join(str(grid[x][y]) for x in range(len(grid))) for y in range(len(grid[0]))
    )


def flood_fill(grid: Grid, x: int, y: int, target: int, new: int) -> None:
    """Replace the 4-connected area of ``target`` values containing grid[x][y] with ``new``."""
    if target == new:
        return
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not (0 <= cx < len(grid) and 0 <= cy < len(grid[cx])):
            continue
        if grid[cx][cy] != target:
            continue
        grid[cx][cy] = new
        stack.extend(((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)))


def render_tree(grid: Sequence[Sequence[int]]) -> str:
    """Draw a grid[x][y] as rows of ``#`` (occupied) and ``.`` (empty), one line per y."""
    return "".join(
        "".join("." if grid[x][y] == 0 else "#" for x in range(len(grid))) + "\n"
        for y in range(len(grid[0]))
    )


def grid_to_image(grid: Sequence[Sequence[int]]) -> Image.Image:
    """Black image with a white pixel at (column, row) for every positive cell.

    The image is one pixel wider and taller than the grid.
    """
    image = Image.new("RGB", (len(grid[0]) + 1, len(grid) + 1))
    pixels = image.load()
    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            if value > 0:
                pixels[col_index, row_index] = (255, 255, 255)
    return image


def part_1(text: str) -> int:
    """Safety factor: product of the robot counts in the four quadrants after moving."""
    grid = _empty_grid()
    quadrants = [0, 0, 0, 0]
    for position, velocity in parse_robots(text):
        end = _step(position, velocity)
        grid[end[0]][end[1]] += 1
        quadrant = _quadrant(end)
        if quadrant is not None:
            quadrants[quadrant] += 1
    log.debug("counts:\n%s", _format_counts(grid))
    log.debug("quadrants: %s", quadrants)
    return math.prod(quadrants)


def part_2(text: str, output_dir: str | PathLike[str]) -> list[int]:
    """Simulate 500 seconds and save frames that may show a picture.

    After each second the empty area reached from the first free cell of the
    first column is filled; frames whose filled total lies between 5000 and
    10000 are written as ``output<second>.png``. Returns those seconds.
    """
    robots = parse_robots(text)
    positions = [position for position, _ in robots]
    velocities = [velocity for _, velocity in robots]
    output = Path(output_dir)
    saved: list[int] = []
    for second in range(1, _FRAMES + 1):
        positions = [_step(p, v) for p, v in zip(positions, velocities)]
        grid = _empty_grid()
        for x, y in positions:
            grid[x][y] = 1
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Time %d\n%s", second, render_tree(grid))

        start = next((y for y, value in enumerate(grid[0]) if value == 0), None)
        if start is not None:
            flood_fill(grid, start, 0, 0, 1)

        filled = sum(map(sum, grid))
        if not _MIN_FILLED <= filled <= _MAX_FILLED:
            continue
        output.mkdir(parents=True, exist_ok=True)
        grid_to_image(grid).save(output / f"output{second}.png")
        saved.append(second)
    log.info("Saved frames: %s", saved)
    return saved