"""Command line entry point: solve one puzzle part from an input file."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from os import PathLike
from pathlib import Path

from aocdays import day01, day02, day03, day04, day05, day06, day07, day08, day12, day13, day14
from aocdays.helpers import load_text

log = logging.getLogger(__name__)

DEFAULT_IMAGE_DIR = Path("images")

# Day 9 was solved with the same code as day 8.
_SOLVERS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day08,
    12: day12,
    13: day13,
    14: day14,
}


def _run(day: int, part: int, text: str, image_dir: str | PathLike[str]) -> str:
    if part not in (1, 2):
        raise ValueError(f"invalid part: {part}")
    module = _SOLVERS.get(day)
    if module is None:
        raise ValueError(f"no solver for day {day}")
    if part == 1:
        return str(module.part_1(text))
    if module is day14:
        return ",".join(str(second) for second in day14.part_2(text, image_dir))
    return str(module.part_2(text))


def solve(day: int, part: int, text: str) -> str:
    """Answer for the given day and part, as text."""
    return _run(day, part, text, DEFAULT_IMAGE_DIR)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aocdays", description="Solve a puzzle part.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", type=Path, help="puzzle input file")
    parser.add_argument(
        "--images", type=Path, default=DEFAULT_IMAGE_DIR, help="where day 14 writes frames"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = load_text(args.input)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    result = _run(args.day, args.part, text, args.images)
    log.info("Time it took to run: %.3f s", time.perf_counter() - start)
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())