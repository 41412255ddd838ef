"""Corrupted memory scanning for mul instructions, optionally gated by do/don't."""

from __future__ import annotations

import logging
import re

log = logging.getLogger(__name__)

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_DO = re.compile(r"do")
_DONT = re.compile(r"don't")


def part_1(text: str) -> int:
    """Sum of the products of every well-formed mul instruction."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_2(text: str) -> int:
    """Sum of the products of mul instructions that fall inside enabled spans."""
    dont_positions = [match.start() for match in _DONT.finditer(text)]
    dont_set = set(dont_positions)
    # The sentinel closes the last enabled span at the end of the text.
    dont_positions.append(len(text))

    do_positions = [0] + [match.start() for match in _DO.finditer(text)]
    do_positions = [pos for pos in do_positions if pos not in dont_set]

    ranges = [
        (start, next(end for end in dont_positions if end > start))
        for start in do_positions
    ]
    log.debug("enabled ranges: %s", ranges)

    total = 0
    for match in _MUL.finditer(text):
        position = match.start()
        if any(start <= position <= end for start, end in ranges):
            total += int(match.group(1)) * int(match.group(2))
    return total