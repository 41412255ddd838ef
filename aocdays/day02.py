"""Reactor report safety checks, with and without the problem dampener."""

from __future__ import annotations

import logging
from itertools import pairwise

log = logging.getLogger(__name__)


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of space-separated levels per line."""
    return [[int(value) for value in line.strip().split(" ")] for line in text.split("\n")]


def is_safe(levels: list[int]) -> bool:
    """A report is safe when it moves in one direction by steps of 1 to 3."""
    increasing = False
    decreasing = False
    for a, b in pairwise(levels):
        diff = a - b
        if diff > 0:
            increasing = True
        elif diff < 0:
            decreasing = True
        if not 1 <= abs(diff) <= 3:
            return False
    return increasing != decreasing


def _safe_with_dampener(levels: list[int]) -> bool:
    if is_safe(levels):
        return True
    return any(is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels)))


def part_1(text: str) -> int:
    """Number of safe reports."""
    count = sum(1 for report in parse_reports(text) if is_safe(report))
    log.info("Safe counter: %d", count)
    return count


def part_2(text: str) -> int:
    """Number of reports that are safe, allowing one level to be removed."""
    count = sum(1 for report in parse_reports(text) if _safe_with_dampener(report))
    log.info("Safe counter with dampener: %d", count)
    return count