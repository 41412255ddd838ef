"""Historian list comparison: distances and similarity scores of two columns."""

from __future__ import annotations

import logging
from collections import Counter

log = logging.getLogger(__name__)


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two space-separated integers into left and right columns."""
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        parts = line.replace("\r", "").replace("   ", " ").split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed line: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    log.debug("columns: %s %s", left, right)
    return left, right


def part_1(text: str) -> int:
    """Sum of distances between the sorted left and right columns."""
    left, right = parse_columns(text)
    total = sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))
    log.info("Sum of disparities: %d", total)
    return total


def part_2(text: str) -> int:
    """Sum of each left number times how often it appears on the right."""
    left, right = parse_columns(text)
    counts = Counter(right)
    total = sum(value * counts[value] for value in left)
    log.info("Similarity score: %d", total)
    return total