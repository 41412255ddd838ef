"""Claw machines: fewest tokens needed to reach each prize."""

from __future__ import annotations

import logging
from collections.abc import Sequence

log = logging.getLogger(__name__)

_MAX_PRESSES = 100
_COST_A = 3
_COST_B = 1

Vector = tuple[int, int]
Machine = tuple[Vector, Vector, Vector]


def _parse_vector(line: str) -> Vector:
    _, sep, values = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in line: {line!r}")
    parts = [int(part.strip()[2:]) for part in values.split(",")]
    if len(parts) != 2:
        raise ValueError(f"expected two coordinates in line: {line!r}")
    return parts[0], parts[1]


def parse_machines(lines: Sequence[str]) -> list[Machine]:
    """Parse blocks of button A, button B and prize lines.

    Each block is recorded when the line following it (normally blank) is
    reached, so a block without such a line is dropped.
    """
    machines: list[Machine] = []
    current: list[Vector] = []
    for index, line in enumerate(lines):
        position = index % 4
        if position == 0:
            current = [_parse_vector(line)]
        elif position in (1, 2):
            current.append(_parse_vector(line))
        else:
            a, b, prize = current
            machines.append((a, b, prize))
    log.debug("machines: %s", machines)
    return machines


def _machines(text: str) -> list[Machine]:
    return parse_machines([line.strip() for line in text.split("\n")])


def _fewest_tokens(machine: Machine) -> int | None:
    (ax, ay), (bx, by), (px, py) = machine
    tokens = []
    for b_times in range(max(px // bx, py // by), -1, -1):
        if px < b_times * bx or py < b_times * by:
            continue
        left_x = px - b_times * bx
        left_y = py - b_times * by
        if left_x % ax or left_y % ay:
            continue
        a_times = left_x // ax
        if a_times > _MAX_PRESSES or b_times > _MAX_PRESSES:
            continue
        if a_times * ay + b_times * by != py:
            log.warning("inconsistent solution %s for machine %s", (a_times, b_times), machine)
            continue
        tokens.append(a_times * _COST_A + b_times * _COST_B)
    if len(tokens) > 1:
        log.error("more than one solution for machine %s", machine)
    return min(tokens, default=None)


def part_1(text: str) -> int:
    """Fewest tokens for all winnable prizes, at most 100 presses per button."""
    total = 0
    for machine in _machines(text):
        tokens = _fewest_tokens(machine)
        if tokens is not None:
            total += tokens
    log.info("Tokens: %d", total)
    return total


def _solve(machine: Machine) -> tuple[int, int] | None:
    """Exact non-negative press counts for a machine, found by elimination."""
    (ax, ay), (bx, by), (px, py) = machine
    b_total = bx * ay - by * ax
    c_total = px * ay - py * ax
    if c_total % b_total:
        return None
    b_times = c_total // b_total
    remainder = px - bx * b_times
    if b_times < 0 or remainder < 0:
        return None
    a_times = remainder // ax
    if a_times * ax + b_times * bx != px or a_times * ay + b_times * by != py:
        log.warning("no exact solution for machine %s", machine)
        return None
    return a_times, b_times


def part_2(text: str) -> int:
    """Tokens for all winnable prizes, solved algebraically without a press limit."""
    total = 0
    for machine in _machines(text):
        solution = _solve(machine)
        if solution is not None:
            a_times, b_times = solution
            total += a_times * _COST_A + b_times * _COST_B
    log.info("Tokens: %d", total)
    return total