"""Bridge calibration: which equations can be made true with the given operators."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import product

log = logging.getLogger(__name__)

_PART_1_OPERATORS = ("+", "*")
_PART_2_OPERATORS = ("+", "*", "|")


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    result: int
    numbers: tuple[int, ...]


def parse_equations(text: str) -> list[Equation]:
    """Parse lines of the form ``result: n1 n2 ...``."""
    equations = []
    for line in text.split("\n"):
        line = line.strip()
        head, sep, tail = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line: {line!r}")
        numbers = tuple(int(part.strip()) for part in tail.split(" ") if part)
        if not numbers:
            raise ValueError(f"no numbers in line: {line!r}")
        equations.append(Equation(int(head), numbers))
    log.debug("equations: %s", equations)
    return equations


def operator_combinations(count: int, operators: Sequence[str]) -> Iterator[tuple[str, ...]]:
    """Every sequence of ``count`` operators, the first position changing fastest."""
    for combo in product(operators, repeat=count):
        yield tuple(reversed(combo))


def evaluate(numbers: Sequence[int], operators: Sequence[str]) -> int:
    """Apply the operators strictly left to right; ``|`` concatenates digits."""
    if len(operators) != len(numbers) - 1:
        raise ValueError("need exactly one operator between each pair of numbers")
    value = numbers[0]
    for operator, number in zip(operators, numbers[1:]):
        if operator == "+":
            value += number
        elif operator == "*":
            value *= number
        elif operator == "|":
            value = int(f"{value}{number}")
        else:
            raise ValueError(f"unknown operator: {operator!r}")
    return value


def _solvable(equation: Equation, operators: Sequence[str]) -> bool:
    return any(
        evaluate(equation.numbers, combo) == equation.result
        for combo in operator_combinations(len(equation.numbers) - 1, operators)
    )


def _calibration(text: str, operators: Sequence[str]) -> int:
    total = sum(eq.result for eq in parse_equations(text) if _solvable(eq, operators))
    log.info("Calibration result: %d", total)
    return total


def part_1(text: str) -> int:
    """Sum of test values reachable with addition and multiplication."""
    return _calibration(text, _PART_1_OPERATORS)


def part_2(text: str) -> int:
    """Sum of test values reachable with addition, multiplication and concatenation."""
    return _calibration(text, _PART_2_OPERATORS)