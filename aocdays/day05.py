"""Print queue: page ordering rules, valid updates and reordering."""

from __future__ import annotations

import logging
from collections import defaultdict

log = logging.getLogger(__name__)


def parse_input(text: str) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Split the input into ordering rules and updates, separated by a blank line."""
    rules: list[tuple[int, int]] = []
    updates: list[list[int]] = []
    after_split = False
    for line in (item.strip() for item in text.split("\n")):
        if not line:
            after_split = True
        elif not after_split:
            parts = line.split("|")
            if len(parts) != 2:
                raise ValueError(f"malformed rule: {line!r}")
            rules.append((int(parts[0]), int(parts[1])))
        else:
            updates.append([int(page) for page in line.split(",")])
    log.debug("rules: %s updates: %s", rules, updates)
    return rules, updates


def _must_precede(rules: list[tuple[int, int]]) -> dict[int, set[int]]:
    """Map each page to the pages that are not allowed to come after it."""
    before: dict[int, set[int]] = defaultdict(set)
    for first, second in rules:
        before[second].add(first)
    return before


def _first_violation(update: list[int], before: dict[int, set[int]]) -> tuple[int, int] | None:
    for i, page in enumerate(update[:-1]):
        forbidden = before.get(page)
        if not forbidden:
            continue
        for x in range(i, len(update)):
            if update[x] in forbidden:
                return i, x
    return None


def _middle(update: list[int]) -> int:
    return update[(len(update) - 1) // 2]


def part_1(text: str) -> int:
    """Sum of the middle pages of the updates that are already in order."""
    rules, updates = parse_input(text)
    before = _must_precede(rules)
    total = sum(_middle(update) for update in updates if _first_violation(update, before) is None)
    log.info("Sum of middle pages: %d", total)
    return total


def _reorder(update: list[int], before: dict[int, set[int]]) -> list[int] | None:
    """Swap offending pairs until the update is valid; None if it already was."""
    fixed = list(update)
    changed = False
    while (violation := _first_violation(fixed, before)) is not None:
        i, x = violation
        fixed[i], fixed[x] = fixed[x], fixed[i]
        changed = True
    return fixed if changed else None


def part_2(text: str) -> int:
    """Sum of the middle pages of the out-of-order updates once reordered."""
    rules, updates = parse_input(text)
    before = _must_precede(rules)
    total = 0
    for update in updates:
        fixed = _reorder(update, before)
        if fixed is not None:
            log.debug("reordered %s -> %s", update, fixed)
            total += _middle(fixed)
    log.info("Sum of reordered middle pages: %d", total)
    return total