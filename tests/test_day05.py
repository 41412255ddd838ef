import pytest

from aocdays.day05 import parse_input, part_1, part_2

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13"""

UPDATES = """75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""

EXAMPLE = RULES + "\n\n" + UPDATES


def test_part_1_example():
    assert part_1(EXAMPLE) == 143


def test_part_2_example():
    assert part_2(EXAMPLE) == 123


def test_parse_input_splits_rules_and_updates():
    rules, updates = parse_input(EXAMPLE)
    assert rules[0] == (47, 53)
    assert rules[-1] == (53, 13)
    assert updates[0] == [75, 47, 61, 53, 29]
    assert updates[-1] == [97, 13, 75, 29, 47]
    assert len(rules) == len(RULES.split("\n"))
    assert len(updates) == len(UPDATES.split("\n"))


def test_trailing_newline_and_crlf_do_not_change_results():
    variant = EXAMPLE.replace("\n", "\r\n") + "\r\n"
    assert part_1(variant) == part_1(EXAMPLE)
    assert part_2(variant) == part_2(EXAMPLE)


def test_ordered_update_counts_only_in_part_1():
    text = "1|2\n2|3\n\n1,2,3"
    assert part_1(text) == 2
    assert part_2(text) == 0


def test_unordered_update_counts_only_in_part_2():
    text = "1|2\n2|3\n\n3,2,1"
    assert part_1(text) == 0
    assert part_2(text) == 2


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_input("1|2|3\n\n1,2")


def test_non_numeric_page_raises():
    with pytest.raises(ValueError):
        parse_input("1|2\n\n1,x")