import pytest

from aocdays.day12 import format_matrix, label_regions, part_1, part_2

SMALL = "AAAA\nBBCD\nBBCC\nEEEC"

LARGE = "\n".join(
    [
        "RRRRIICCFF",
        "RRRRIICCCF",
        "VVRRRCCFFF",
        "VVRCCCJFFF",
        "VVVVCJJCFE",
        "VVIVCCJJEE",
        "VVIIICJJEE",
        "MIIIIIJJEE",
        "MIIISIJEEE",
        "MMMISSJEEE",
    ]
)


def test_part_1_small_example():
    assert part_1(SMALL) == 140


def test_part_2_small_example():
    assert part_2(SMALL) == 80


def test_part_1_large_example():
    assert part_1(LARGE) == 1930


def test_sides_never_exceed_perimeter_on_large_example():
    assert part_2(LARGE) <= part_1(LARGE)


def test_hole_reduces_discounted_price():
    text = "AAA\nABA\nAAA"
    assert part_2(text) < part_1(text)


def test_isolated_cells_price_the_same_either_way():
    text = "AB\nBA"
    assert part_1(text) == part_2(text)


def test_windows_line_endings_are_ignored():
    assert part_1(SMALL.replace("\n", "\r\n")) == part_1(SMALL)


def test_labels_are_consecutive_from_one():
    grid = LARGE.split("\n")
    labels = label_regions(grid)
    values = {value for row in labels for value in row}
    assert values == set(range(1, max(values) + 1))
    assert labels[0][0] == 1


def test_adjacent_equal_plants_share_a_label():
    grid = LARGE.split("\n")
    labels = label_regions(grid)
    for r, line in enumerate(grid):
        for c, char in enumerate(line):
            if c + 1 < len(line) and line[c + 1] == char:
                assert labels[r][c] == labels[r][c + 1]
            if r + 1 < len(grid) and grid[r + 1][c] == char:
                assert labels[r][c] == labels[r + 1][c]


def test_label_implies_same_plant():
    grid = SMALL.split("\n")
    labels = label_regions(grid)
    plant_of = {}
    for r, line in enumerate(grid):
        for c, char in enumerate(line):
            assert plant_of.setdefault(labels[r][c], char) == char


def test_format_matrix_round_trip():
    matrix = label_regions(LARGE.split("\n"))
    rendered = format_matrix(matrix)
    lines = rendered.split("\n")
    assert all(len(line) == 4 * len(matrix[0]) for line in lines)
    assert [[int(v) for v in line.split()] for line in lines] == matrix


def test_ragged_grid_is_rejected():
    with pytest.raises(ValueError):
        part_1("AAA\nAA")