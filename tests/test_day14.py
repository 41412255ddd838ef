import pytest

from aocdays import day14


def test_parse_robots():
    text = "p=0,4 v=3,-3\np=6,3 v=-1,-3"
    assert day14.parse_robots(text) == [((0, 4), (3, -3)), ((6, 3), (-1, -3))]


def test_parse_robots_rejects_malformed_line():
    with pytest.raises(ValueError):
        day14.parse_robots("p=1,2")


def test_parse_robots_rejects_bad_pair():
    with pytest.raises(ValueError):
        day14.parse_robots("p=1 v=2,3")


def test_part_1_one_robot_per_quadrant_with_wrapping():
    text = "\n".join(
        [
            "p=0,0 v=-1,-1",
            "p=100,0 v=1,0",
            "p=0,102 v=1,0",
            "p=99,0 v=0,0",
            "p=3,4 v=1,1",
            "p=50,5 v=0,0",
        ]
    )
    assert day14.part_1(text) == 2


def test_part_1_empty_quadrant_gives_zero():
    text = "p=0,0 v=0,0\np=1,1 v=0,0"
    assert day14.part_1(text) == 0


def test_flood_fill_fills_connected_area_only():
    grid = [[0, 1], [1, 0]]
    day14.flood_fill(grid, 0, 0, 0, 2)
    assert grid == [[2, 1], [1, 0]]


def test_flood_fill_whole_region():
    grid = [[0, 0, 0], [0, 1, 0]]
    day14.flood_fill(grid, 0, 0, 0, 1)
    assert grid == [[1, 1, 1], [1, 1, 1]]


def test_flood_fill_out_of_bounds_and_mismatch_are_noops():
    grid = [[0, 1], [1, 0]]
    day14.flood_fill(grid, 5, 0, 0, 1)
    day14.flood_fill(grid, 0, 1, 0, 1)
    assert grid == [[0, 1], [1, 0]]


def test_render_tree_rows_follow_y():
    grid = [[1, 0], [0, 0], [0, 1]]
    assert day14.render_tree(grid) == "#..\n..#\n"


def test_grid_to_image_size_and_pixels():
    grid = [[1, 0, 0], [0, 0, 1]]
    image = day14.grid_to_image(grid)
    assert image.size == (4, 3)
    assert image.getpixel((0, 0)) == (255, 255, 255)
    assert image.getpixel((2, 1)) == (255, 255, 255)
    assert image.getpixel((1, 0)) == (0, 0, 0)
    assert image.getpixel((3, 2)) == (0, 0, 0)


def test_part_2_saves_frames_when_wall_splits_grid(tmp_path):
    text = "\n".join(f"p=50,{y} v=0,0" for y in range(day14.HEIGHT))
    saved = day14.part_2(text, tmp_path)
    assert saved == list(range(1, 501))
    assert (tmp_path / "output1.png").is_file()
    assert (tmp_path / "output500.png").is_file()


def test_part_2_saves_nothing_when_fill_is_small(tmp_path):
    text = "\n".join(f"p=1,{y} v=0,0" for y in range(day14.HEIGHT))
    assert day14.part_2(text, tmp_path) == []
    assert list(tmp_path.iterdir()) == []