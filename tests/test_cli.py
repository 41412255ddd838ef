import pytest

from aocdays import cli, day02, day08, day14

DAY1_EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3"


def test_solve_day_1_part_1():
    assert cli.solve(1, 1, DAY1_EXAMPLE) == "11"


def test_solve_day_1_part_2():
    assert cli.solve(1, 2, DAY1_EXAMPLE) == "31"


def test_solve_matches_module_result():
    text = "7 6 4 2 1\n1 2 7 8 9\n1 3 2 4 5"
    assert cli.solve(2, 1, text) == str(day02.part_1(text))
    assert cli.solve(2, 2, text) == str(day02.part_2(text))


def test_day_9_uses_day_8_solver():
    text = "....\n.a..\n..a.\n...."
    assert cli.solve(9, 1, text) == cli.solve(8, 1, text) == str(day08.part_1(text))
    assert cli.solve(9, 2, text) == str(day08.part_2(text))


def test_solve_day_14_part_1():
    text = "p=0,0 v=0,0\np=100,0 v=0,0"
    assert cli.solve(14, 1, text) == str(day14.part_1(text))


def test_solve_unknown_day():
    with pytest.raises(ValueError):
        cli.solve(10, 1, DAY1_EXAMPLE)


def test_solve_invalid_part():
    with pytest.raises(ValueError):
        cli.solve(1, 3, DAY1_EXAMPLE)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY1_EXAMPLE, encoding="utf-8")
    assert cli.main(["1", "1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "11"


def test_main_missing_file(tmp_path, capsys):
    assert cli.main(["1", "1", str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_unknown_day(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(DAY1_EXAMPLE, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["10", "1", str(path)])
    assert excinfo.value.code == 2