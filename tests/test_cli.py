import pytest

from advent2022 import day01, day13
from advent2022.cli import main, solve

DAY1_EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"

DAY13_EXAMPLE = "[1,1,3,1,1]\n[1,1,5,1,1]\n\n[[1],[2,3,4]]\n[[1],4]\n"


def test_solve_day1():
    assert solve(1, DAY1_EXAMPLE) == (24000, 45000)


def test_solve_matches_module_parts():
    assert solve(13, DAY13_EXAMPLE) == (
        day13.part1(DAY13_EXAMPLE),
        day13.part2(DAY13_EXAMPLE),
    )


@pytest.mark.parametrize("day", [0, 17, -1])
def test_solve_unknown_day(day):
    with pytest.raises(ValueError):
        solve(day, DAY1_EXAMPLE)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY1_EXAMPLE)
    assert main(["1", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["## Part 1", " > 24000", "## Part 2", " > 45000"]


def test_main_output_matches_module(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY1_EXAMPLE)
    main(["1", str(path)])
    out = capsys.readouterr().out
    assert f" > {day01.part1(DAY1_EXAMPLE)}" in out
    assert f" > {day01.part2(DAY1_EXAMPLE)}" in out


def test_main_unknown_day(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DAY1_EXAMPLE)
    assert main(["42", str(path)]) == 1
    assert "day 42" in capsys.readouterr().err


def test_main_bad_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("not a packet\n")
    assert main(["13", str(path)]) == 1
    assert capsys.readouterr().err.startswith("error:")