import pytest

from advent2022.day15 import (
    count_covered,
    find_open_spot,
    intersections_for_row,
    parse_coordinate,
    parse_input,
    parse_line,
    part1,
)

TEST_INPUT = """\
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""


def test_part1_example_row():
    assert count_covered(parse_input(TEST_INPUT), 10) == 26


def test_part2_example():
    assert find_open_spot(0, 20, parse_input(TEST_INPUT)) == 56_000_011


def test_part1_raises_when_row_unreached():
    with pytest.raises(ValueError):
        part1(TEST_INPUT)


def test_parse_coordinate():
    assert parse_coordinate("x=2, y=18") == (2, 18)
    assert parse_coordinate("x=-2, y=15") == (-2, 15)


def test_parse_line():
    line = "Sensor at x=2, y=18: closest beacon is at x=-2, y=15"
    assert parse_line(line) == ((2, 18), (-2, 15))


def test_parse_input():
    text = "\n".join(
        [
            "Sensor at x=2, y=18: closest beacon is at x=-2, y=15",
            "Sensor at x=9, y=16: closest beacon is at x=10, y=16",
        ]
    )
    result = parse_input(text)
    assert len(result) == 2
    assert result[0] == ((2, 18), (-2, 15))
    assert result[1] == ((9, 16), (10, 16))


def test_parse_input_invalid():
    with pytest.raises(ValueError):
        parse_input("Invalid input")


def test_intersections_for_row():
    pairs = [((0, 0), (2, 0))]
    assert intersections_for_row(pairs, 1) == [(-1, 1)]
    assert intersections_for_row(pairs, 2) == [(0, 0)]
    assert intersections_for_row(pairs, 3) == []


def test_intersections_sorted_by_start():
    pairs = [((10, 0), (11, 0)), ((0, 0), (1, 0))]
    assert intersections_for_row(pairs, 0) == [(-1, 1), (9, 11)]