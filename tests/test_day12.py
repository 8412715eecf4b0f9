import pytest

from advent2022.day12 import Heightmap, parse_heightmap, parse_point, part1, part2

TEST_INPUT = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"


def test_part1():
    assert part1(TEST_INPUT) == 31


def test_part2():
    assert part2(TEST_INPUT) == 29


@pytest.mark.parametrize(
    "char, expected",
    [("a", 0), ("z", 25), ("S", 0), ("E", 25)],
)
def test_parse_point(char, expected):
    assert parse_point(char) == expected


def test_parse_point_invalid():
    with pytest.raises(ValueError):
        parse_point("A")


def test_heightmap_row_elevations():
    heightmap = parse_heightmap("aSbE")
    assert [heightmap.elevation(0, col) for col in range(4)] == [0, 0, 1, 25]


def test_parse_heightmap():
    heightmap = parse_heightmap("aSbe\ncdEf")
    assert heightmap.grid == ["aSbe", "cdEf"]
    assert heightmap.end == (1, 2)
    assert [heightmap.elevation(1, col) for col in range(4)] == [2, 3, 25, 5]


def test_parse_heightmap_invalid_character():
    with pytest.raises(ValueError):
        parse_heightmap("ab#\ncdE")


def test_heightmap_without_end():
    with pytest.raises(ValueError):
        Heightmap(["Sab"])


def test_no_path_found():
    heightmap = parse_heightmap("SzE")
    with pytest.raises(ValueError):
        heightmap.shortest_path(True)
    with pytest.raises(ValueError):
        heightmap.shortest_path(False)