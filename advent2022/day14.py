"""Regolith reservoir: sand falling into a cave of rock paths."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise

SOURCE_COLUMN = 500

# A point as written in the input: (x, y), x growing right and y growing down.
Point = tuple[int, int]

_COORDINATE = re.compile(r"(\d+)\s*,\s*(\d+)")


class Cell(Enum):
    """The content of one spot in the cave."""

    SAND = "O"
    STONE = "#"
    AIR = "."
    SOURCE = "+"
    FLOOR = "="

    def is_air(self) -> bool:
        """Whether sand can fall through this cell."""
        return self in (Cell.AIR, Cell.SOURCE)

    def __str__(self) -> str:
        return self.value


def parse_coordinate(text: str) -> Point:
    """Parse ``x,y`` (spaces allowed around the comma) into ``(x, y)``."""
    match = _COORDINATE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"unable to parse coordinate: {text!r}")
    return int(match[1]), int(match[2])


def parse_path(line: str) -> list[Point]:
    """Parse ``x,y -> x,y -> ...`` into a list of points."""
    return [parse_coordinate(part) for part in line.split(" -> ")]


def parse_paths(text: str) -> list[list[Point]]:
    """Parse one rock path per line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no rock paths")
    return [parse_path(line) for line in lines]


@dataclass
class Cave:
    """A grid of cells; ``source`` is the (row, column) sand pours in from."""

    grid: list[list[Cell]]
    source: tuple[int, int]

    @classmethod
    def from_paths(cls, paths: Sequence[Sequence[Point]], with_floor: bool) -> Cave:
        """Build the cave from rock paths, optionally with a floor two below the lowest rock."""
        points = [point for path in paths for point in path]
        left = min([SOURCE_COLUMN, *(x for x, _ in points)])
        right = max([SOURCE_COLUMN, *(x for x, _ in points)])
        bottom = max([0, *(y for _, y in points)])

        if with_floor:
            height = bottom + 2
            left = SOURCE_COLUMN - height
            right = SOURCE_COLUMN + height
            if left < 0:
                raise ValueError("the cave is too deep for its floor")
        else:
            height = bottom

        width = right - left + 1
        grid = [[Cell.AIR] * width for _ in range(height + 1)]

        def place_stone(row: int, column: int) -> None:
            offset = column - left
            if not 0 <= offset < width:
                raise ValueError(f"rock at column {column} lies outside the cave")
            grid[row][offset] = Cell.STONE

        for path in paths:
            for (x1, y1), (x2, y2) in pairwise(path):
                if y1 == y2 and x1 != x2:
                    for column in range(min(x1, x2), max(x1, x2) + 1):
                        place_stone(y1, column)
                elif x1 == x2 and y1 != y2:
                    for row in range(min(y1, y2), max(y1, y2) + 1):
                        place_stone(row, x1)
                else:
                    raise ValueError(f"invalid coordinates: {(x1, y1)} -> {(x2, y2)}")

        if with_floor:
            grid[height] = [Cell.FLOOR] * width

        source_column = SOURCE_COLUMN - left
        grid[0][source_column] = Cell.SOURCE
        return cls(grid, (0, source_column))

    def spawn_sand(self) -> bool:
        """Drop one grain; return True once no more sand can be added."""
        row, column = self.source
        last_row = len(self.grid) - 1
        last_column = len(self.grid[0]) - 1
        while True:
            if row == last_row:
                return True
            below = self.grid[row + 1]
            if below[column].is_air():
                row += 1
            elif column == 0:
                return True
            elif below[column - 1].is_air():
                row += 1
                column -= 1
            elif column == last_column:
                return True
            elif below[column + 1].is_air():
                row += 1
                column += 1
            else:
                self.grid[row][column] = Cell.SAND
                return (row, column) == self.source

    def __str__(self) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in self.grid)


def _grains_until_full(cave: Cave) -> int:
    grains = 0
    while not cave.spawn_sand():
        grains += 1
    return grains


def part1(text: str) -> int:
    """Grains that come to rest before sand starts falling into the abyss."""
    return _grains_until_full(Cave.from_paths(parse_paths(text), False))


def part2(text: str) -> int:
    """Grains that come to rest until the source is blocked, with a floor."""
    return _grains_until_full(Cave.from_paths(parse_paths(text), True)) + 1