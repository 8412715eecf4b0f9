"""Hill climbing: shortest paths over a height map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from string import ascii_lowercase

START = "S"
END = "E"


def parse_point(char: str) -> int:
    """Elevation of a map character: a-z are 0-25, S is 0 and E is 25."""
    if char == START:
        return 0
    if char == END:
        return 25
    if len(char) == 1 and char in ascii_lowercase:
        return ord(char) - ord("a")
    raise ValueError(f"invalid map character: {char!r}")


@dataclass
class Heightmap:
    """A grid of map characters with the position of the end point."""

    grid: list[str]
    end: tuple[int, int] = field(init=False)

    def __post_init__(self) -> None:
        end = next(
            (
                (row, col)
                for row, line in enumerate(self.grid)
                for col, char in enumerate(line)
                if char == END
            ),
            None,
        )
        if end is None:
            raise ValueError("the map has no end point")
        self.end = end

    def elevation(self, row: int, col: int) -> int:
        """Elevation at the given cell."""
        return parse_point(self.grid[row][col])

    def _within(self, row: int, col: int) -> bool:
        return 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])

    def shortest_path(self, only_start: bool) -> int:
        """Fewest steps to the end from the start, or from any lowest point."""
        queue = deque([(self.end, 0)])
        seen = {self.end}
        while queue:
            (row, col), steps = queue.popleft()
            current = self.elevation(row, col)
            if only_start:
                if self.grid[row][col] == START:
                    return steps
            elif current == 0:
                return steps
            for next_row, next_col in (
                (row + 1, col),
                (row - 1, col),
                (row, col + 1),
                (row, col - 1),
            ):
                cell = (next_row, next_col)
                if (
                    self._within(next_row, next_col)
                    and cell not in seen
                    and current - self.elevation(next_row, next_col) <= 1
                ):
                    seen.add(cell)
                    queue.append((cell, steps + 1))
        raise ValueError("no path found")


def parse_heightmap(text: str) -> Heightmap:
    """Parse lines of map characters into a height map."""
    lines = text.splitlines()
    if not lines or not all(lines):
        raise ValueError("failed to parse heightmap")
    for line in lines:
        for char in line:
            parse_point(char)
    return Heightmap(lines)


def part1(text: str) -> int:
    """Fewest steps from the start to the end."""
    return parse_heightmap(text).shortest_path(True)


def part2(text: str) -> int:
    """Fewest steps from any lowest point to the end."""
    return parse_heightmap(text).shortest_path(False)