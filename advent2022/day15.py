"""Beacon exclusion zone: coverage of sensors measured in Manhattan distance."""

from __future__ import annotations

import re
from collections.abc import Sequence

# Coordinates are (x, y); a "row" is a fixed y.
Point = tuple[int, int]
Pair = tuple[Point, Point]

PART1_ROW = 2_000_000
PART2_MAX = 4_000_000
TUNING_MULTIPLIER = 4_000_000

_NUMBER = r"([+-]?\d+)"
_COORDINATE = re.compile(rf"x={_NUMBER}, y={_NUMBER}")
_LINE = re.compile(
    rf"Sensor at x={_NUMBER}, y={_NUMBER}: closest beacon is at x={_NUMBER}, y={_NUMBER}"
)


def parse_coordinate(text: str) -> Point:
    """Parse ``x=N, y=M`` into ``(x, y)``."""
    match = _COORDINATE.fullmatch(text)
    if match is None:
        raise ValueError(f"unable to parse coordinate: {text!r}")
    return int(match[1]), int(match[2])


def parse_line(line: str) -> Pair:
    """Parse a sensor line into ``(sensor, beacon)``."""
    match = _LINE.fullmatch(line)
    if match is None:
        raise ValueError(f"failed to parse input: {line!r}")
    sx, sy, bx, by = (int(group) for group in match.groups())
    return (sx, sy), (bx, by)


def parse_input(text: str) -> list[Pair]:
    """Parse every sensor line."""
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("failed to parse input: no sensors")
    return [parse_line(line) for line in lines]


def _distance(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def intersections_for_row(pairs: Sequence[Pair], row: int) -> list[tuple[int, int]]:
    """Inclusive x ranges each sensor covers on ``row``, sorted by start."""
    ranges = []
    for sensor, beacon in pairs:
        spare = _distance(sensor, beacon) - abs(row - sensor[1])
        if spare >= 0:
            ranges.append((sensor[0] - spare, sensor[0] + spare))
    ranges.sort(key=lambda r: r[0])
    return ranges


def count_covered(pairs: Sequence[Pair], row: int) -> int:
    """Number of positions on ``row`` where a beacon cannot be."""
    ranges = intersections_for_row(pairs, row)
    if not ranges:
        raise ValueError(f"no sensor reaches row {row}")
    total = 0
    current_start, current_end = ranges[0]
    for start, end in ranges[1:]:
        if start <= current_end:
            current_end = max(current_end, end)
        else:
            total += current_end - current_start
            current_start, current_end = start, end
    return total + current_end - current_start


def find_open_spot(min_coord: int, max_coord: int, pairs: Sequence[Pair]) -> int:
    """Tuning frequency of the only uncovered spot within the search area."""
    for row in range(min_coord, max_coord + 1):
        ranges = intersections_for_row(pairs, row)
        if not ranges:
            raise ValueError(f"no sensor reaches row {row}")
        current_end = min(ranges[0][1], max_coord)
        for start, end in ranges:
            if start <= current_end:
                if end > current_end:
                    current_end = min(end, max_coord)
            else:
                return (current_end + 1) * TUNING_MULTIPLIER + row
    raise ValueError("no open spot found")


def part1(text: str) -> int:
    """Covered positions on row 2,000,000."""
    return count_covered(parse_input(text), PART1_ROW)


def part2(text: str) -> int:
    """Tuning frequency of the distress beacon within 0..4,000,000."""
    return find_open_spot(0, PART2_MAX, parse_input(text))