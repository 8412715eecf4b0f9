"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RANGE = re.compile(r"(\d+)-(\d+)")
_PAIR = re.compile(r"(\d+)-(\d+),(\d+)-(\d+)")


@dataclass(frozen=True)
class Range:
    """An inclusive range of section numbers."""

    start: int
    end: int

    def fully_contains(self, other: Range) -> bool:
        """Whether ``other`` lies entirely within this range."""
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: Range) -> bool:
        """Whether the two ranges share at least one section."""
        return self.start <= other.end and self.end >= other.start

    def overlap_count(self, other: Range) -> int:
        """Number of sections the two ranges share."""
        if not self.overlaps(other):
            return 0
        return min(self.end, other.end) - max(self.start, other.start) + 1


def parse_range(text: str) -> Range:
    """Parse ``start-end`` into a range."""
    match = _RANGE.match(text)
    if match is None:
        raise ValueError(f"unable to parse range: {text!r}")
    return Range(int(match[1]), int(match[2]))


def parse_range_pair(line: str) -> tuple[Range, Range]:
    """Parse ``a-b,c-d`` into two ranges."""
    match = _PAIR.match(line)
    if match is None:
        raise ValueError(f"unable to parse range pair: {line!r}")
    a, b, c, d = (int(group) for group in match.groups())
    return Range(a, b), Range(c, d)


def part1(text: str) -> int:
    """Count pairs where one range fully contains the other."""
    count = 0
    for line in text.splitlines():
        first, second = parse_range_pair(line)
        if first.fully_contains(second) or second.fully_contains(first):
            count += 1
    return count


def part2(text: str) -> int:
    """Count pairs whose ranges overlap."""
    count = 0
    for line in text.splitlines():
        first, second = parse_range_pair(line)
        if first.overlaps(second):
            count += 1
    return count