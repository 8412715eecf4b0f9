"""Calorie counting: sums of number groups separated by blank lines."""

import heapq
from collections.abc import Iterator


def _group_totals(text: str) -> Iterator[int]:
    """Yield the sum of every blank-line separated group of numbers."""
    total = 0
    for line in text.splitlines():
        if line == "":
            yield total
            total = 0
        else:
            total += int(line)
    yield total


def part1(text: str) -> int:
    """Return the largest group total."""
    return max(_group_totals(text))


def part2(text: str) -> int:
    """Return the sum of the three largest group totals."""
    return sum(heapq.nlargest(3, _group_totals(text)))