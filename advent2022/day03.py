"""Rucksack reorganisation: finding shared item types."""

from collections.abc import Iterable, Iterator
from itertools import islice


def find_dup(line: str) -> str:
    """Return the character present in both halves of ``line``."""
    half = len(line) // 2
    common = set(line[:half]) & set(line[half:])
    if not common:
        raise ValueError(f"no shared character in {line!r}")
    return min(common)


def char_score(char: str) -> int:
    """Score a-z as 1 to 26 and A-Z as 27 to 52."""
    if char.islower():
        return ord(char) - ord("a") + 1
    return ord(char) - ord("A") + 27


def part1(text: str) -> int:
    """Sum the scores of the shared character of every line."""
    return sum(char_score(find_dup(line)) for line in text.splitlines())


def chunk_score(chunk: Iterable[str]) -> int:
    """Score the single character common to all lines of ``chunk``."""
    sets = [set(line) for line in chunk]
    if not sets:
        raise ValueError("empty chunk")
    common = set.intersection(*sets)
    if len(common) != 1:
        raise ValueError("invalid common chars")
    return char_score(common.pop())


def _chunks(lines: list[str], size: int) -> Iterator[list[str]]:
    it = iter(lines)
    while chunk := list(islice(it, size)):
        yield chunk


def part2(text: str) -> int:
    """Sum the scores of the badge shared by each group of three lines."""
    return sum(chunk_score(chunk) for chunk in _chunks(text.splitlines(), 3))