"""Command line entry point that solves one day's puzzle."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any

from advent2022 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
)

_Solver = Callable[[str], Any]

_DAYS: dict[int, tuple[_Solver, _Solver]] = {
    number: (module.part1, module.part2)
    for number, module in enumerate(
        (
            day01,
            day02,
            day03,
            day04,
            day05,
            day06,
            day07,
            day08,
            day09,
            day10,
            day11,
            day12,
            day13,
            day14,
            day15,
            day16,
        ),
        start=1,
    )
}


def solve(day: int, text: str) -> tuple[Any, Any]:
    """Return the answers to both parts of ``day`` for the puzzle input ``text``."""
    try:
        first, second = _DAYS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    return first(text), second(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a day's puzzle from a file, or standard input, and print the answers."""
    parser = argparse.ArgumentParser(
        prog="advent2022", description="Solve a 2022 puzzle."
    )
    parser.add_argument("day", type=int, help="day number, 1 to 16")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="puzzle input file (default: standard input)",
    )
    args = parser.parse_args(argv)

    with args.input as handle:
        text = handle.read()

    try:
        answers = solve(args.day, text)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    for number, answer in enumerate(answers, start=1):
        print(f"## Part {number}")
        print(f" > {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())