"""Solutions to the first sixteen 2022 puzzles, one module per day, with a command line."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
    "day13",
    "day14",
    "day15",
    "day16",
]