# advent2022

Solutions to the first sixteen puzzles of the 2022 edition of a daily
programming puzzle calendar. Each day has its own module,
`advent2022.day01` to `advent2022.day16`. Each of these modules has
`part1(text)` and `part2(text)`. Both take the puzzle input as a string
and return the answer.

| Module  | Puzzle                                   | Answers        |
|---------|------------------------------------------|----------------|
| `day01` | calorie groups separated by blank lines  | int, int       |
| `day02` | rock, paper, scissors scoring            | int, int       |
| `day03` | rucksack shared items                    | int, int       |
| `day04` | overlapping section ranges               | int, int       |
| `day05` | crate stacks                             | str, str       |
| `day06` | first run of distinct characters         | int, int       |
| `day07` | directory sizes from a terminal session  | int, int       |
| `day08` | tree visibility and scenic scores        | int, int       |
| `day09` | rope knots following the head            | int, int       |
| `day10` | CPU signal strength and screen drawing   | int, str       |
| `day11` | monkeys throwing items                   | int, int       |
| `day12` | shortest path on a height map            | int, int       |
| `day13` | ordering nested packets                  | int, int       |
| `day14` | falling sand in a cave                   | int, int       |
| `day15` | sensor and beacon coverage               | int, int       |
| `day16` | releasing pressure through valves        | int, always 0  |

## Installation

```
pip install .
```

## Command line

Give the day number, from 1 to 16. The input is read from a file, or
from standard input when no file is named:

```
advent2022 1 input.txt
advent2022 7 < input.txt
```

Both answers are printed, each under a `## Part N` heading. If the input
cannot be solved, the command prints the error to standard error and
exits with status 1.

## Library use

```python
from pathlib import Path

from advent2022 import day01
from advent2022.cli import solve

text = Path("input.txt").read_text()
print(day01.part1(text), day01.part2(text))
print(solve(1, text))  # a tuple of both answers
```

Each module also exposes its parsers and helpers, for example
`day13.parse_packets` and `day13.compare_packets`,
`day08.Forest.from_text`, `day10.Cpu`, `day12.parse_heightmap`,
`day14.Cave.from_paths` and `day15.find_open_spot`. Input that cannot be
parsed raises `ValueError`. `solve` raises `ValueError` for a day with
no solution.

## What it does not do

Only days 1 to 16 are solved. For day 16 only the first part is worked
out: `day16.part2` checks that the input parses and then returns 0. The
package does not download puzzle inputs. You have to supply them
yourself.

## Tests

```
pip install ".[test]"
pytest
```