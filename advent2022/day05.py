"""Supply stacks: moving crates between stacks."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SLOT = r"(?:\[.\]|   )"
_CRATE_ROW = re.compile(rf"{_SLOT}(?: {_SLOT})*")
_CRATE_SLOT = re.compile(r"(?:^| )(\[.\]|   )")
_INSTRUCTION = re.compile(r"move (\d+) from (\d+) to (\d+)")


@dataclass(frozen=True)
class Instruction:
    """Move ``count`` crates from stack ``source`` to stack ``target`` (1-based)."""

    count: int
    source: int
    target: int


def parse_crate_row(line: str) -> list[str | None]:
    """Parse a row like ``[A] [B]     [C]`` into crates, None for empty slots."""
    if not _CRATE_ROW.fullmatch(line):
        raise ValueError(f"unable to parse crate row: {line!r}")
    return [
        None if slot == "   " else slot[1]
        for slot in (match[1] for match in _CRATE_SLOT.finditer(line))
    ]


def parse_column_count(line: str) -> int:
    """Return the last stack number in a line like `` 1   2   3``."""
    numbers = line.split()
    if not numbers or not all(number.isdigit() for number in numbers):
        raise ValueError(f"unable to parse column numbers: {line!r}")
    return int(numbers[-1])


def parse_instruction(line: str) -> Instruction:
    """Parse ``move N from A to B``."""
    match = _INSTRUCTION.match(line)
    if match is None:
        raise ValueError(f"unable to parse instruction: {line!r}")
    count, source, target = (int(group) for group in match.groups())
    return Instruction(count, source, target)


def parse_input(text: str) -> tuple[list[list[str]], list[Instruction]]:
    """Parse the drawing and the instructions; stacks are listed bottom first."""
    lines = iter(text.splitlines())
    rows: list[list[str | None]] = []
    for line in lines:
        if _CRATE_ROW.fullmatch(line):
            rows.append(parse_crate_row(line))
        else:
            column_count = parse_column_count(line)
            break
    else:
        raise ValueError("missing stack numbers")
    if not rows:
        raise ValueError("no crate rows")

    separator = next(lines, None)
    if separator is None or separator.strip():
        raise ValueError("expected an empty line before the instructions")

    instructions = [parse_instruction(line) for line in lines if line.strip()]
    if not instructions:
        raise ValueError("no instructions")

    stacks: list[list[str]] = [[] for _ in range(column_count)]
    for row in reversed(rows):
        for index, crate in enumerate(row):
            if crate is None:
                continue
            if index >= column_count:
                raise ValueError("crate outside the numbered stacks")
            stacks[index].append(crate)

    return stacks, instructions


def _tops(stacks: list[list[str]]) -> str:
    return "".join(stack[-1] for stack in stacks)


def part1(text: str) -> str:
    """Move crates one at a time and return the top crates."""
    stacks, instructions = parse_input(text)
    for instruction in instructions:
        source = stacks[instruction.source - 1]
        target = stacks[instruction.target - 1]
        for _ in range(instruction.count):
            target.append(source.pop())
    return _tops(stacks)


def part2(text: str) -> str:
    """Move crates several at once and return the top crates."""
    stacks, instructions = parse_input(text)
    for instruction in instructions:
        source = stacks[instruction.source - 1]
        target = stacks[instruction.target - 1]
        if instruction.count > len(source):
            raise ValueError("not enough crates to move")
        split = len(source) - instruction.count
        target.extend(source[split:])
        del source[split:]
    return _tops(stacks)