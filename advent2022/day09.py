"""Rope bridge: following a rope's head with a chain of knots."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

Coordinate = tuple[int, int]

_INSTRUCTION = re.compile(r"([A-Za-z]+)[ \t]+(\d+)")


class Direction(Enum):
    """A step direction as a (row, column) delta."""

    UP = (1, 0)
    DOWN = (-1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_DIRECTION_CODES = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


def parse_instruction(line: str) -> tuple[Direction, int]:
    """Parse a line such as ``U 4`` into a direction and a step count."""
    match = _INSTRUCTION.fullmatch(line)
    if match is None:
        raise ValueError(f"unable to parse instruction: {line!r}")
    code, steps = match.groups()
    try:
        direction = _DIRECTION_CODES[code]
    except KeyError:
        raise ValueError(f"invalid direction: {code!r}") from None
    return direction, int(steps)


def parse_instructions(text: str) -> list[tuple[Direction, int]]:
    """Parse every line of ``text`` into an instruction."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no instructions")
    return [parse_instruction(line) for line in lines]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def get_movement(head: Coordinate, tail: Coordinate) -> Coordinate:
    """The step ``tail`` takes to keep up with ``head``."""
    d_row = head[0] - tail[0]
    d_col = head[1] - tail[1]
    if abs(d_row) > 2 or abs(d_col) > 2:
        raise ValueError(f"unknown movement: {(d_row, d_col)}")
    if abs(d_row) <= 1 and abs(d_col) <= 1:
        return (0, 0)
    return (_sign(d_row), _sign(d_col))


def count_tail_positions(
    instructions: Iterable[tuple[Direction, int]], knots: int
) -> int:
    """Count the positions the last of ``knots`` trailing knots visits."""
    if knots < 1:
        raise ValueError("the rope needs at least one trailing knot")
    rope: list[Coordinate] = [(0, 0)] * (knots + 1)
    visited = {rope[-1]}
    for direction, steps in instructions:
        d_row, d_col = direction.value
        for _ in range(steps):
            head = rope[0]
            moved = [(head[0] + d_row, head[1] + d_col)]
            for knot in rope[1:]:
                m_row, m_col = get_movement(moved[-1], knot)
                moved.append((knot[0] + m_row, knot[1] + m_col))
            rope = moved
            visited.add(rope[-1])
    return len(visited)


def part1(text: str) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return count_tail_positions(parse_instructions(text), 1)


def part2(text: str) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return count_tail_positions(parse_instructions(text), 9)