"""Monkey in the middle: simulating items thrown between monkeys."""

from __future__ import annotations

import math
import re
from collections import deque
from dataclasses import dataclass

_HEADER = re.compile(r"[ \t]*Monkey (\d+):")
_ITEMS = re.compile(r"[ \t]*Starting items: (\d+(?:, \d+)*)")
_OPERATION = re.compile(r"[ \t]*Operation: new = old ([+*]) (\d+|old)")
_TEST = re.compile(r"[ \t]*Test: divisible by (\d+)")
_IF_TRUE = re.compile(r"[ \t]*If true: throw to monkey (\d+)")
_IF_FALSE = re.compile(r"[ \t]*If false: throw to monkey (\d+)")


@dataclass(frozen=True)
class Operation:
    """``new = old <operator> <operand>``; an operand of None means ``old``."""

    operator: str
    operand: int | None = None

    def __post_init__(self) -> None:
        if self.operator not in ("+", "*"):
            raise ValueError(f"invalid operator: {self.operator!r}")

    def apply(self, old: int) -> int:
        """Compute the new worry level from ``old``."""
        operand = old if self.operand is None else self.operand
        return old + operand if self.operator == "+" else old * operand


@dataclass
class Monkey:
    """A monkey holding items and its rules for throwing them."""

    num: int
    items: deque[int]
    operation: Operation
    test: int
    if_true: int
    if_false: int
    inspections: int = 0

    def apply_operation(self, value: int) -> int:
        """Inspect an item, counting the inspection, and return its new worry level."""
        self.inspections += 1
        return self.operation.apply(value)

    def next_monkey(self, value: int) -> int:
        """The monkey an item with worry level ``value`` is thrown to."""
        return self.if_true if value % self.test == 0 else self.if_false

    def reduce_worry(self, value: int) -> int:
        """Divide the worry level by three, rounding down."""
        return value // 3


def _match(pattern: re.Pattern[str], line: str, what: str) -> re.Match[str]:
    match = pattern.fullmatch(line)
    if match is None:
        raise ValueError(f"unable to parse {what}: {line!r}")
    return match


def parse_operation(line: str) -> Operation:
    """Parse ``Operation: new = old + 3`` or ``... * old``."""
    match = _match(_OPERATION, line, "operation")
    operator, operand = match.groups()
    return Operation(operator, None if operand == "old" else int(operand))


def parse_monkey(text: str) -> Monkey:
    """Parse the six lines describing one monkey."""
    lines = text.rstrip().split("\n")
    if len(lines) != 6:
        raise ValueError(f"expected 6 lines for a monkey, got {len(lines)}")
    header, items, operation, test, if_true, if_false = lines
    return Monkey(
        num=int(_match(_HEADER, header, "monkey header")[1]),
        items=deque(int(item) for item in _match(_ITEMS, items, "items")[1].split(", ")),
        operation=parse_operation(operation),
        test=int(_match(_TEST, test, "test")[1]),
        if_true=int(_match(_IF_TRUE, if_true, "true branch")[1]),
        if_false=int(_match(_IF_FALSE, if_false, "false branch")[1]),
    )


def parse_monkeys(text: str) -> list[Monkey]:
    """Parse all monkeys, separated by blank lines."""
    body = text.strip("\n")
    if not body:
        raise ValueError("no monkeys")
    return [parse_monkey(block) for block in body.split("\n\n")]


def _monkey_business(monkeys: list[Monkey]) -> int:
    top = sorted((m.inspections for m in monkeys), reverse=True)[:2]
    if len(top) < 2:
        raise ValueError("could not find two highest values")
    return top[0] * top[1]


def _throw(monkeys: list[Monkey], target: int, value: int) -> None:
    if not 0 <= target < len(monkeys):
        raise ValueError(f"no monkey {target} to throw to")
    monkeys[target].items.append(value)


def part1(text: str) -> int:
    """Monkey business after 20 rounds with worry relief."""
    monkeys = parse_monkeys(text)
    for _ in range(20):
        for monkey in monkeys:
            while monkey.items:
                value = monkey.reduce_worry(monkey.apply_operation(monkey.items.popleft()))
                _throw(monkeys, monkey.next_monkey(value), value)
    return _monkey_business(monkeys)


def part2(text: str) -> int:
    """Monkey business after 10,000 rounds without worry relief."""
    monkeys = parse_monkeys(text)
    common = math.prod(m.test for m in monkeys)
    for _ in range(10_000):
        for monkey in monkeys:
            while monkey.items:
                value = monkey.apply_operation(monkey.items.popleft())
                _throw(monkeys, monkey.next_monkey(value), value % common)
    return _monkey_business(monkeys)