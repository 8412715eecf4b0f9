"""Cathode-ray tube: a two-instruction CPU driving a small screen."""

from __future__ import annotations

import re
from dataclasses import dataclass

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6

_ADDX = re.compile(r"addx ([+-]?\d+)")


@dataclass(frozen=True)
class AddX:
    """Add ``value`` to the register over two cycles."""

    value: int

    def cycles(self) -> int:
        """Cycles the instruction takes."""
        return 2


@dataclass(frozen=True)
class Noop:
    """Do nothing for one cycle."""

    def cycles(self) -> int:
        """Cycles the instruction takes."""
        return 1


Instruction = AddX | Noop


@dataclass
class Cpu:
    """A CPU with a single register and a cycle counter."""

    reg_a: int = 1
    cycles: int = 0

    def run_instruction(self, instruction: Instruction) -> None:
        """Execute ``instruction`` and advance the cycle counter."""
        if isinstance(instruction, AddX):
            self.reg_a += instruction.value
        self.cycles += instruction.cycles()

    def sprite_range(self) -> range:
        """Pixel columns covered by the three-pixel sprite."""
        return range(self.reg_a - 1, self.reg_a + 2)


def parse_instruction(line: str) -> Instruction:
    """Parse ``addx N`` or ``noop``."""
    if line == "noop":
        return Noop()
    match = _ADDX.fullmatch(line)
    if match is None:
        raise ValueError(f"unable to parse instruction: {line!r}")
    return AddX(int(match[1]))


def parse_instructions(text: str) -> list[Instruction]:
    """Parse one instruction per line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no instructions")
    return [parse_instruction(line) for line in lines]


def part1(text: str) -> int:
    """Sum of signal strengths at cycle 20 and every 40 cycles after."""
    cpu = Cpu()
    strengths = 0
    signal_check = 20
    for instruction in parse_instructions(text):
        if cpu.cycles + instruction.cycles() >= signal_check:
            strengths += signal_check * cpu.reg_a
            signal_check += 40
        cpu.run_instruction(instruction)
    return strengths


def part2(text: str) -> str:
    """Render the screen as six lines of forty characters."""
    cpu = Cpu()
    screen = ["."] * (SCREEN_WIDTH * SCREEN_HEIGHT)
    for instruction in parse_instructions(text):
        sprite = cpu.sprite_range()
        start = cpu.cycles
        for cycle in range(start, start + instruction.cycles()):
            if cycle % SCREEN_WIDTH in sprite:
                if cycle >= len(screen):
                    raise ValueError("program runs past the end of the screen")
                screen[cycle] = "#"
        cpu.run_instruction(instruction)
    return "\n".join(
        "".join(screen[start : start + SCREEN_WIDTH])
        for start in range(0, len(screen), SCREEN_WIDTH)
    )