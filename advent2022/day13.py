"""Distress signal: ordering nested packet lists."""

from __future__ import annotations

import re
from functools import cmp_to_key

Packet = int | list["Packet"]

DIVIDERS: tuple[Packet, Packet] = ([[2]], [[6]])

_DIGITS = re.compile(r"[0-9]+")


def _parse_at(text: str, pos: int) -> tuple[Packet, int]:
    if match := _DIGITS.match(text, pos):
        return int(match[0]), match.end()
    if pos >= len(text) or text[pos] != "[":
        raise ValueError(f"unable to parse packet at position {pos}: {text!r}")
    pos += 1
    items: list[Packet] = []
    if pos < len(text) and text[pos] == "]":
        return items, pos + 1
    while True:
        item, pos = _parse_at(text, pos)
        items.append(item)
        if pos < len(text) and text[pos] == ",":
            pos += 1
        elif pos < len(text) and text[pos] == "]":
            return items, pos + 1
        else:
            raise ValueError(f"unable to parse packet at position {pos}: {text!r}")


def parse_packet(text: str) -> Packet:
    """Parse a packet such as ``[[1],2,3]`` into nested lists of ints."""
    packet, end = _parse_at(text, 0)
    if end != len(text):
        raise ValueError(f"unexpected text after packet: {text[end:]!r}")
    return packet


def parse_packets(text: str) -> list[tuple[Packet, Packet]]:
    """Parse blank-line separated pairs of packets."""
    body = text.strip("\n")
    if not body:
        raise ValueError("no packets")
    pairs = []
    for block in body.split("\n\n"):
        lines = block.split("\n")
        if len(lines) != 2:
            raise ValueError(f"expected a pair of packets: {block!r}")
        pairs.append((parse_packet(lines[0]), parse_packet(lines[1])))
    return pairs


def format_packet(packet: Packet) -> str:
    """Render a packet with ``, `` between items."""
    if isinstance(packet, int):
        return str(packet)
    return "[" + ", ".join(format_packet(item) for item in packet) + "]"


def compare_packets(left: Packet, right: Packet) -> bool | None:
    """True if the packets are in order, False if not, None if undecided."""
    if isinstance(left, int) and isinstance(right, int):
        return None if left == right else left < right
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for left_item, right_item in zip(left, right):
        result = compare_packets(left_item, right_item)
        if result is not None:
            return result
    if len(left) < len(right):
        return True
    if len(left) > len(right):
        return False
    return None


def _ordering(left: Packet, right: Packet) -> int:
    result = compare_packets(left, right)
    if result is None:
        return 0
    return -1 if result else 1


def part1(text: str) -> int:
    """Sum of the 1-based indices of pairs that are in the right order."""
    return sum(
        index
        for index, (left, right) in enumerate(parse_packets(text), start=1)
        if compare_packets(left, right) is True
    )


def part2(text: str) -> int:
    """Product of the 1-based positions of the divider packets once sorted."""
    packets: list[Packet] = [p for pair in parse_packets(text) for p in pair]
    packets.extend(DIVIDERS)
    packets.sort(key=cmp_to_key(_ordering))
    first, second = (packets.index(divider) + 1 for divider in DIVIDERS)
    return first * second