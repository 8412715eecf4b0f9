"""Proboscidea volcanium: releasing the most pressure from a valve network."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

START_VALVE = "AA"
TIME_LIMIT = 30

_LINE = re.compile(
    r"Valve ([A-Z]{2}) has flow rate=(\d+);\s+"
    r"(?:tunnels lead to valves|tunnel leads to valve) ([A-Z]{2}(?:, [A-Z]{2})*)"
)


@dataclass(frozen=True)
class Valve:
    """A valve, its flow rate and the valves its tunnels lead to."""

    id: int
    name: str
    flow_rate: int
    tunnels: list[str]


def parse_line(line: str) -> tuple[str, int, list[str]]:
    """Parse one valve description into ``(name, flow_rate, tunnels)``."""
    match = _LINE.fullmatch(line)
    if match is None:
        raise ValueError(f"failed to parse input: {line!r}")
    return match[1], int(match[2]), match[3].split(", ")


def parse_input(text: str) -> list[Valve]:
    """Parse every line into a valve, numbered in input order."""
    lines = text.strip("\n").split("\n")
    if not lines or not lines[0]:
        raise ValueError("failed to parse input: no valves")
    return [
        Valve(index, name, flow_rate, tunnels)
        for index, (name, flow_rate, tunnels) in enumerate(map(parse_line, lines))
    ]


def _distances_from(start: int, neighbours: Sequence[Sequence[int]]) -> dict[int, int]:
    distances: dict[int, int] = {}
    queue = deque([(start, 0)])
    while queue:
        valve, dist = queue.popleft()
        if valve in distances:
            continue
        distances[valve] = dist
        queue.extend((n, dist + 1) for n in neighbours[valve])
    return distances


def max_pressure(valves: Sequence[Valve], steps: int, start: str) -> int:
    """Most pressure that can be released in ``steps`` minutes starting at ``start``."""
    ids = {valve.name: valve.id for valve in valves}
    by_id = {valve.id: valve for valve in valves}
    if start not in ids:
        raise ValueError(f"no valve named {start!r}")
    try:
        neighbours = {
            valve.id: [ids[name] for name in valve.tunnels] for valve in valves
        }
    except KeyError as err:
        raise ValueError(f"tunnel to unknown valve {err.args[0]!r}") from None

    useful = [valve.id for valve in valves if valve.flow_rate > 0]
    all_open = 0
    for valve_id in useful:
        all_open |= 1 << valve_id
    total_flow = sum(valve.flow_rate for valve in valves)

    distance_cache: dict[int, dict[int, int]] = {}

    def distances(valve_id: int) -> dict[int, int]:
        if valve_id not in distance_cache:
            distance_cache[valve_id] = _distances_from(valve_id, neighbours)
        return distance_cache[valve_id]

    def open_flow(mask: int) -> int:
        return sum(v.flow_rate for i, v in by_id.items() if mask & (1 << i))

    @lru_cache(maxsize=None)
    def best(steps_left: int, mask: int, current: int) -> int:
        if steps_left == 0:
            return 0
        if mask == all_open:
            return steps_left * total_flow
        flow = open_flow(mask)
        reachable = distances(current)
        options = []
        for valve_id in useful:
            if mask & (1 << valve_id) or valve_id not in reachable:
                continue
            cost = reachable[valve_id] + 1
            if cost > steps_left:
                continue
            options.append(
                flow * cost + best(steps_left - cost, mask | (1 << valve_id), valve_id)
            )
        return max(options, default=steps_left * flow)

    return best(steps, 0, ids[start])


def part1(text: str) -> int:
    """Most pressure released in 30 minutes from valve AA."""
    return max_pressure(parse_input(text), TIME_LIMIT, START_VALVE)


def part2(text: str) -> int:
    """The second part is not solved here and always yields 0."""
    parse_input(text)
    return 0