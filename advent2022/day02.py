"""Rock, paper, scissors strategy guide scoring."""

from __future__ import annotations

from enum import Enum


class Goal(Enum):
    """The outcome a round should end with."""

    WIN = 6
    DRAW = 3
    LOSE = 0

    def score(self) -> int:
        """Points awarded for this outcome."""
        return self.value


class Hand(Enum):
    """A shape that can be played."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def score(self) -> int:
        """Points awarded for playing this shape."""
        return self.value

    def better(self) -> Hand:
        """The shape that beats this one."""
        return _BETTER[self]

    def worse(self) -> Hand:
        """The shape this one beats."""
        return _WORSE[self]

    def beats(self, other: Hand) -> bool:
        """Whether this shape wins against ``other``."""
        return self.worse() is other


_BETTER = {Hand.ROCK: Hand.PAPER, Hand.PAPER: Hand.SCISSORS, Hand.SCISSORS: Hand.ROCK}
_WORSE = {Hand.ROCK: Hand.SCISSORS, Hand.PAPER: Hand.ROCK, Hand.SCISSORS: Hand.PAPER}

_GOAL_CODES = {"X": Goal.LOSE, "Y": Goal.DRAW, "Z": Goal.WIN}
_HAND_CODES = {
    "A": Hand.ROCK,
    "X": Hand.ROCK,
    "B": Hand.PAPER,
    "Y": Hand.PAPER,
    "C": Hand.SCISSORS,
    "Z": Hand.SCISSORS,
}


def parse_goal(code: str) -> Goal:
    """Parse X, Y or Z into a goal."""
    try:
        return _GOAL_CODES[code]
    except KeyError:
        raise ValueError(f"invalid goal code: {code!r}") from None


def parse_hand(code: str) -> Hand:
    """Parse A/B/C or X/Y/Z into a hand."""
    try:
        return _HAND_CODES[code]
    except KeyError:
        raise ValueError(f"invalid hand code: {code!r}") from None


def _split_line(line: str) -> tuple[str, str]:
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"invalid input line: {line!r}")
    return parts[0], parts[1]


def part1(text: str) -> int:
    """Score the guide reading both columns as hands."""
    total = 0
    for line in text.splitlines():
        left_code, right_code = _split_line(line)
        left, right = parse_hand(left_code), parse_hand(right_code)
        total += right.score()
        if right.beats(left):
            total += Goal.WIN.score()
        elif right is left:
            total += Goal.DRAW.score()
    return total


def part2(text: str) -> int:
    """Score the guide reading the second column as the desired outcome."""
    total = 0
    for line in text.splitlines():
        left_code, right_code = _split_line(line)
        hand = parse_hand(left_code)
        goal = parse_goal(right_code)
        if goal is Goal.WIN:
            played = hand.better()
        elif goal is Goal.LOSE:
            played = hand.worse()
        else:
            played = hand
        total += played.score() + goal.score()
    return total