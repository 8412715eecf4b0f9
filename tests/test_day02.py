import pytest

from advent2022.day02 import Goal, Hand, parse_goal, parse_hand, part1, part2

EXAMPLE = "A Y\nB X\nC Z\n"


def test_part1():
    assert part1(EXAMPLE) == 15


def test_part2():
    assert part2(EXAMPLE) == 12


def test_parse_hand():
    assert parse_hand("A") is Hand.ROCK
    assert parse_hand("Y") is Hand.PAPER
    assert parse_hand("Z") is Hand.SCISSORS


def test_parse_goal():
    assert parse_goal("X") is Goal.LOSE
    assert parse_goal("Y") is Goal.DRAW
    assert parse_goal("Z") is Goal.WIN


@pytest.mark.parametrize("code", ["D", "", "a"])
def test_parse_invalid(code):
    with pytest.raises(ValueError):
        parse_hand(code)
    with pytest.raises(ValueError):
        parse_goal(code)


def test_hand_relations():
    assert Hand.ROCK.better() is Hand.PAPER
    assert Hand.ROCK.worse() is Hand.SCISSORS
    assert Hand.PAPER.beats(Hand.ROCK)
    assert not Hand.ROCK.beats(Hand.PAPER)
    assert not Hand.ROCK.beats(Hand.ROCK)


def test_scores():
    assert [h.score() for h in (Hand.ROCK, Hand.PAPER, Hand.SCISSORS)] == [1, 2, 3]
    assert [g.score() for g in (Goal.LOSE, Goal.DRAW, Goal.WIN)] == [0, 3, 6]


def test_invalid_line():
    with pytest.raises(ValueError):
        part1("A\n")
    with pytest.raises(ValueError):
        part2("Q X\n")