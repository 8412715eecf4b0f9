import pytest

from advent2022.day06 import get_marker, part1, part2

TEST_INPUT = "nznrnfrfntjfmvfwmzdfjlvtqnfqpgjwq"


def test_part1():
    assert part1(TEST_INPUT) == 10


def test_marker_at_start():
    assert get_marker("abcd", 4) == 4


def test_window_is_distinct():
    text = "aabbcdefgh"
    end = get_marker(text, 5)
    assert len(set(text[end - 5 : end])) == 5


def test_no_marker_found():
    with pytest.raises(ValueError):
        get_marker("aaaaaaa", 4)


def test_text_shorter_than_marker():
    with pytest.raises(ValueError):
        get_marker("abc", 4)