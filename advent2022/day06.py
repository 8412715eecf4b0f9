"""Tuning trouble: finding the first run of distinct characters."""


def get_marker(text: str, size: int) -> int:
    """Position just after the first ``size`` consecutive distinct characters."""
    if size < 0:
        raise ValueError("marker size must not be negative")
    for start in range(len(text) - size + 1):
        if len(set(text[start : start + size])) == size:
            return start + size
    raise ValueError("no marker found")


def part1(text: str) -> int:
    """End of the first start-of-packet marker (four distinct characters)."""
    return get_marker(text, 4)


def part2(text: str) -> int:
    """End of the first start-of-message marker (fourteen distinct characters)."""
    return get_marker(text, 14)