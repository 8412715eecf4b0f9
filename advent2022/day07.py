"""No space left on device: directory sizes from a terminal session."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

TOTAL_SPACE = 70_000_000
NEEDED_SPACE = 30_000_000
SMALL_DIR_LIMIT = 100_000

_CD = re.compile(r"\$ cd (.*)")
_DIR = re.compile(r"dir (.*)")
_FILE = re.compile(r"(\d+) +(.*)")


@dataclass(frozen=True)
class CdLine:
    """A ``$ cd <path>`` command."""

    path: str


@dataclass(frozen=True)
class LsLine:
    """A ``$ ls`` command."""


@dataclass(frozen=True)
class DirLine:
    """A directory entry in ``ls`` output."""

    name: str


@dataclass(frozen=True)
class FileLine:
    """A file entry in ``ls`` output."""

    size: int
    name: str


ParsedLine = CdLine | LsLine | DirLine | FileLine


@dataclass
class Node:
    """A directory with its sub-directories and files."""

    path: str
    children: list[Node] = field(default_factory=list)
    files: list[FileLine] = field(default_factory=list)

    def file_sizes(self) -> int:
        """Total size of all files in this directory and below it."""
        return sum(f.size for f in self.files) + sum(
            child.file_sizes() for child in self.children
        )

    def walk_dirs(self) -> Iterator[Node]:
        """Yield every directory below this one, depth first."""
        for child in self.children:
            yield child
            yield from child.walk_dirs()


def parse_line(line: str) -> ParsedLine:
    """Parse one line of terminal output."""
    if match := _CD.fullmatch(line):
        return CdLine(match[1])
    if line == "$ ls":
        return LsLine()
    if match := _DIR.fullmatch(line):
        return DirLine(match[1])
    if match := _FILE.fullmatch(line):
        return FileLine(int(match[1]), match[2])
    raise ValueError(f"unable to parse line: {line!r}")


def parse_lines(text: str) -> list[ParsedLine]:
    """Parse a whole terminal session."""
    return [parse_line(line) for line in text.splitlines()]


def build_filesystem(node: Node, lines: Sequence[ParsedLine], index: int) -> int:
    """Fill ``node`` from ``lines`` starting at ``index``; return the index to resume at."""
    while index < len(lines):
        line = lines[index]
        if isinstance(line, CdLine):
            if line.path == "..":
                return index + 1
            sub_node = next((n for n in node.children if n.path == line.path), None)
            if sub_node is None:
                sub_node = Node(line.path)
                node.children.append(sub_node)
            index = build_filesystem(sub_node, lines, index + 1)
        elif isinstance(line, LsLine):
            index += 1
        elif isinstance(line, FileLine):
            node.files.append(line)
            index += 1
        else:
            node.children.append(Node(line.name))
            index += 1
    return index


def _build_root(text: str) -> Node:
    lines = parse_lines(text)
    if not lines or lines[0] != CdLine("/"):
        raise ValueError("first line should be cd-ing into /")
    root = Node("/")
    build_filesystem(root, lines, 1)
    return root


def part1(text: str) -> int:
    """Sum the sizes of all directories of at most 100,000."""
    root = _build_root(text)
    sizes = (d.file_sizes() for d in root.walk_dirs())
    return sum(size for size in sizes if size <= SMALL_DIR_LIMIT)


def part2(text: str) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    root = _build_root(text)
    root_size = root.file_sizes()
    need_to_delete = NEEDED_SPACE - (TOTAL_SPACE - root_size)
    best = root_size
    for directory in root.walk_dirs():
        size = directory.file_sizes()
        if need_to_delete < size < best:
            best = size
    return best