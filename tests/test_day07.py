import pytest

from advent2022.day07 import (
    CdLine,
    DirLine,
    FileLine,
    LsLine,
    Node,
    build_filesystem,
    parse_line,
    parse_lines,
    part1,
    part2,
)

EXAMPLE = "\n".join(
    [
        "$ cd /",
        "$ ls",
        "dir a",
        "14848514 b.txt",
        "8504156 c.dat",
        "dir d",
        "$ cd a",
        "$ ls",
        "dir e",
        "29116 f",
        "2557 g",
        "62596 h.lst",
        "$ cd e",
        "$ ls",
        "584 i",
        "$ cd ..",
        "$ cd ..",
        "$ cd d",
        "$ ls",
        "4060174 j",
        "8033020 d.log",
        "5626152 d.ext",
        "7214296 k",
    ]
)


def test_part1():
    assert part1(EXAMPLE) == 95_437


def test_part2():
    assert part2(EXAMPLE) == 24_933_642


def test_build_filesystem():
    root = Node("/")
    lines = parse_lines(EXAMPLE)
    build_filesystem(root, lines, 1)

    assert len(root.children) == 2
    assert len(root.files) == 2

    a = next(n for n in root.children if n.path == "a")
    assert len(a.children) == 1
    assert len(a.files) == 3
    assert a.file_sizes() == 94853


def test_build_filesystem_returns_after_cd_up():
    lines = [FileLine(5, "x"), CdLine(".."), FileLine(7, "y")]
    node = Node("sub")
    assert build_filesystem(node, lines, 0) == 2
    assert node.file_sizes() == 5


def test_walk_dirs_order():
    root = Node("/")
    build_filesystem(root, parse_lines(EXAMPLE), 1)
    assert [d.path for d in root.walk_dirs()] == ["a", "e", "d"]


def test_parse_cd():
    assert parse_line("$ cd /home/user") == CdLine("/home/user")


def test_parse_ls():
    assert parse_line("$ ls") == LsLine()


def test_parse_output():
    assert parse_line("dir foo") == DirLine("foo")
    assert parse_line("123 bar.txt") == FileLine(123, "bar.txt")


def test_parse_invalid_line():
    with pytest.raises(ValueError):
        parse_line("what is this")


def test_parse_lines():
    assert parse_lines(EXAMPLE) == [
        CdLine("/"),
        LsLine(),
        DirLine("a"),
        FileLine(14848514, "b.txt"),
        FileLine(8504156, "c.dat"),
        DirLine("d"),
        CdLine("a"),
        LsLine(),
        DirLine("e"),
        FileLine(29116, "f"),
        FileLine(2557, "g"),
        FileLine(62596, "h.lst"),
        CdLine("e"),
        LsLine(),
        FileLine(584, "i"),
        CdLine(".."),
        CdLine(".."),
        CdLine("d"),
        LsLine(),
        FileLine(4060174, "j"),
        FileLine(8033020, "d.log"),
        FileLine(5626152, "d.ext"),
        FileLine(7214296, "k"),
    ]


def test_first_line_must_cd_root():
    with pytest.raises(ValueError):
        part1("$ ls\n10 a")


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        part2("")