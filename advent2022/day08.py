"""Treetop tree house: visibility and scenic scores in a height grid."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

_DIGITS = "0123456789"


@dataclass
class Visibility:
    """Tallest tree seen so far from each side, -1 when there is none."""

    left: int = -1
    right: int = -1
    above: int = -1
    below: int = -1

    def is_visible(self, tree: Tree) -> bool:
        """Whether ``tree`` is taller than everything on at least one side."""
        return any(
            tree.height > side
            for side in (self.left, self.right, self.above, self.below)
        )


@dataclass
class Tree:
    """A tree with its height and computed visibility."""

    height: int
    visibility: Visibility = field(default_factory=Visibility)
    visible: bool | None = None


def _sweep(trees: Iterable[Tree], side: str) -> None:
    tallest = -1
    for tree in trees:
        setattr(tree.visibility, side, tallest)
        tallest = max(tallest, tree.height)


def _viewing_distance(height: int, line: Iterable[Tree]) -> int:
    count = 0
    for tree in line:
        count += 1
        if tree.height >= height:
            break
    return count


@dataclass
class Forest:
    """A rectangular grid of trees."""

    trees: list[list[Tree]]

    @classmethod
    def from_text(cls, text: str) -> Forest:
        """Parse lines of digits into a forest."""
        rows = []
        for line in text.splitlines():
            row = []
            for char in line:
                if char not in _DIGITS:
                    raise ValueError(f"invalid digit: {char!r}")
                row.append(Tree(int(char)))
            rows.append(row)
        return cls(rows)

    def check_visibility(self) -> None:
        """Compute, for every tree, whether it can be seen from outside."""
        for row in self.trees:
            _sweep(row, "left")
            _sweep(reversed(row), "right")
        for column in zip(*self.trees):
            _sweep(column, "above")
            _sweep(reversed(column), "below")
        for row in self.trees:
            for tree in row:
                tree.visible = tree.visibility.is_visible(tree)

    def scenic_score(self, row: int, col: int) -> int:
        """Product of the viewing distances in the four directions."""
        if row < 0 or col < 0:
            raise IndexError("coordinates out of the forest")
        height = self.trees[row][col].height
        row_trees = self.trees[row]
        column = [r[col] for r in self.trees]
        lines = (
            reversed(row_trees[:col]),
            row_trees[col + 1 :],
            reversed(column[:row]),
            column[row + 1 :],
        )
        return math.prod(_viewing_distance(height, line) for line in lines)


def part1(text: str) -> int:
    """Count the trees visible from outside the grid."""
    forest = Forest.from_text(text)
    forest.check_visibility()
    return sum(1 for row in forest.trees for tree in row if tree.visible)


def part2(text: str) -> int:
    """The highest scenic score of any tree."""
    forest = Forest.from_text(text)
    scores = [
        forest.scenic_score(r, c)
        for r, row in enumerate(forest.trees)
        for c in range(len(row))
    ]
    if not scores:
        raise ValueError("unable to find max scenic score")
    return max(scores)