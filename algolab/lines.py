"""Classifying pairs of lines as parallel, intersecting or identical."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import combinations

_TOLERANCE = 0.0001


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class Line:
    """The line through two points."""

    p1: Point
    p2: Point

    @property
    def dx(self) -> int:
        return self.p2.x - self.p1.x

    @property
    def dy(self) -> int:
        return self.p2.y - self.p1.y


class Relation(Enum):
    """How two lines relate to each other."""

    PARALLEL = 0
    INTERSECT = 1
    IDENTICAL = 2


def _one_vertical(first: Line, second: Line) -> bool:
    return (first.dx == 0) != (second.dx == 0)


def slopes_equal(first: Line, second: Line) -> bool:
    """Return True if both lines have the same slope."""
    if _one_vertical(first, second):
        return False
    return second.dy * first.dx == first.dy * second.dx


def intercepts_equal(first: Line, second: Line) -> bool:
    """Return True if two lines of equal slope share their intercept."""
    if _one_vertical(first, second):
        return False
    if first.dx == 0 and second.dx == 0:
        return first.p2.x == second.p2.x
    slope = second.dy / second.dx
    first_intercept = first.p2.y * slope - first.p2.x
    second_intercept = second.p2.y * slope - second.p2.x
    return abs(first_intercept - second_intercept) < _TOLERANCE


def classify_pair(first: Line, second: Line) -> Relation:
    """Say whether two lines are parallel, intersecting or identical."""
    if not slopes_equal(first, second):
        return Relation.INTERSECT
    if intercepts_equal(first, second):
        return Relation.IDENTICAL
    return Relation.PARALLEL


def count_relations(lines: Iterable[Line]) -> dict[Relation, int]:
    """Count each relation over every unordered pair of the given lines."""
    counts = {relation: 0 for relation in Relation}
    for first, second in combinations(list(lines), 2):
        counts[classify_pair(first, second)] += 1
    return counts