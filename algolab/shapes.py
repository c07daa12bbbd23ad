"""Areas of plane figures and the circle inscribed in a triangle."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_PI = 3.142
INCIRCLE_PI = 3.14
HEPTAGON_FACTOR = 3.634


def circle_area(radius: float, pi: float = DEFAULT_PI) -> float:
    """Area of a circle, using the given approximation of pi."""
    return pi * radius * radius


def rectangle_area(breadth: float, length: float) -> float:
    """Area of a rectangle."""
    return breadth * length


def triangle_area(base: float, height: float) -> float:
    """Area of a triangle from its base and height."""
    return 0.5 * base * height


def square_area(side: float) -> float:
    """Area of a square."""
    return side * side


def rhombus_area(d1: float, d2: float) -> float:
    """Area of a rhombus from its two diagonals."""
    return 0.5 * d1 * d2


def trapezium_area(base1: float, base2: float, height: float) -> float:
    """Area of a trapezium from its parallel sides and height."""
    return 0.5 * (base1 + base2) * height


def pentagon_area(side: float) -> float:
    """Area of a regular pentagon."""
    return math.sqrt(5 * (5 + 2 * math.sqrt(5))) * side * side / 4


def hexagon_area(side: float) -> float:
    """Area of a regular hexagon."""
    return 3 * math.sqrt(3) * side * side / 2


def heptagon_area(side: float) -> float:
    """Area of a regular heptagon, using the approximate factor 3.634."""
    return HEPTAGON_FACTOR * side * side


def octagon_area(side: float) -> float:
    """Area of a regular octagon."""
    return 2 * (1 + math.sqrt(2)) * side * side


@dataclass(frozen=True)
class Incircle:
    """Centre, radius and area computed for a triangle's circle."""

    center: tuple[float, float]
    radius: float
    area: float


def incircle(
    a: tuple[float, float], b: tuple[float, float], c: tuple[float, float]
) -> Incircle:
    """Circle of an equilateral triangle with vertices ``a``, ``b`` and ``c``.

    The centre is the side-weighted mean of the vertices, the radius is the
    distance from the centre to ``a`` and the area is ``2 * pi * radius**2``
    with pi taken as 3.14.
    """
    side_ab = math.dist(a, b)
    side_bc = math.dist(b, c)
    side_ac = math.dist(a, c)
    perimeter = side_ab + side_bc + side_ac
    if perimeter == 0:
        raise ValueError("the three vertices must not all coincide")
    center = (
        (side_ab * a[0] + side_bc * b[0] + side_ac * c[0]) / perimeter,
        (side_ab * a[1] + side_bc * b[1] + side_ac * c[1]) / perimeter,
    )
    radius = math.dist(center, a)
    return Incircle(center=center, radius=radius, area=2 * INCIRCLE_PI * radius**2)