"""Basic arithmetic, polynomial evaluation and quadratic equations."""

from __future__ import annotations

import math
from collections.abc import Sequence


def add(a, b):
    """Return ``a + b``."""
    return a + b


def subtract(a, b):
    """Return ``a - b``."""
    return a - b


def multiply(a, b):
    """Return ``a * b``."""
    return a * b


def divide(a: int, b: int) -> int:
    """Integer quotient of ``a`` by ``b``, truncated toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def swap(x, y):
    """Return the two values in exchanged order."""
    return y, x


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial by Horner's rule.

    ``coefficients[i]`` is the coefficient of ``x ** i``.
    """
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")
    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = coefficient + x * result
    return result


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of ``a*x**2 + b*x + c``.

    Two distinct roots come larger first; a repeated root comes once;
    imaginary roots give an empty tuple.
    """
    if a == 0:
        raise ValueError("the coefficient of x**2 must not be zero")
    discriminant = b * b - 4 * a * c
    denominator = 2 * a
    if discriminant > 0:
        root = math.sqrt(discriminant) / denominator
        base = -b / denominator
        return (base + root, base - root)
    if discriminant == 0:
        return (-b / denominator,)
    return ()