"""Integer sequences, divisibility, primality and related number puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from math import prod


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting from 1 (fibonacci(1) == 0)."""
    if n < 1:
        raise ValueError(f"term number must be at least 1, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers.

    The two opening terms 0 and 1 are always included, even when
    ``count`` is smaller than two.
    """
    series = [0, 1]
    while len(series) < count:
        series.append(series[-2] + series[-1])
    return series


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    return prod(range(2, n + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers by repeated subtraction."""
    if a <= 0 or b <= 0:
        raise ValueError(f"gcd needs two positive integers, got {a} and {b}")
    while a != b:
        if a > b:
            # Subtracting b until a no longer exceeds it.
            a = (a - 1) % b + 1
        else:
            b = (b - 1) % a + 1
    return a


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def hcf(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm; zero if either input is zero."""
    if a == 0 or b == 0:
        return 0
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def is_prime(n: int) -> bool:
    """Return True if ``n`` has no divisor between 2 and ``n // 2``; numbers below 2 are not prime."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    if n == 0:
        return True
    digits = str(n)
    power = len(digits)
    return sum(int(digit) ** power for digit in digits) == n


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def atkin_primes(limit: int = 100_000) -> list[int]:
    """Return all primes below ``limit`` using the sieve of Atkin."""
    sieve = [False] * (limit + 1)
    i = 1
    while i * i < limit:
        j = 1
        while j * j < limit:
            n = 4 * i * i + j * j
            if n <= limit and n % 12 in (1, 5):
                sieve[n] = not sieve[n]
            n = 3 * i * i + j * j
            if n <= limit and n % 12 == 7:
                sieve[n] = not sieve[n]
            n = 3 * i * i - j * j
            if i > j and n <= limit and n % 12 == 11:
                sieve[n] = not sieve[n]
            j += 1
        i += 1

    m = 5
    while m * m < limit:
        if sieve[m]:
            for multiple in range(m * m, limit, m * m):
                sieve[multiple] = False
        m += 1

    primes = [p for p in (2, 3) if p < limit]
    primes.extend(n for n in range(5, limit) if sieve[n])
    return primes


def is_odd(n: int) -> bool:
    """Return True if the lowest bit of ``n`` is set."""
    return n & 1 == 1


def is_positive(n: int) -> bool:
    """Return True if ``n`` is strictly greater than zero."""
    return n > 0


def _pairwise_coprime(moduli: Sequence[int]) -> bool:
    return all(
        hcf(first, second) == 1
        for index, first in enumerate(moduli)
        for second in moduli[index + 1 :]
    )


def chinese_remainder(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """Solve x = residues[k] (mod moduli[k]) for every k.

    Returns the sum of residue * (M / m) * inverse terms, which satisfies every
    congruence but is not reduced modulo the product M of the moduli.
    Raises ValueError when the moduli are not pairwise coprime.
    """
    if len(residues) != len(moduli):
        raise ValueError("residues and moduli must have the same length")
    if not moduli:
        raise ValueError("at least one congruence is required")
    if any(modulus <= 0 for modulus in moduli):
        raise ValueError("moduli must be positive")
    if not _pairwise_coprime(moduli):
        raise ValueError("the given equations have no solutions")
    total = prod(moduli)
    return sum(
        residue * (total // modulus) * pow(total // modulus, -1, modulus)
        for residue, modulus in zip(residues, moduli)
    )