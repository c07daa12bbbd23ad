"""Dynamic-programming and recursive puzzles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def egg_drop(eggs: int, floors: int) -> int:
    """Minimum number of trials that find the critical floor in the worst case."""
    if eggs < 1:
        raise ValueError(f"at least one egg is needed, got {eggs}")
    if floors < 0:
        raise ValueError(f"floors must be non-negative, got {floors}")
    previous = list(range(floors + 1))  # one egg: try every floor in turn
    for _ in range(2, eggs + 1):
        current = [0, 1] + [0] * max(floors - 1, 0)
        current = current[: floors + 1]
        for f in range(2, floors + 1):
            current[f] = 1 + min(
                max(previous[x - 1], current[f - x]) for x in range(1, f + 1)
            )
        previous = current
    return previous[floors]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items whose weights fit in ``capacity`` (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_jumps(steps: Sequence[int]) -> int | None:
    """Fewest jumps from the first to the last position, or None if unreachable.

    From position ``i`` one may jump forward by 1 up to ``steps[i]`` places.
    """
    if not steps:
        raise ValueError("at least one position is required")
    last = len(steps) - 1
    best: list[int | None] = [None] * len(steps)
    best[last] = 0
    for i in range(last - 1, -1, -1):
        reachable = (
            best[j] for j in range(i + 1, min(last, i + steps[i]) + 1)
        )
        candidates = [jumps for jumps in reachable if jumps is not None]
        best[i] = min(candidates) + 1 if candidates else None
    return best[0]


def hanoi_moves(
    n: int, source: str = "X", spare: str = "Y", target: str = "Z"
) -> Iterator[tuple[str, str]]:
    """Yield the (from, to) moves that carry ``n`` discs from ``source`` to ``target``."""
    if n <= 0:
        raise ValueError(f"the number of discs must be positive, got {n}")
    return _hanoi(n, source, spare, target)


def _hanoi(n: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if n == 1:
        yield (source, target)
        return
    yield from _hanoi(n - 1, source, target, spare)
    yield (source, target)
    yield from _hanoi(n - 1, spare, source, target)