"""Classic comparison and distribution sorts over lists of integers.

Every function takes an iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for j in range(n - 1):
        smallest = min(range(j, n), key=result.__getitem__)
        if smallest != j:
            result[j], result[smallest] = result[smallest], result[j]
    return result


def _lomuto_partition(values: list[int], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[int]) -> list[int]:
    """Quicksort using the last element of each range as the pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _lomuto_partition(result, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return result


def _hoare_partition(values: list[int], first: int, end: int) -> int:
    """Partition values[first:end] around values[first]; return its final index."""
    pivot = values[first]
    i = first
    j = end
    while True:
        i += 1
        while i < end and values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        if i > j:
            break
    values[first] = values[j]
    values[j] = pivot
    return j


def randomized_quick_sort_passes(
    items: Iterable[int], rng: random.Random
) -> Iterator[tuple[int, ...]]:
    """Yield a snapshot of the whole sequence after every partition step.

    The pivot of each range is chosen uniformly at random with ``rng``.
    The last snapshot (if any) is the sorted sequence.
    """
    values = list(items)

    def sort_range(low: int, high: int) -> Iterator[tuple[int, ...]]:
        if low < high:
            chosen = rng.randint(low, high)
            values[chosen], values[low] = values[low], values[chosen]
            split = _hoare_partition(values, low, high + 1)
            yield tuple(values)
            yield from sort_range(low, split - 1)
            yield from sort_range(split + 1, high)

    yield from sort_range(0, len(values) - 1)


def randomized_quick_sort(items: Iterable[int], rng: random.Random) -> list[int]:
    """Quicksort with a randomly chosen pivot for every range."""
    values = list(items)
    final: tuple[int, ...] | None = None
    for final in randomized_quick_sort_passes(values, rng):
        pass
    return list(final) if final is not None else values


def _sift_down(values: list[int], index: int, last: int) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left <= last and values[left] > values[largest]:
            largest = left
        if right <= last and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def heap_sort(items: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    result = list(items)
    last = len(result) - 1
    for index in range(last // 2, -1, -1):
        _sift_down(result, index, last)
    for end in range(last, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end - 1)
    return result


def merge_sort(items: Iterable[int]) -> list[int]:
    """Top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _require_non_negative(values: list[int]) -> None:
    negative = [value for value in values if value < 0]
    if negative:
        raise ValueError(f"only non-negative integers can be sorted, got {negative[0]}")


def bucket_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers with one bucket per value up to the maximum."""
    values = list(items)
    if not values:
        return []
    _require_non_negative(values)
    buckets = [0] * (max(values) + 1)
    for value in values:
        buckets[value] += 1
    return [value for value, count in enumerate(buckets) for _ in range(count)]


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers using prefix sums."""
    values = list(items)
    _require_non_negative(values)
    largest = max(values, default=0)
    counts = [0] * (largest + 1)
    for value in values:
        counts[value] += 1
    running = 0
    for value, count in enumerate(counts):
        running += count
        counts[value] = running
    result = [0] * len(values)
    for value in reversed(values):
        counts[value] -= 1
        result[counts[value]] = value
    return result