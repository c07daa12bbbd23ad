"""Last-in, first-out stacks: an unbounded linked one and a fixed-capacity one."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class StackEmptyError(IndexError):
    """Raised when taking from a stack that holds nothing."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at its capacity."""


@dataclass(slots=True)
class _Node:
    value: int
    below: _Node | None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("pop from an empty stack")
        node = self._top
        self._top = node.below
        self._length -= 1
        return node.value

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("peek at an empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class BoundedStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._values: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top; raise StackFullError at capacity."""
        if len(self._values) >= self.capacity:
            raise StackFullError(f"stack is full (capacity {self.capacity})")
        self._values.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._values:
            raise StackEmptyError("pop from an empty stack")
        return self._values.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._values:
            raise StackEmptyError("peek at an empty stack")
        return self._values[-1]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack up to the top."""
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, values={self._values!r})"