"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def preorder(node: Node | None) -> Iterator[int]:
    """Yield node values: node first, then left subtree, then right subtree."""
    pending = [node]
    while pending:
        current = pending.pop()
        if current is None:
            continue
        yield current.data
        pending.append(current.right)
        pending.append(current.left)


def inorder(node: Node | None) -> Iterator[int]:
    """Yield node values: left subtree, then node, then right subtree."""
    pending: list[Node] = []
    current = node
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        current = pending.pop()
        yield current.data
        current = current.right


def postorder(node: Node | None) -> Iterator[int]:
    """Yield node values: left subtree, then right subtree, then node."""
    reversed_order: list[int] = []
    pending = [node]
    while pending:
        current = pending.pop()
        if current is None:
            continue
        reversed_order.append(current.data)
        pending.append(current.left)
        pending.append(current.right)
    yield from reversed(reversed_order)