"""A singly linked list of integers with iterative and recursive queries."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One cell of the list."""

    value: int
    next: Node | None = None


class IntList:
    """Singly linked list of integers (booleans count as 0 and 1)."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        for value in values:
            self.append(value)

    @classmethod
    def random(
        cls,
        size: int,
        limit: int = 10,
        signed: bool = True,
        rng: random.Random | None = None,
    ) -> IntList:
        """Build a list of ``size`` values from 1 to ``limit``, negated at random if ``signed``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if limit < 1:
            raise ValueError("limit must be at least 1")
        gen = rng if rng is not None else random.Random()
        result = cls()
        for _ in range(size):
            value = gen.randint(1, limit)
            if signed and gen.randrange(2):
                value = -value
            result.append(value)
        return result

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def describe(self) -> str:
        """Return the values separated by spaces."""
        return " ".join(
            str(int(v)) if isinstance(v, bool) else str(v) for v in self
        )

    def sum_positive(self) -> int:
        """Sum the positive values."""
        return sum(value for value in self if value > 0)

    def sum_positive_recursive(self) -> int:
        """Sum the positive values, recursively."""

        def walk(node: Node | None) -> int:
            if node is None:
                return 0
            rest = walk(node.next)
            return rest + node.value if node.value > 0 else rest

        return walk(self.head)

    def has_odd_parity(self) -> bool:
        """Tell whether an odd number of values are set."""
        return sum(1 for value in self if value) % 2 == 1

    def has_odd_parity_recursive(self) -> bool:
        """Tell whether an odd number of values are set, recursively."""

        def walk(node: Node | None) -> bool:
            if node is None:
                return False
            return bool(node.value) ^ walk(node.next)

        return walk(self.head)

    def count(self, target: int) -> int:
        """Count the occurrences of ``target``."""
        return sum(1 for value in self if value == target)

    def count_recursive(self, target: int) -> int:
        """Count the occurrences of ``target``, recursively."""

        def walk(node: Node | None) -> int:
            if node is None:
                return 0
            rest = walk(node.next)
            return rest + 1 if node.value == target else rest

        return walk(self.head)

    def min(self) -> int:
        """Return the smallest value; raise ValueError when empty."""
        if self.head is None:
            raise ValueError("min() of an empty list")
        smallest = self.head.value
        for value in self:
            if value < smallest:
                smallest = value
        return smallest

    def min_recursive(self) -> int:
        """Return the smallest value, recursively; raise ValueError when empty."""
        if self.head is None:
            raise ValueError("min_recursive() of an empty list")

        def walk(node: Node) -> int:
            if node.next is None:
                return node.value
            smallest = walk(node.next)
            return node.value if node.value < smallest else smallest

        return walk(self.head)

    def count_negatives(self) -> int:
        """Count the negative values, recursively."""

        def walk(node: Node | None) -> int:
            if node is None:
                return 0
            rest = walk(node.next)
            return rest + 1 if node.value < 0 else rest

        return walk(self.head)