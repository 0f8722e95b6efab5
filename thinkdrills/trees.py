"""Binary trees of integers: heap and search-tree checks, and a search tree with statistics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def in_order(node: TreeNode | None) -> Iterator[int]:
    """Yield the values of the tree rooted at ``node`` in left-root-right order."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.value
    yield from in_order(node.right)


def is_heap(node: TreeNode | None) -> bool:
    """Tell whether every node is strictly greater than its children, recursively."""
    if node is None:
        return True
    children = [child for child in (node.left, node.right) if child is not None]
    if not all(node.value > child.value for child in children):
        return False
    return is_heap(node.left) and is_heap(node.right)


def is_search_tree(node: TreeNode | None) -> bool:
    """Tell whether an in-order walk of the tree gives strictly increasing values."""
    previous: int | None = None
    for value in in_order(node):
        if previous is not None and value <= previous:
            return False
        previous = value
    return True


class SearchTree:
    """Binary search tree of integers; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.add(value)

    def add(self, value: int) -> None:
        """Insert ``value`` where it keeps the search-tree order."""

        def insert(node: TreeNode | None) -> TreeNode:
            if node is None:
                return TreeNode(value)
            if value >= node.value:
                node.right = insert(node.right)
            else:
                node.left = insert(node.left)
            return node

        self.root = insert(self.root)

    def __iter__(self) -> Iterator[int]:
        return in_order(self.root)

    def __len__(self) -> int:
        def size(node: TreeNode | None) -> int:
            if node is None:
                return 0
            return size(node.left) + size(node.right) + 1

        return size(self.root)

    def describe(self) -> str:
        """Return the values in order, separated by spaces."""
        return " ".join(str(value) for value in self)

    def total(self) -> int:
        """Sum all the values, recursively."""

        def walk(node: TreeNode | None) -> int:
            if node is None:
                return 0
            return walk(node.left) + walk(node.right) + node.value

        return walk(self.root)

    def average(self) -> float:
        """Return the mean value; raise ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("average() of an empty tree")
        return self.total() / len(self)

    def median(self) -> int:
        """Return the value at in-order position ``len // 2`` (counting from 1).

        A single-node tree gives its only value; an empty tree raises ValueError.
        """
        values = list(self)
        if not values:
            raise ValueError("median() of an empty tree")
        if len(values) == 1:
            return values[0]
        return values[len(values) // 2 - 1]

    def mode(self) -> int:
        """Return the most frequent value, the smallest one on ties; empty raises ValueError."""
        if self.root is None:
            raise ValueError("mode() of an empty tree")
        best_value = 0
        best_count = 0
        for value, run in groupby(self):
            count = sum(1 for _ in run)
            if count > best_count:
                best_value, best_count = value, count
        return best_value