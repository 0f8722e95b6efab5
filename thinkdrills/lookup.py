"""Finding student records by number: sorting, interpolation search, a hash table and a search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from thinkdrills.student import StudentRecord

FIXED_GRADE = -1
DEFAULT_TABLE_SIZE = 21


def sort_by_id(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Return the records ordered by student number; equal numbers keep their order."""
    return sorted(records, key=lambda record: record.student_id)


def interpolation_search(
    records: Sequence[StudentRecord], student_id: int
) -> StudentRecord | None:
    """Find ``student_id`` in records sorted by number; return None when absent."""
    left = 0
    right = len(records) - 1
    while (
        left <= right
        and records[left].student_id <= student_id <= records[right].student_id
    ):
        low_id = records[left].student_id
        span = records[right].student_id - low_id
        if span == 0:
            pos = left
        else:
            pos = left + (student_id - low_id) * (right - left) // span
        found = records[pos]
        if found.student_id == student_id:
            return found
        if student_id < found.student_id:
            right = pos - 1
        else:
            left = pos + 1
    return None


def index_by_id(records: Iterable[StudentRecord]) -> dict[int, StudentRecord]:
    """Map each student number to its record; the first record with a number wins."""
    index: dict[int, StudentRecord] = {}
    for record in records:
        index.setdefault(record.student_id, record)
    return index


def sort_movable(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Sort by grade, leaving records with grade -1 where they stand."""
    result = list(records)
    slots = [i for i, record in enumerate(result) if record.grade != FIXED_GRADE]
    ordered = sorted((result[i] for i in slots), key=lambda record: record.grade)
    for slot, record in zip(slots, ordered):
        result[slot] = record
    return result


def insertion_sort_movable(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Insertion-sort by grade, stepping over records with grade -1 so they stay put."""
    result = list(records)
    slots = [i for i, record in enumerate(result) if record.grade != FIXED_GRADE]
    for n in range(1, len(slots)):
        k = n
        while k > 0 and result[slots[k - 1]].grade > result[slots[k]].grade:
            a, b = slots[k - 1], slots[k]
            result[a], result[b] = result[b], result[a]
            k -= 1
    return result


class StudentTable:
    """Fixed-size hash table of records keyed by student number, with linear probing."""

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._slots: list[StudentRecord | None] = [None] * size

    def _probe(self, student_id: int) -> Iterator[int]:
        size = len(self._slots)
        start = student_id % size
        return ((start + step) % size for step in range(size))

    def insert(self, record: StudentRecord) -> None:
        """Store the record in the first free slot; raise ValueError when full."""
        for index in self._probe(record.student_id):
            if self._slots[index] is None:
                self._slots[index] = record
                return
        raise ValueError("student table is full")

    def search(self, student_id: int) -> StudentRecord | None:
        """Return the record with ``student_id``, or None when absent."""
        for index in self._probe(student_id):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot.student_id == student_id:
                return slot
        return None


@dataclass
class _Node:
    record: StudentRecord
    left: _Node | None = None
    right: _Node | None = None


class StudentTree:
    """Binary search tree of records keyed by student number; equal numbers go right."""

    def __init__(self, records: Iterable[StudentRecord] = ()) -> None:
        self._root: _Node | None = None
        for record in records:
            self.add(record)

    def add(self, record: StudentRecord) -> None:
        """Insert a record keeping the tree ordered by student number."""

        def insert(node: _Node | None) -> _Node:
            if node is None:
                return _Node(record)
            if record.student_id >= node.record.student_id:
                node.right = insert(node.right)
            else:
                node.left = insert(node.left)
            return node

        self._root = insert(self._root)

    def __iter__(self) -> Iterator[StudentRecord]:
        def walk(node: _Node | None) -> Iterator[StudentRecord]:
            if node is None:
                return
            yield from walk(node.left)
            yield node.record
            yield from walk(node.right)

        return walk(self._root)

    def find(self, student_id: int) -> StudentRecord | None:
        """Return the record with ``student_id``, or None when absent."""

        def walk(node: _Node | None) -> StudentRecord | None:
            if node is None:
                return None
            current = node.record.student_id
            if current == student_id:
                return node.record
            return walk(node.left if student_id < current else node.right)

        return walk(self._root)

    def describe(self) -> str:
        """Return one line per record, ordered by student number."""
        return "\n".join(
            f"ID = {r.student_id}, Name = {r.name}, Grade = {r.grade}" for r in self
        )