"""A collection of student records with averages, range queries and a first-student policy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Union

from thinkdrills.student import Comparator, FirstStudentPolicy, StudentRecord

MIN_GRADE = 1
MAX_GRADE = 100

Policy = Union[FirstStudentPolicy, Comparator]


class Roster:
    """An ordered collection of student records, kept in insertion order."""

    def __init__(self, records: Iterable[StudentRecord] = ()) -> None:
        self._records: list[StudentRecord] = list(records)
        self._comparator: Comparator | None = None

    def add(self, record: StudentRecord) -> None:
        """Append a record at the end."""
        self._records.append(record)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def average(self) -> float:
        """Return the mean grade, truncated toward zero to a whole number.

        Raises ValueError when the roster is empty.
        """
        if not self._records:
            raise ValueError("average() of an empty roster")
        grade_sum = sum(record.grade for record in self._records)
        count = len(self._records)
        quotient = abs(grade_sum) // count
        return float(quotient if grade_sum >= 0 else -quotient)

    def within_range(self, lower: int, upper: int) -> Roster:
        """Return a new roster with the records whose grade lies in ``[lower, upper]``.

        Bounds outside 1..100 give an empty roster.
        """
        result = Roster()
        if not (MIN_GRADE <= lower <= MAX_GRADE and MIN_GRADE <= upper <= MAX_GRADE):
            return result
        for record in self._records:
            if lower <= record.grade <= upper:
                result.add(record)
        return result

    def set_policy(self, policy: Policy) -> None:
        """Choose how the first student is picked: a policy code or a comparator."""
        if isinstance(policy, FirstStudentPolicy):
            self._comparator = policy.comparator()
        elif callable(policy):
            self._comparator = policy
        else:
            raise TypeError("policy must be a FirstStudentPolicy or a callable")

    def first_student(self) -> StudentRecord | None:
        """Return the record the current policy prefers.

        Earlier records win ties. Returns None when the roster is empty or no
        policy has been set.
        """
        if not self._records or self._comparator is None:
            return None
        best = self._records[0]
        for record in self._records[1:]:
            if self._comparator(record, best):
                best = record
        return best

    def describe(self) -> str:
        """Return one description line per record."""
        return "\n".join(record.describe() for record in self._records)


def push_record(records: MutableSequence[StudentRecord], student_id: int, grade: int) -> None:
    """Insert a record with ``student_id`` and ``grade`` at the front of ``records``."""
    records.insert(0, StudentRecord(student_id=student_id, grade=grade))


def average_grade(records: Iterable[StudentRecord]) -> float:
    """Return the exact mean grade; raise ValueError when there are no records."""
    grades = [record.grade for record in records]
    if not grades:
        raise ValueError("average_grade() of no records")
    return sum(grades) / len(grades)