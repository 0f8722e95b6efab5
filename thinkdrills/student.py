"""A student record and the policies for picking the class's first student."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class StudentRecord:
    """One student's number, grade and name."""

    student_id: int = 0
    grade: int = 0
    name: str = ""

    def describe(self) -> str:
        """Return a one-line description of the record."""
        return f"Name = {self.name}, ID = {self.student_id}, Grade = {self.grade}"


Comparator = Callable[[StudentRecord, StudentRecord], bool]


def higher_grade(candidate: StudentRecord, current: StudentRecord) -> bool:
    """Prefer the candidate when its grade is higher."""
    return candidate.grade > current.grade


def lower_student_number(candidate: StudentRecord, current: StudentRecord) -> bool:
    """Prefer the candidate when its student number is lower."""
    return candidate.student_id < current.student_id


def name_comes_first(candidate: StudentRecord, current: StudentRecord) -> bool:
    """Prefer the candidate when its name sorts first."""
    return candidate.name < current.name


class FirstStudentPolicy(Enum):
    """The ways a first student can be chosen."""

    HIGHER_GRADE = "higher_grade"
    LOWER_STUDENT_NUMBER = "lower_student_number"
    NAME_COMES_FIRST = "name_comes_first"

    def comparator(self) -> Comparator:
        """Return the function that tells whether a candidate beats the current choice."""
        return _COMPARATORS[self]


_COMPARATORS: dict[FirstStudentPolicy, Comparator] = {
    FirstStudentPolicy.HIGHER_GRADE: higher_grade,
    FirstStudentPolicy.LOWER_STUDENT_NUMBER: lower_student_number,
    FirstStudentPolicy.NAME_COMES_FIRST: name_comes_first,
}