"""Student descriptions extended with optional data, by decoration or by free-form fields."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Describable(ABC):
    """Anything that can describe a student in one line."""

    @abstractmethod
    def describe(self) -> str:
        """Return the description."""


class BasicProfile(Describable):
    """The core student data: number, grade and name."""

    def __init__(self, student_id: int = -1, grade: int = -1, name: str = "") -> None:
        self.student_id = student_id
        self.grade = grade
        self.name = name

    def describe(self) -> str:
        """Return the name, number and grade."""
        return f"Name = {self.name}, ID = {self.student_id}, Grade = {self.grade}"


class ProfileDecorator(Describable):
    """Wraps another description and passes it through unchanged."""

    def __init__(self, inner: Describable) -> None:
        self.inner = inner

    def describe(self) -> str:
        """Return the wrapped description."""
        return self.inner.describe()


class TermPaperTitle(ProfileDecorator):
    """Adds the title of the student's term paper."""

    def __init__(self, title: str, inner: Describable) -> None:
        super().__init__(inner)
        self.title = title

    def describe(self) -> str:
        """Return the wrapped description followed by the term paper title."""
        return f"{super().describe()}, TermPaperTitleData = {self.title}"


class YearOfEnrolment(ProfileDecorator):
    """Adds the year the student enrolled."""

    def __init__(self, year: int, inner: Describable) -> None:
        super().__init__(inner)
        self.year = year

    def describe(self) -> str:
        """Return the wrapped description followed by the year of enrolment."""
        return f"{super().describe()}, Year of Enrolment = {self.year}"


class Audit(ProfileDecorator):
    """Adds whether the student audits the class, shown as 1 or 0."""

    def __init__(self, audits: bool, inner: Describable) -> None:
        super().__init__(inner)
        self.audits = bool(audits)

    def describe(self) -> str:
        """Return the wrapped description followed by the audit flag."""
        return f"{super().describe()}, Is Student Audit the class = {int(self.audits)}"


class ExtraFields:
    """A student record made of arbitrary named text fields."""

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}

    def add(self, key: str, value: str) -> None:
        """Add a field; a key that is already present keeps its first value."""
        self._fields.setdefault(key, value)

    def retrieve(self, key: str) -> str:
        """Return a field's value; a missing key is created empty and gives ''."""
        return self._fields.setdefault(key, "")

    def describe(self) -> str:
        """Return one 'key = value' line per field."""
        return "\n".join(f"{key} = {value}" for key, value in self._fields.items())