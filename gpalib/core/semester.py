"""Represents a semester's worth of courses."""

import typing

from .course import Course, Courses


class Semester:
    """A named term in a given year, holding the courses taken in it.

    A semester does not store its GPA. The GPA depends on the grading scale
    and weighting in use, and is recomputed from the courses whenever it is
    needed; see :func:`gpalib.calculate_gpa` and :class:`gpalib.Transcript`.

    Attributes
    ----------
    id : str
        An identifier for the semester.
    name : str
        The name of the term, e.g., "Fall".
    year : int
        The year of the term.
    courses : Courses
        The courses taken during the semester, in the order given.

    """

    def __init__(self, id, name, year, courses: typing.Iterable[Course] = ()):
        self.id = id
        self.name = name
        self.year = year
        self.courses = Courses(courses)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.label} with {len(self.courses)} courses>"

    def __eq__(self, other):
        if not isinstance(other, Semester):
            return NotImplemented
        return (
            self.id == other.id
            and self.name == other.name
            and self.year == other.year
            and self.courses == other.courses
        )

    def __hash__(self):
        return hash(self.id)

    @property
    def label(self) -> str:
        """The display label of the semester, e.g., "Fall 2024"."""
        return f"{self.name} {self.year}"
