"""Represents a course taken (or planned) by a student."""

import numbers
import typing


class Course:
    """A single course and the grade received in it.

    Attributes
    ----------
    id : str
        An identifier for the course, typically assigned by the datastore.
    name : str
        The display name of the course.
    grade : str
        The grade label, such as "A-" or "90-92". An empty string (or `None`)
        means the grade has not been entered yet; such courses do not count
        toward any GPA.
    credits : int
        The number of credit hours. Must be a non-negative integer.
    hypothetical : bool
        If `True`, the course is a "what-if" course. It is left out of the
        recorded GPA and only used in projections. Default: `False`.
    semester : Optional[str]
        The name of the semester the course belongs to, if known.
    year : Optional[int]
        The year of the semester the course belongs to, if known.
    code : Optional[str]
        A catalog code, such as "MATH 20A", if known.

    Two courses compare equal when all of their attributes are equal.

    """

    _attrs = [
        "id",
        "name",
        "grade",
        "credits",
        "hypothetical",
        "semester",
        "year",
        "code",
    ]

    def __init__(
        self,
        id,
        name,
        grade="",
        credits=0,
        hypothetical=False,
        semester=None,
        year=None,
        code=None,
    ):
        if isinstance(credits, bool) or not isinstance(credits, numbers.Integral):
            raise TypeError(f"Credits must be an integer, not {credits!r}.")

        if credits < 0:
            raise ValueError(f"Credits must be non-negative, got {credits}.")

        self.id = id
        self.name = name
        self.grade = "" if grade is None else grade
        self.credits = int(credits)
        self.hypothetical = bool(hypothetical)
        self.semester = semester
        self.year = year
        self.code = code

    def __repr__(self):
        return (
            f"Course({self.id!r}, {self.name!r}, grade={self.grade!r}, "
            f"credits={self.credits!r}, hypothetical={self.hypothetical!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return all(getattr(self, attr) == getattr(other, attr) for attr in self._attrs)

    def __hash__(self):
        return hash(self.id)

    @property
    def is_graded(self) -> bool:
        """Whether a grade has been entered for this course."""
        return bool(self.grade)


class Courses(typing.Sequence[Course]):
    """A sequence of :class:`Course` instances.

    This behaves like a list of courses, but also provides methods for
    filtering and for looking up a course by (part of) its name.

    """

    def __init__(self, courses: typing.Iterable[Course]):
        self._courses = list(courses)

    def __getitem__(self, ix):
        if isinstance(ix, slice):
            return self.__class__(self._courses[ix])
        return self._courses[ix]

    def __len__(self):
        return len(self._courses)

    def __repr__(self):
        return f"Courses({self._courses!r})"

    def __eq__(self, other):
        if isinstance(other, Courses):
            return self._courses == other._courses
        if isinstance(other, list):
            return self._courses == other
        return NotImplemented

    def __add__(self, other):
        return self.__class__(self._courses + list(other))

    def real(self) -> "Courses":
        """The courses that are not hypothetical."""
        return self.__class__(c for c in self._courses if not c.hypothetical)

    def hypothetical(self) -> "Courses":
        """The hypothetical ("what-if") courses."""
        return self.__class__(c for c in self._courses if c.hypothetical)

    def graded(self) -> "Courses":
        """The courses that have a grade entered."""
        return self.__class__(c for c in self._courses if c.is_graded)

    def find(self, pattern: str) -> Course:
        """Finds a course from a substring of its name.

        The search is case-insensitive.

        Parameters
        ----------
        pattern : str
            A pattern to search for in the course's name.

        Returns
        -------
        Course
            The matching course.

        Raises
        ------
        ValueError
            If no course matches, or if more than one course matches.

        """
        matches = [c for c in self._courses if pattern.lower() in c.name.lower()]

        if len(matches) == 0:
            raise ValueError(f"No courses matched {pattern}.")

        if len(matches) > 1:
            raise ValueError(f'More than one course matched "{pattern}": {matches}')

        return matches[0]
