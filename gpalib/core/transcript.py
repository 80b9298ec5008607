"""Core type for working with a student's academic record."""

from __future__ import annotations

import copy
import dataclasses
import itertools
import typing

import pandas as pd

from ..gpa import calculate_gpa, graded_credits, quality_points, what_if_gpa
from ..history import semester_history
from ..scales import GradingScale, ScaleRegistry, default_registry
from .course import Courses
from .options import GPAOptions
from .semester import Semester


class Transcript:
    """A student's semesters and courses, with GPAs computed on demand.

    Nothing computed by a transcript is cached: every summative attribute,
    such as :attr:`gpa` or :attr:`history`, is recomputed from the current
    courses each time it is accessed. Courses and semesters can therefore be
    edited freely between accesses.

    Parameters
    ----------
    semesters : Iterable[Semester]
        The student's semesters, in chronological order.
    opts : Optional[GPAOptions]
        Selects the grading scale and whether GPAs are weighted by credit
        hours. Default: ``GPAOptions()``.
    registry : Optional[ScaleRegistry]
        The scales that :attr:`opts` may refer to. Default: a new
        :func:`gpalib.scales.default_registry`.

    Raises
    ------
    KeyError
        If the scale named in `opts` is not in the registry.

    Example
    -------

    >>> transcript = Transcript(
    ...     [Semester("s1", "Fall", 2024, [Course("c1", "Calculus", "A", 4)])],
    ...     opts=GPAOptions(weighted=False),
    ... )
    >>> transcript.gpa
    4.0

    """

    def __init__(
        self,
        semesters: typing.Iterable[Semester] = (),
        opts: GPAOptions | None = None,
        registry: ScaleRegistry | None = None,
    ):
        self.semesters = list(semesters)
        self.opts = opts if opts is not None else GPAOptions()
        self.registry = registry if registry is not None else default_registry()

        # fail early on a misconfigured scale
        self.opts.resolve_scale(self.registry)

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} object with "
            f"{len(self.semesters)} semesters "
            f"and {len(self.courses)} courses>"
        )

    # properties: configuration --------------------------------------------------------

    @property
    def scale(self) -> GradingScale:
        """The grading scale selected by :attr:`opts`."""
        return self.opts.resolve_scale(self.registry)

    @property
    def weighted(self) -> bool:
        return self.opts.weighted

    # properties: courses --------------------------------------------------------------

    @property
    def courses(self) -> Courses:
        """Every course in every semester, in order.

        This is a dynamically-computed property; it should not be modified.

        """
        return Courses(itertools.chain.from_iterable(s.courses for s in self.semesters))

    @property
    def real_courses(self) -> Courses:
        """The courses that are not hypothetical."""
        return self.courses.real()

    @property
    def hypothetical_courses(self) -> Courses:
        """The hypothetical ("what-if") courses."""
        return self.courses.hypothetical()

    # properties: summaries ------------------------------------------------------------

    @property
    def gpa(self) -> float:
        """The cumulative GPA over all real courses.

        Unrounded; format it for display as needed.

        """
        return calculate_gpa(self.real_courses, self.scale, weighted=self.weighted)

    @property
    def what_if_gpa(self) -> float:
        """The GPA over the real courses together with the hypothetical ones."""
        return what_if_gpa(
            self.real_courses,
            self.hypothetical_courses,
            self.scale,
            weighted=self.weighted,
        )

    @property
    def total_credits(self) -> int:
        """Credit hours of the real courses whose grade is on the scale."""
        return graded_credits(self.real_courses, self.scale)

    @property
    def quality_points(self) -> float:
        """Total quality points of the real courses."""
        return quality_points(self.real_courses, self.scale)

    @property
    def history(self) -> pd.DataFrame:
        """A table of semester and cumulative GPAs.

        See :func:`gpalib.history.semester_history` for the columns.

        """
        return semester_history(self.semesters, self.scale, weighted=self.weighted)

    @property
    def semester_gpas(self) -> pd.Series:
        """Each semester's own GPA, indexed by semester label."""
        return self.history["gpa"]

    # methods --------------------------------------------------------------------------

    def find_semester(self, label: str) -> Semester:
        """Look up a semester by its label, such as "Fall 2024".

        Raises
        ------
        KeyError
            If no semester has the label.

        """
        for semester in self.semesters:
            if semester.label == label:
                return semester
        raise KeyError(f"There is no semester labeled {label!r}.")

    def add_semester(self, semester: Semester):
        """Append a semester to the end of the transcript."""
        if any(s.id == semester.id for s in self.semesters):
            raise ValueError(f'A semester with id "{semester.id}" already exists.')
        self.semesters.append(semester)

    def copy(self) -> Transcript:
        """A deep copy of the transcript. The registry is shared."""
        return self.__class__(
            copy.deepcopy(self.semesters), opts=self.opts, registry=self.registry
        )

    def with_options(self, **kwargs) -> Transcript:
        """A copy of the transcript with some options replaced.

        Example
        -------

        >>> transcript.with_options(weighted=False).gpa

        """
        opts = dataclasses.replace(self.opts, **kwargs)
        return self.__class__(
            copy.deepcopy(self.semesters), opts=opts, registry=self.registry
        )
