"""Computing grade-point averages from courses."""

import itertools
import logging
import typing

from .scales import GradingScale

logger = logging.getLogger(__name__)


# helper functions =====================================================================


def _matched(courses, scale: GradingScale):
    """Yield (course, grade point) for each course whose grade is in the scale.

    Courses without a grade, or with a grade that the scale does not know, are
    skipped. They are not treated as zeros.

    """
    for course in courses:
        grade_point = scale.get(course.grade) if course.grade else None
        if grade_point is None:
            logger.debug(
                "Skipping course %r: grade %r is not on the %r scale.",
                course.name,
                course.grade,
                scale.name,
            )
            continue
        yield course, grade_point


def _real(courses):
    return [c for c in courses if not c.hypothetical]


# public functions =====================================================================


def calculate_gpa(courses, scale: GradingScale, weighted: bool = True) -> float:
    """Compute the GPA of a collection of courses.

    Each course's grade is looked up in the scale. A course whose grade is
    missing, or is not a label of the scale, contributes nothing: neither
    quality points nor credits.

    Parameters
    ----------
    courses : Iterable[Course]
        The courses. Hypothetical courses are *not* filtered out here; callers
        decide which courses to include.
    scale : GradingScale
        The scale used to convert grades to quality points.
    weighted : bool
        If `True` (the default), the GPA is the total quality points divided by
        the total credit hours. If `False`, it is the plain mean of the quality
        points of the graded courses.

    Returns
    -------
    float
        The GPA, unrounded. If no course has a recognized grade (or, when
        weighted, the recognized courses have zero credits in total), the GPA
        is 0.

    """
    points = 0.0
    total = 0

    for course, grade_point in _matched(courses, scale):
        if weighted:
            points += grade_point * course.credits
            total += course.credits
        else:
            points += grade_point
            total += 1

    return points / total if total > 0 else 0.0


def quality_points(courses, scale: GradingScale) -> float:
    """Total quality points (grade point times credits) of the graded courses."""
    return sum(gp * course.credits for course, gp in _matched(courses, scale))


def graded_credits(courses, scale: GradingScale) -> int:
    """Total credit hours of the courses whose grade is on the scale."""
    return sum(course.credits for course, _ in _matched(courses, scale))


def cumulative_gpa(
    semesters: typing.Iterable, scale: GradingScale, weighted: bool = True
) -> float:
    """The GPA over every real course of every semester.

    Hypothetical courses are left out.

    """
    courses = itertools.chain.from_iterable(s.courses for s in semesters)
    return calculate_gpa(_real(courses), scale, weighted=weighted)


def what_if_gpa(courses, hypothetical, scale: GradingScale, weighted: bool = True):
    """The GPA that would result from adding hypothetical courses.

    Parameters
    ----------
    courses : Iterable[Course]
        The courses already taken. Any of them that are flagged as
        hypothetical are ignored.
    hypothetical : Iterable[Course]
        The planned courses, with the grades the student hopes to receive.
        These are included whether or not they are flagged as hypothetical.
    scale : GradingScale
    weighted : bool

    Returns
    -------
    float

    """
    return calculate_gpa(
        _real(courses) + list(hypothetical), scale, weighted=weighted
    )
