"""A package for tracking grade-point averages across semesters."""

from .core import (
    Course,
    Courses,
    Semester,
    GPAOptions,
    Transcript,
)

from .scales import (
    MAX_GRADE_POINT,
    FOUR_POINT_SCALE,
    PERCENTAGE_SCALE,
    GradingScale,
    ScaleRegistry,
    default_registry,
)

from .gpa import (
    calculate_gpa,
    cumulative_gpa,
    what_if_gpa,
    quality_points,
    graded_credits,
)

from .history import semester_history

from .projection import Projection, ProjectionError, project, suggest

from . import achievements
from . import io
from . import plot
from . import reports
from . import sharing
from . import statistics

from . import _util

if _util.in_jupyter_notebook():
    from .overview import overview  # type: ignore

__all__ = [
    "Course",
    "Courses",
    "Semester",
    "GPAOptions",
    "Transcript",
    "MAX_GRADE_POINT",
    "FOUR_POINT_SCALE",
    "PERCENTAGE_SCALE",
    "GradingScale",
    "ScaleRegistry",
    "default_registry",
    "calculate_gpa",
    "cumulative_gpa",
    "what_if_gpa",
    "quality_points",
    "graded_credits",
    "semester_history",
    "Projection",
    "ProjectionError",
    "project",
    "suggest",
    "achievements",
    "io",
    "reports",
    "sharing",
    "plot",
    "statistics",
]
