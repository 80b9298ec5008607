from .course import Course, Courses
from .semester import Semester
from .options import GPAOptions
from .transcript import Transcript

__all__ = [
    "Course",
    "Courses",
    "Semester",
    "GPAOptions",
    "Transcript",
]
