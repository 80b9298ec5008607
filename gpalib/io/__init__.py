"""Reading records from, and preparing records for, external sources."""

from . import courses
from . import rows
from . import scales

__all__ = ["courses", "rows", "scales"]
