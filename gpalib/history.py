"""Semester-by-semester and cumulative GPA."""

import pandas as pd

from .gpa import calculate_gpa, quality_points, graded_credits
from .scales import GradingScale

HISTORY_COLUMNS = [
    "gpa",
    "cumulative gpa",
    "credits",
    "cumulative credits",
    "quality points",
    "cumulative quality points",
]


def semester_history(semesters, scale: GradingScale, weighted: bool = True):
    """Compute each semester's GPA along with the running cumulative GPA.

    Semesters are processed in the order given. The cumulative GPA reported for
    a semester is the GPA of every real course in that semester and all of the
    semesters before it, so the last row's cumulative GPA is the overall GPA.
    Hypothetical courses are left out everywhere.

    Parameters
    ----------
    semesters : Sequence[Semester]
        The semesters, in chronological order.
    scale : GradingScale
        The scale used to convert grades to quality points.
    weighted : bool
        Whether GPAs are weighted by credit hours. Default: `True`.

    Returns
    -------
    pd.DataFrame
        A table with one row per semester, indexed by the semester's label, and
        the columns "gpa", "cumulative gpa", "credits", "cumulative credits",
        "quality points" and "cumulative quality points". Credit columns count
        only courses whose grade is on the scale.

    """
    semesters = list(semesters)

    rows = []
    seen = []
    for semester in semesters:
        courses = [c for c in semester.courses if not c.hypothetical]
        seen.extend(courses)
        rows.append(
            {
                "gpa": calculate_gpa(courses, scale, weighted=weighted),
                "cumulative gpa": calculate_gpa(seen, scale, weighted=weighted),
                "credits": graded_credits(courses, scale),
                "quality points": quality_points(courses, scale),
            }
        )

    table = pd.DataFrame(
        rows,
        index=pd.Index([s.label for s in semesters], name="semester"),
        columns=["gpa", "cumulative gpa", "credits", "quality points"],
    )
    table["cumulative credits"] = table["credits"].cumsum()
    table["cumulative quality points"] = table["quality points"].cumsum()

    dtypes = {
        "gpa": float,
        "cumulative gpa": float,
        "credits": int,
        "cumulative credits": int,
        "quality points": float,
        "cumulative quality points": float,
    }
    return table[HISTORY_COLUMNS].astype(dtypes)
