"""Summary statistics for reporting."""

import typing

import numpy as np
import pandas as pd

from .scales import GradingScale


def grade_distribution(courses, scale: typing.Optional[GradingScale] = None):
    """Counts how often each grade was received.

    Only real (non-hypothetical) courses with a grade entered are counted.

    Parameters
    ----------
    courses : Iterable[Course]
        The courses to tally.
    scale : Optional[GradingScale]
        If provided, the table is indexed by the scale's labels in scale order,
        grades that were never received are included with a count of zero, and
        grades that are not on the scale are left out. If not provided, the
        table contains the received grades in order of first appearance.

    Returns
    -------
    pd.DataFrame
        A table indexed by grade with columns "count" and "percentage". The
        percentage is relative to the number of graded courses that were
        counted, from 0 to 100, rounded to one decimal place. If no graded
        course was counted, every percentage is 0; without a scale the table
        is then empty.

    """
    grades = [c.grade for c in courses if c.is_graded and not c.hypothetical]
    if scale is not None:
        grades = [g for g in grades if g in scale]
        labels = list(scale)
    else:
        labels = list(dict.fromkeys(grades))

    counts = pd.Series(grades, dtype=object).value_counts().reindex(labels)
    counts = counts.fillna(0).astype(int)

    total = counts.sum()
    if total > 0:
        percentage = (counts / total * 100).round(1)
    else:
        percentage = pd.Series(0.0, index=counts.index)

    table = pd.DataFrame({"count": counts, "percentage": percentage.astype(float)})
    table.index.name = "grade"
    return table


def _nonzero_gpas(history: pd.DataFrame) -> pd.Series:
    """Semester GPAs, leaving out semesters that had no graded courses."""
    gpas = history["gpa"]
    return gpas[gpas > 0]


def trend(history: pd.DataFrame) -> str:
    """Whether the most recent semester GPA went up or down.

    Compares the last two semesters with a nonzero GPA.

    Parameters
    ----------
    history : pd.DataFrame
        A table as produced by :func:`gpalib.history.semester_history`.

    Returns
    -------
    str
        "up", "down", or "stable". Fewer than two graded semesters is "stable".

    """
    gpas = _nonzero_gpas(history)
    if len(gpas) < 2:
        return "stable"

    previous, latest = gpas.iloc[-2], gpas.iloc[-1]
    if np.isclose(latest, previous):
        return "stable"
    return "up" if latest > previous else "down"


def improvement(history: pd.DataFrame, window: int = 3) -> float:
    """Change in semester GPA across the most recent semesters.

    The GPA of the last semester minus that of the first semester in the
    trailing `window`. Zero if there are fewer than two semesters.

    """
    recent = history["gpa"].iloc[-window:]
    if len(recent) < 2:
        return 0.0
    return float(recent.iloc[-1] - recent.iloc[0])


def semester_summary(history: pd.DataFrame) -> pd.Series:
    """The highest, lowest and average semester GPA.

    Semesters without any graded course (GPA of zero) are ignored. If no
    semester remains, every entry is zero.

    Returns
    -------
    pd.Series
        With entries "highest gpa", "lowest gpa" and "average gpa".

    """
    gpas = _nonzero_gpas(history)
    if gpas.empty:
        values = [0.0, 0.0, 0.0]
    else:
        values = [gpas.max(), gpas.min(), gpas.mean()]

    return pd.Series(
        values, index=["highest gpa", "lowest gpa", "average gpa"], dtype=float
    )
