import pandas as pd
import pytest

import gpalib
from gpalib import Course, Semester, FOUR_POINT_SCALE


def _courses(*grades, hypothetical=False):
    return [
        Course(f"c{i}", f"course {i}", grade, 3, hypothetical=hypothetical)
        for i, grade in enumerate(grades)
    ]


def _history(*gpas):
    return pd.DataFrame(
        {"gpa": list(gpas)}, index=[f"term {i}" for i in range(len(gpas))]
    )


# grade_distribution -------------------------------------------------------------------


def test_distribution():
    # given
    courses = _courses("A", "B", "A", "A", "", "C") + _courses("F", hypothetical=True)

    # when
    distribution = gpalib.statistics.grade_distribution(courses)

    # then
    assert list(distribution.index) == ["A", "B", "C"]
    assert list(distribution["count"]) == [3, 1, 1]
    assert list(distribution["percentage"]) == [60.0, 20.0, 20.0]


def test_distribution_percentages_are_rounded_to_one_decimal():
    # given
    courses = _courses("A", "B", "B")

    # when
    distribution = gpalib.statistics.grade_distribution(courses)

    # then
    assert distribution.loc["A", "percentage"] == 33.3
    assert distribution.loc["B", "percentage"] == 66.7


def test_distribution_with_scale_includes_every_label_in_order():
    # given
    courses = _courses("B", "A", "not a grade")

    # when
    distribution = gpalib.statistics.grade_distribution(courses, FOUR_POINT_SCALE)

    # then
    assert list(distribution.index) == FOUR_POINT_SCALE.grade_options()
    assert distribution.loc["A", "count"] == 1
    assert distribution.loc["B", "count"] == 1
    assert distribution.loc["F", "count"] == 0
    assert distribution.loc["A", "percentage"] == 50.0
    assert distribution["count"].sum() == 2


def test_distribution_of_no_graded_courses_is_empty():
    # given
    courses = _courses("", "")

    # when
    distribution = gpalib.statistics.grade_distribution(courses)

    # then
    assert len(distribution) == 0
    assert list(distribution.columns) == ["count", "percentage"]


def test_distribution_with_scale_of_no_graded_courses_has_zero_percentages():
    # when
    distribution = gpalib.statistics.grade_distribution([], FOUR_POINT_SCALE)

    # then
    assert (distribution["count"] == 0).all()
    assert (distribution["percentage"] == 0).all()


# trend --------------------------------------------------------------------------------


def test_trend_up_down_and_stable():
    assert gpalib.statistics.trend(_history(3.0, 3.5)) == "up"
    assert gpalib.statistics.trend(_history(3.5, 3.0)) == "down"
    assert gpalib.statistics.trend(_history(3.5, 3.5)) == "stable"


def test_trend_ignores_semesters_without_grades():
    assert gpalib.statistics.trend(_history(3.0, 3.5, 0.0)) == "up"


def test_trend_with_fewer_than_two_semesters_is_stable():
    assert gpalib.statistics.trend(_history()) == "stable"
    assert gpalib.statistics.trend(_history(3.0)) == "stable"


def test_trend_of_transcript():
    # given
    transcript = gpalib.Transcript(
        [
            Semester("s1", "Fall", 2023, _courses("B")),
            Semester("s2", "Spring", 2024, _courses("A")),
        ]
    )

    # when
    trend = gpalib.statistics.trend(transcript.history)

    # then
    assert trend == "up"


# improvement --------------------------------------------------------------------------


def test_improvement_uses_last_three_semesters():
    # when
    change = gpalib.statistics.improvement(_history(2.0, 3.0, 2.5, 3.5))

    # then
    assert change == pytest.approx(0.5)


def test_improvement_with_one_semester_is_zero():
    assert gpalib.statistics.improvement(_history(3.0)) == 0


# semester_summary ---------------------------------------------------------------------


def test_semester_summary():
    # when
    summary = gpalib.statistics.semester_summary(_history(3.0, 0.0, 3.6, 2.4))

    # then
    assert summary["highest gpa"] == pytest.approx(3.6)
    assert summary["lowest gpa"] == pytest.approx(2.4)
    assert summary["average gpa"] == pytest.approx(3.0)


def test_semester_summary_of_no_graded_semesters_is_zero():
    # when
    summary = gpalib.statistics.semester_summary(_history(0.0))

    # then
    assert (summary == 0).all()
