import itertools
import logging

import pytest

import gpalib
from gpalib import Course, FOUR_POINT_SCALE, PERCENTAGE_SCALE


def _courses(*grades_and_credits, hypothetical=False):
    return [
        Course(f"c{i}", f"course {i}", grade, credits, hypothetical=hypothetical)
        for i, (grade, credits) in enumerate(grades_and_credits)
    ]


# calculate_gpa ------------------------------------------------------------------------


def test_calculate_gpa_weighted_on_example():
    # given
    courses = _courses(("A", 3), ("B", 3))

    # when
    gpa = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)

    # then
    assert gpa == pytest.approx(3.5)


def test_calculate_gpa_unweighted_on_example():
    # given
    courses = _courses(("A", 3), ("B", 3))

    # when
    gpa = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert gpa == pytest.approx(3.5)


def test_calculate_gpa_weighted_and_unweighted_differ_with_unequal_credits():
    # given
    courses = _courses(("A", 3), ("B", 3), ("F", 1))

    # when
    weighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)
    unweighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert weighted == pytest.approx(21 / 7)
    assert round(weighted, 2) == 3.00
    assert unweighted == pytest.approx(7 / 3)
    assert round(unweighted, 2) == 2.33


def test_calculate_gpa_is_weighted_by_default():
    # given
    courses = _courses(("A", 4), ("C", 1))

    # when
    gpa = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE)

    # then
    assert gpa == pytest.approx((16 + 2) / 5)


def test_calculate_gpa_of_empty_list_is_zero():
    assert gpalib.calculate_gpa([], FOUR_POINT_SCALE) == 0
    assert gpalib.calculate_gpa([], FOUR_POINT_SCALE, weighted=False) == 0


def test_calculate_gpa_is_zero_when_no_grade_is_on_the_scale():
    # given
    courses = _courses(("", 3), ("Z", 4), ("97-100", 3))

    # when
    weighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)
    unweighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert weighted == 0
    assert unweighted == 0


def test_calculate_gpa_skips_ungraded_courses_rather_than_counting_them_as_zero():
    # given
    courses = _courses(("A", 3), ("", 4), ("not a grade", 3))

    # when
    weighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)
    unweighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert weighted == 4
    assert unweighted == 4


def test_calculate_gpa_is_zero_when_graded_courses_have_no_credits():
    # given
    courses = _courses(("A", 0), ("B", 0))

    # when
    weighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)
    unweighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert weighted == 0
    assert unweighted == pytest.approx(3.5)


def test_calculate_gpa_weighted_equals_unweighted_when_all_credits_are_one():
    # given
    courses = _courses(("A", 1), ("B-", 1), ("C+", 1), ("D", 1), ("", 1))

    # when
    weighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=True)
    unweighted = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE, weighted=False)

    # then
    assert weighted == pytest.approx(unweighted)


def test_calculate_gpa_does_not_depend_on_order():
    # given
    courses = _courses(("A", 3), ("B+", 4), ("F", 1), ("C-", 2))
    expected = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE)

    # when / then
    for permutation in itertools.permutations(courses):
        assert gpalib.calculate_gpa(permutation, FOUR_POINT_SCALE) == pytest.approx(
            expected
        )


def test_calculate_gpa_with_percentage_scale():
    # given
    courses = _courses(("97-100", 3), ("83-86", 3), ("A", 3))

    # when
    gpa = gpalib.calculate_gpa(courses, PERCENTAGE_SCALE)

    # then
    # "A" is not on the percentage scale, so it is skipped
    assert gpa == pytest.approx(3.5)


def test_calculate_gpa_does_not_round():
    # given
    courses = _courses(("A", 1), ("A", 1), ("B", 1))

    # when
    gpa = gpalib.calculate_gpa(courses, FOUR_POINT_SCALE)

    # then
    assert gpa == pytest.approx(11 / 3)
    assert gpa != round(gpa, 2)


def test_calculate_gpa_logs_skipped_courses(caplog):
    # given
    courses = _courses(("A", 3), ("Q", 3))

    # when
    with caplog.at_level(logging.DEBUG, logger="gpalib.gpa"):
        gpalib.calculate_gpa(courses, FOUR_POINT_SCALE)

    # then
    assert "course 1" in caplog.text


# quality_points / graded_credits ------------------------------------------------------


def test_quality_points_and_graded_credits_skip_unknown_grades():
    # given
    courses = _courses(("A", 3), ("B", 4), ("", 5))

    # when
    points = gpalib.quality_points(courses, FOUR_POINT_SCALE)
    credits = gpalib.graded_credits(courses, FOUR_POINT_SCALE)

    # then
    assert points == pytest.approx(12 + 12)
    assert credits == 7


# cumulative_gpa -----------------------------------------------------------------------


def test_cumulative_gpa_leaves_out_hypothetical_courses():
    # given
    fall = gpalib.Semester("s1", "Fall", 2023, _courses(("A", 3), ("B", 3)))
    spring = gpalib.Semester(
        "s2",
        "Spring",
        2024,
        _courses(("C", 3)) + _courses(("F", 3), hypothetical=True),
    )

    # when
    gpa = gpalib.cumulative_gpa([fall, spring], FOUR_POINT_SCALE)

    # then
    assert gpa == pytest.approx((12 + 9 + 6) / 9)


def test_cumulative_gpa_of_no_semesters_is_zero():
    assert gpalib.cumulative_gpa([], FOUR_POINT_SCALE) == 0


# what_if_gpa --------------------------------------------------------------------------


def test_what_if_gpa_includes_hypothetical_courses():
    # given
    taken = _courses(("B", 3), ("B", 3))
    planned = _courses(("A", 6), hypothetical=True)

    # when
    gpa = gpalib.what_if_gpa(taken, planned, FOUR_POINT_SCALE)

    # then
    assert gpa == pytest.approx((18 + 24) / 12)


def test_what_if_gpa_ignores_hypothetical_courses_among_taken_courses():
    # given
    taken = _courses(("B", 3)) + _courses(("F", 3), hypothetical=True)
    planned = _courses(("A", 3), hypothetical=True)

    # when
    gpa = gpalib.what_if_gpa(taken, planned, FOUR_POINT_SCALE)

    # then
    assert gpa == pytest.approx(3.5)
