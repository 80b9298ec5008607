"""Convert between datastore rows and gpalib objects.

The datastore returns records as dictionaries ("rows") whose keys follow its
own column names: `is_hypothetical` rather than `hypothetical`, nullable
grades, and so on. The functions here translate those rows into
:class:`Course` and :class:`Semester` objects, and translate computed figures
back into rows ready for insertion. No connection to the datastore is made.

"""

import collections
import logging
import typing

from ..core import Course, Semester, Transcript

logger = logging.getLogger(__name__)

Row = typing.Mapping[str, typing.Any]


def course_from_row(row: Row, semester: typing.Optional[Row] = None) -> Course:
    """Build a :class:`Course` from a row of the `courses` table.

    Parameters
    ----------
    row : Mapping
        Must have "id", "name" and "credits". A missing or null "grade" means
        the course has not been graded. "is_hypothetical" and "code" are
        optional.
    semester : Optional[Mapping]
        The row of the semester the course belongs to. If given, its "name"
        and "year" are recorded on the course.

    Raises
    ------
    KeyError
        If a required column is missing.

    """
    return Course(
        id=row["id"],
        name=row["name"],
        grade=row.get("grade") or "",
        credits=int(row["credits"]),
        hypothetical=bool(row.get("is_hypothetical", False)),
        semester=semester["name"] if semester is not None else None,
        year=semester["year"] if semester is not None else None,
        code=row.get("code"),
    )


def course_to_row(course: Course, user_id, semester_id=None) -> dict:
    """The row to insert into the `courses` table for a course.

    The course's id is left out, as it is assigned by the datastore.

    """
    return {
        "user_id": user_id,
        "semester_id": semester_id,
        "name": course.name,
        "code": course.code,
        "grade": course.grade or None,
        "credits": course.credits,
        "is_hypothetical": course.hypothetical,
    }


def _chronological(semester_rows):
    # a stable sort, so rows that tie keep the datastore's order
    return sorted(
        semester_rows, key=lambda r: (r["year"], r.get("start_date") or "")
    )


def semesters_from_rows(
    semester_rows: typing.Iterable[Row],
    course_rows: typing.Optional[typing.Iterable[Row]] = None,
    sort: bool = True,
) -> list[Semester]:
    """Build :class:`Semester` objects from rows of the `semesters` table.

    Courses can be supplied in either of the two shapes the datastore returns:
    nested under each semester row as a "courses" list, or as a separate flat
    list of course rows that refer to their semester by "semester_id".

    Parameters
    ----------
    semester_rows : Iterable[Mapping]
        Rows with "id", "name" and "year", and optionally "start_date" and a
        nested "courses" list.
    course_rows : Optional[Iterable[Mapping]]
        Flat course rows. Rows whose "semester_id" matches no semester are
        skipped.
    sort : bool
        If `True` (the default), semesters are put in chronological order: by
        year, then by start date when one is given. The datastore's own order
        is newest-first, which is the wrong way around for cumulative GPAs.

    Returns
    -------
    list[Semester]

    """
    semester_rows = list(semester_rows)
    if sort:
        semester_rows = _chronological(semester_rows)

    by_semester = collections.defaultdict(list)
    if course_rows is not None:
        known = {r["id"] for r in semester_rows}
        for row in course_rows:
            if row.get("semester_id") not in known:
                logger.debug(
                    "Skipping course row %r: it belongs to no known semester.",
                    row.get("id"),
                )
                continue
            by_semester[row["semester_id"]].append(row)

    semesters = []
    for row in semester_rows:
        rows = list(row.get("courses") or []) + by_semester[row["id"]]
        courses = [course_from_row(c, semester=row) for c in rows]
        semesters.append(Semester(row["id"], row["name"], row["year"], courses))

    return semesters


def gpa_record(
    transcript: Transcript, semester: typing.Optional[Semester] = None, user_id=None
) -> dict:
    """The row to insert into the `gpa_records` table.

    Parameters
    ----------
    transcript : Transcript
        The record the figures are computed from.
    semester : Optional[Semester]
        If given, the record is a snapshot as of the end of this semester: the
        semester's own GPA, plus the cumulative figures through it. Otherwise,
        the cumulative figures over the whole transcript are used and
        "semester_gpa" is null.
    user_id
        Included in the row if not `None`.

    Raises
    ------
    KeyError
        If `semester` is not part of the transcript.

    """
    if semester is None:
        record = {
            "semester_id": None,
            "semester_gpa": None,
            "cumulative_gpa": transcript.gpa,
            "total_credits": int(transcript.total_credits),
            "total_quality_points": float(transcript.quality_points),
        }
    else:
        position = next(
            (i for i, s in enumerate(transcript.semesters) if s.id == semester.id),
            None,
        )
        if position is None:
            raise KeyError(f'Semester "{semester.id}" is not in the transcript.')

        row = transcript.history.iloc[position]
        record = {
            "semester_id": semester.id,
            "semester_gpa": float(row["gpa"]),
            "cumulative_gpa": float(row["cumulative gpa"]),
            "total_credits": int(row["cumulative credits"]),
            "total_quality_points": float(row["cumulative quality points"]),
        }

    if user_id is not None:
        record = {"user_id": user_id, **record}

    return record
