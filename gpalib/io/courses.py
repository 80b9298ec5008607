"""Read and write course lists as CSV.

A course file has a header row and one row per course. The columns
`semester`, `year`, `name`, `grade` and `credits` are required; `id`, `code`
and `hypothetical` are optional. Semesters are formed from the distinct
(`semester`, `year`) pairs, in the order they first appear in the file.

"""

import pathlib

import pandas as pd

from ..core import Course, Semester

REQUIRED_COLUMNS = ["semester", "year", "name", "grade", "credits"]

_TRUTHY = {"true", "yes", "y", "1"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


def read(path) -> list[Semester]:
    """Read a course CSV into a list of semesters.

    Parameters
    ----------
    path : Union[pathlib.Path, str]
        Path to the CSV file.

    Returns
    -------
    list[Semester]
        The semesters, in order of first appearance. A semester's id is its
        label, e.g., "Fall 2024". Courses without an `id` column are given ids
        of the form "<semester label>/<row number>".

    Raises
    ------
    ValueError
        If a required column is missing, or a credits value is not a
        non-negative whole number.

    Notes
    -----
    Ids, codes and names are kept as text exactly as written, so "007" stays
    "007" and a course named "None" is not read as missing. Only empty cells
    count as missing.

    """
    # every column is read as text; "None", "NA" and the like are kept as-is
    table = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in REQUIRED_COLUMNS if c not in table.columns]
    if missing:
        raise ValueError(f"Course file is missing columns: {missing}.")

    table["grade"] = table["grade"].str.strip()

    if (table["credits"].str.strip() == "").any():
        raise ValueError("Every course must have a number of credits.")

    credits = pd.to_numeric(table["credits"].str.strip())
    if not (credits == credits.round()).all():
        raise ValueError("Credits must be whole numbers.")
    table["credits"] = credits.astype(int)

    courses = {}
    for number, row in table.iterrows():
        key = (row["semester"], int(row["year"]))
        label = f"{key[0]} {key[1]}"

        course_id = row.get("id", "")
        if not course_id:
            course_id = f"{label}/{number}"

        courses.setdefault(key, []).append(
            Course(
                id=course_id,
                name=row["name"],
                grade=row["grade"],
                credits=int(row["credits"]),
                hypothetical=_as_bool(row.get("hypothetical", "")),
                semester=key[0],
                year=key[1],
                code=row.get("code", "") or None,
            )
        )

    return [
        Semester(f"{name} {year}", name, year, semester_courses)
        for (name, year), semester_courses in courses.items()
    ]


def write(path, semesters):
    """Write semesters to a course CSV that :func:`read` can read back."""
    records = [
        {
            "semester": semester.name,
            "year": semester.year,
            "id": course.id,
            "code": course.code,
            "name": course.name,
            "grade": course.grade,
            "credits": course.credits,
            "hypothetical": course.hypothetical,
        }
        for semester in semesters
        for course in semester.courses
    ]
    columns = [
        "semester",
        "year",
        "id",
        "code",
        "name",
        "grade",
        "credits",
        "hypothetical",
    ]
    pd.DataFrame(records, columns=columns).to_csv(pathlib.Path(path), index=False)
