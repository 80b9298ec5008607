"""Academic progress reports."""

import datetime
import pathlib
import re
import textwrap

from .core import Transcript
from .gpa import calculate_gpa
from . import achievements
from . import statistics


def _tex_escape(text):
    conv = {
        "&": r"\&",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\^{}",
        "\\": r"\textbackslash{}",
        "<": r"\textless{}",
        ">": r"\textgreater{}",
    }
    regex = re.compile(
        "|".join(
            re.escape(str(key))
            for key in sorted(conv.keys(), key=lambda item: -len(item))
        )
    )
    return regex.sub(lambda match: conv[match.group()], str(text))


def _semester_gpa(transcript, semester):
    return calculate_gpa(
        semester.courses.real(), transcript.scale, weighted=transcript.weighted
    )


# report data ==========================================================================


def report_data(transcript: Transcript) -> dict:
    """Collect a transcript's figures into a JSON-serializable dictionary.

    This is the payload stored alongside a saved report, and is what the
    LaTeX report is built from.

    Returns
    -------
    dict
        With keys "summary", "semesters", "distribution" and "achievements".
        GPAs are rounded to two decimal places.

    """
    distribution = statistics.grade_distribution(transcript.courses)

    return {
        "summary": {
            "gpa": round(transcript.gpa, 2),
            "total_credits": int(transcript.total_credits),
            "total_semesters": len(transcript.semesters),
            "total_courses": len(transcript.real_courses),
            "scale": transcript.scale.name,
            "weighted": transcript.weighted,
        },
        "semesters": [
            {
                "id": semester.id,
                "name": semester.name,
                "year": semester.year,
                "gpa": round(_semester_gpa(transcript, semester), 2),
                "courses": [
                    {
                        "id": course.id,
                        "name": course.name,
                        "grade": course.grade,
                        "credits": course.credits,
                        "hypothetical": course.hypothetical,
                    }
                    for course in semester.courses
                ],
            }
            for semester in transcript.semesters
        ],
        "distribution": {
            str(grade): int(row["count"]) for grade, row in distribution.iterrows()
        },
        "achievements": [a.id for a in achievements.evaluate(transcript)],
    }


# latex ================================================================================


def _latex_report(transcript: Transcript, title, notes, generated_on):
    parts = []

    def _append(s):
        parts.append(textwrap.dedent(s))

    data = report_data(transcript)
    summary = data["summary"]

    _append(
        rf"""
        \begin{{center}}
            \textsc{{{_tex_escape(title)}}}\\[1em]
            Generated on {generated_on:%B %d, %Y}
        \end{{center}}
        \vspace{{2em}}

        \section*{{Academic Summary}}

        \begin{{itemize}}
            \item \textbf{{Current GPA}}: {summary['gpa']:.2f}
            \item \textbf{{Total Credits}}: {summary['total_credits']}
            \item \textbf{{Total Semesters}}: {summary['total_semesters']}
            \item \textbf{{Total Courses}}: {summary['total_courses']}
        \end{{itemize}}
    """
    )

    if data["semesters"]:
        _append(r"\section*{Course History}")

    for semester in data["semesters"]:
        _append(
            rf"""
            \subsection*{{{_tex_escape(semester['name'])} {semester['year']}}}

            \begin{{tabular}}{{lll}}
                \textbf{{Course}} & \textbf{{Grade}} & \textbf{{Credits}} \\
                \hline
        """
        )
        for course in semester["courses"]:
            grade = course["grade"] or "N/A"
            _append(
                rf"""
                {_tex_escape(course['name'][:40])} & {_tex_escape(grade)} & {course['credits']} \\
            """
            )
        _append(
            rf"""
            \end{{tabular}}

            \textbf{{Semester GPA}}: {semester['gpa']:.2f}
        """
        )

    if data["distribution"]:
        _append(
            r"""
            \section*{Performance Analytics}

            \begin{itemize}
        """
        )
        for grade, count in data["distribution"].items():
            _append(
                rf"""
                \item {_tex_escape(grade)}: {count} courses
            """
            )
        _append(r"\end{itemize}")

    if notes.strip():
        _append(
            rf"""
            \section*{{Notes}}

            {_tex_escape(notes)}
        """
        )

    return "\n".join(parts)


def generate_latex(
    transcript: Transcript,
    output_directory: pathlib.Path,
    title: str = "Academic Progress Report",
    notes: str = "",
    generated_on=None,
) -> pathlib.Path:
    """Generate a LaTeX progress report for a transcript.

    Creates one file, `main.tex`, in the output directory. Compiling it is left
    to the caller.

    Parameters
    ----------
    transcript : Transcript
        The record to report on.
    output_directory : Union[pathlib.Path, str]
        The directory where the report will be placed. Will be created if it
        does not already exist.
    title : str
        The title printed at the top of the report.
    notes : str
        Free text placed in a "Notes" section. Omitted if blank.
    generated_on : Optional[datetime.date]
        The date printed under the title. Default: today.

    Returns
    -------
    pathlib.Path
        The path of the written file.

    """
    output_directory = pathlib.Path(output_directory)

    if generated_on is None:
        generated_on = datetime.date.today()

    head = textwrap.dedent(
        r"""
        \documentclass{article}
        \usepackage[margin=1in]{geometry}
        \pagestyle{empty}
        \setlength{\parindent}{0em}
        \usepackage{enumitem}
        \begin{document}
    """
    )

    body = _latex_report(transcript, title, notes, generated_on)

    tail = textwrap.dedent(
        r"""
        \end{document}
    """
    )

    output_directory.mkdir(parents=True, exist_ok=True)
    path = output_directory / "main.tex"
    with path.open("w") as fileobj:
        fileobj.write(head + body + tail)

    return path
