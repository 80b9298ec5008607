"""Composing progress messages to share with parents and advisors.

Only the text is produced here; delivering it is up to the caller.

"""

import dataclasses
import re
import textwrap
import typing

from .achievements import milestones
from .gpa import calculate_gpa
from ._util import format_gpa

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclasses.dataclass(frozen=True)
class Template:
    subject: str
    body: str


@dataclasses.dataclass(frozen=True)
class Message:
    subject: str
    body: str


TEMPLATES = {
    "parent": Template(
        subject="Academic Progress Update - {semester}",
        body=textwrap.dedent(
            """\
            Dear Parents,

            I wanted to share my academic progress update with you.

            Current GPA: {gpa}
            Total Credits Completed: {credits}
            Recent Achievements: {achievements}

            {custom_message}

            This report was generated using the GPA tracker.

            Best regards,
            {student_name}"""
        ),
    ),
    "advisor": Template(
        subject="Academic Progress Report - {student_name}",
        body=textwrap.dedent(
            """\
            Dear Academic Advisor,

            Please find my current academic progress summary below:

            Current Cumulative GPA: {gpa}
            Total Credits: {credits}
            Semesters Completed: {semesters}

            {recent_performance}

            {custom_message}

            I would appreciate the opportunity to discuss my academic goals and any recommendations you might have.

            Sincerely,
            {student_name}"""
        ),
    ),
    "custom": Template(
        subject="Academic Progress Update",
        body=textwrap.dedent(
            """\
            Hello,

            I wanted to share my academic progress with you.

            Current GPA: {gpa}
            Total Credits: {credits}

            {custom_message}

            Best regards"""
        ),
    ),
}


def is_valid_email(address: str) -> bool:
    """A loose check that a string looks like an email address."""
    return bool(_EMAIL_PATTERN.match(address))


def validate_recipients(addresses: typing.Iterable[str]) -> list[str]:
    """Check a list of recipients, dropping duplicates.

    Returns
    -------
    list[str]
        The addresses, stripped of whitespace, in order, without duplicates.

    Raises
    ------
    ValueError
        If there are no recipients, or if any address is invalid.

    """
    recipients = list(dict.fromkeys(a.strip() for a in addresses))

    if not recipients:
        raise ValueError("At least one recipient is required.")

    invalid = [a for a in recipients if not is_valid_email(a)]
    if invalid:
        raise ValueError(f"These addresses are invalid: {invalid}.")

    return recipients


def _context(transcript, custom_message, student_name):
    latest = transcript.semesters[-1] if transcript.semesters else None

    if latest is not None:
        latest_gpa = calculate_gpa(
            latest.courses.real(), transcript.scale, weighted=transcript.weighted
        )
        semester = latest.label
        recent_performance = (
            f"Recent Semester: {latest.label} - GPA: {format_gpa(latest_gpa)}"
        )
    else:
        semester = "Current"
        recent_performance = ""

    gpa = transcript.gpa
    credits = transcript.total_credits

    return {
        "gpa": format_gpa(gpa),
        "credits": str(credits),
        "semesters": str(len(transcript.semesters)),
        "semester": semester,
        "achievements": milestones(gpa, credits),
        "recent_performance": recent_performance,
        "custom_message": custom_message,
        "student_name": student_name,
    }


def render(
    template: str, transcript, custom_message: str = "", student_name: str = "Student"
) -> Message:
    """Fill in a message template with a transcript's figures.

    Parameters
    ----------
    template : str
        One of the keys of :attr:`TEMPLATES`: "parent", "advisor" or "custom".
    transcript : Transcript
        The record to summarize.
    custom_message : str
        Free text inserted into the body. Default: empty.
    student_name : str
        The name used to sign the message. Default: "Student".

    Returns
    -------
    Message

    Raises
    ------
    KeyError
        If the template is unknown.

    """
    try:
        chosen = TEMPLATES[template]
    except KeyError:
        raise KeyError(
            f"Unknown template {template!r}; expected one of {list(TEMPLATES)}."
        ) from None

    context = _context(transcript, custom_message, student_name)
    return Message(
        subject=chosen.subject.format_map(context),
        body=chosen.body.format_map(context),
    )
