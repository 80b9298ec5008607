"""Badges awarded for academic milestones."""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Achievement:
    """A badge that is earned when a condition on the record holds.

    Attributes
    ----------
    id : str
        A stable identifier, suitable for storing which badges were earned.
    name : str
    description : str
    condition : Callable[[float, int, int], bool]
        Called with the GPA, the total credit hours, and the number of courses.

    """

    id: str
    name: str
    description: str
    condition: typing.Callable[[float, int, int], bool] = dataclasses.field(
        repr=False, compare=False
    )

    def is_earned(self, gpa, total_credits, courses_count) -> bool:
        return bool(self.condition(gpa, total_credits, courses_count))


ACHIEVEMENTS = (
    Achievement(
        "first-calculation",
        "Getting Started",
        "Complete your first GPA calculation",
        lambda gpa, credits, count: count >= 1,
    ),
    Achievement(
        "deans-list",
        "Dean's List",
        "Achieve a GPA of 3.5 or higher",
        lambda gpa, credits, count: gpa >= 3.5,
    ),
    Achievement(
        "magna-cum-laude",
        "Magna Cum Laude",
        "Achieve a GPA of 3.7 or higher",
        lambda gpa, credits, count: gpa >= 3.7,
    ),
    Achievement(
        "summa-cum-laude",
        "Summa Cum Laude",
        "Achieve a GPA of 3.9 or higher",
        lambda gpa, credits, count: gpa >= 3.9,
    ),
    Achievement(
        "perfect-score",
        "Perfectionist",
        "Achieve a perfect 4.0 GPA",
        lambda gpa, credits, count: gpa == 4.0,
    ),
    Achievement(
        "course-master",
        "Course Master",
        "Track 10 or more courses",
        lambda gpa, credits, count: count >= 10,
    ),
    Achievement(
        "credit-accumulator",
        "Credit Accumulator",
        "Accumulate 30 or more credit hours",
        lambda gpa, credits, count: credits >= 30,
    ),
    Achievement(
        "consistent-performer",
        "Consistent Performer",
        "Maintain above 3.0 GPA with 15+ credits",
        lambda gpa, credits, count: gpa >= 3.0 and credits >= 15,
    ),
)
"""Every badge, in display order."""


def earned(gpa, total_credits, courses_count, achievements=ACHIEVEMENTS):
    """The achievements whose conditions hold, in order."""
    return [a for a in achievements if a.is_earned(gpa, total_credits, courses_count)]


def evaluate(transcript, achievements=ACHIEVEMENTS):
    """The achievements earned by a transcript's real courses.

    Parameters
    ----------
    transcript : Transcript
    achievements : Sequence[Achievement]
        Default: :attr:`ACHIEVEMENTS`.

    Returns
    -------
    list[Achievement]

    """
    return earned(
        transcript.gpa,
        transcript.total_credits,
        len(transcript.real_courses),
        achievements=achievements,
    )


def milestones(gpa: float, total_credits: int) -> str:
    """A short, comma-separated phrase describing standing milestones.

    Used when sharing progress with others. Returns "Steady academic progress"
    when no milestone has been reached.

    """
    reached = []
    if gpa >= 3.5:
        reached.append("Dean's List eligible")
    if gpa >= 3.7:
        reached.append("Magna Cum Laude track")
    if total_credits >= 30:
        reached.append("Sophomore standing")

    return ", ".join(reached) if reached else "Steady academic progress"
