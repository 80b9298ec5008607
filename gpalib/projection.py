"""Projecting the grades needed to reach a target GPA."""

import dataclasses
import logging
import typing

from .scales import MAX_GRADE_POINT

logger = logging.getLogger(__name__)


class ProjectionError(ValueError):
    """Raised when the required average cannot be computed.

    This happens when the target has not been met yet and no future credits
    are planned: there is no number of points per credit that would help.

    """


@dataclasses.dataclass(frozen=True)
class Projection:
    """The outcome of :func:`project`.

    Attributes
    ----------
    current_gpa : float
    target_gpa : float
    current_credits : int
    planned_credits : int
        The inputs, as given.
    already_met : bool
        Whether the current GPA is at or above the target.
    feasible : bool
        Whether the target can be reached within the planned credits without
        exceeding the highest possible grade point. `True` when already met.
    required_average : Optional[float]
        The average grade point needed over the planned credits. `None` when
        the target has already been met. May exceed the ceiling, in which case
        `feasible` is `False`.

    """

    current_gpa: float
    target_gpa: float
    current_credits: int
    planned_credits: int
    already_met: bool
    feasible: bool
    required_average: typing.Optional[float] = None


def project(
    current_gpa: float,
    target_gpa: float,
    current_credits: int,
    planned_credits: int,
    ceiling: float = MAX_GRADE_POINT,
) -> Projection:
    """Compute the average grade point needed to reach a target GPA.

    The required average over the planned credits is::

        (target * (current_credits + planned_credits) - current * current_credits)
        / planned_credits

    Parameters
    ----------
    current_gpa : float
        The GPA so far.
    target_gpa : float
        The GPA the student would like to reach.
    current_credits : int
        The credit hours behind the current GPA.
    planned_credits : int
        The credit hours the student plans to take.
    ceiling : float
        The highest grade point achievable. A required average above this is
        infeasible. Default: :attr:`gpalib.scales.MAX_GRADE_POINT`.

    Returns
    -------
    Projection

    Raises
    ------
    ProjectionError
        If the target has not been met and `planned_credits` is not positive.

    """
    inputs = dict(
        current_gpa=current_gpa,
        target_gpa=target_gpa,
        current_credits=current_credits,
        planned_credits=planned_credits,
    )

    if current_gpa >= target_gpa:
        return Projection(**inputs, already_met=True, feasible=True)

    if planned_credits <= 0:
        raise ProjectionError(
            f"Cannot reach a {target_gpa:.2f} GPA from {current_gpa:.2f} "
            f"with {planned_credits} planned credits; plan at least one credit."
        )

    needed_points = target_gpa * (current_credits + planned_credits)
    needed_points -= current_gpa * current_credits
    required_average = needed_points / planned_credits

    feasible = required_average <= ceiling
    if not feasible:
        logger.debug(
            "Target %.2f needs an average of %.2f over %d credits, above %.2f.",
            target_gpa,
            required_average,
            planned_credits,
            ceiling,
        )

    return Projection(
        **inputs,
        already_met=False,
        feasible=feasible,
        required_average=required_average,
    )


def suggest(
    current_gpa: float,
    target_gpa: float,
    current_credits: int,
    planned_credits: int,
    ceiling: float = MAX_GRADE_POINT,
) -> str:
    """Describe, in a sentence or two, what it takes to reach a target GPA.

    Accepts the same arguments as :func:`project`, and raises the same
    :class:`ProjectionError`.

    Example
    -------

    >>> suggest(3.0, 3.2, 30, 15)
    'To reach a 3.20 GPA, you need an average of 3.60 in your next 15 credits.'

    """
    p = project(current_gpa, target_gpa, current_credits, planned_credits, ceiling)

    if p.already_met:
        return f"Great! You've already achieved your target GPA of {target_gpa:.2f}."

    if not p.feasible:
        return (
            f"To reach a {target_gpa:.2f} GPA, you would need an average of "
            f"{p.required_average:.2f} in your next {planned_credits} credits, "
            "which is above the maximum. Consider taking more credits or "
            "adjusting your target."
        )

    return (
        f"To reach a {target_gpa:.2f} GPA, you need an average of "
        f"{p.required_average:.2f} in your next {planned_credits} credits."
    )
