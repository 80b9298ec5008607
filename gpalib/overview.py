import html

from IPython.display import HTML as _HTML
from IPython.display import display as _display

from . import achievements as _achievements
from . import plot as _plot
from . import statistics as _statistics
from .core import Transcript
from ._util import format_gpa


def _item(desc, msg) -> str:
    """Returns HTML for an item with a description and a message."""
    return f"<p><b>{desc}:</b> {msg}"


def _display_html(html: str):
    """Display HTML in a Jupyter notebook."""
    _display(_HTML(html))


def _summary(transcript: Transcript):
    _display_html("<h1>Academic Overview</h1>")
    _display_html(_item("Cumulative GPA", format_gpa(transcript.gpa)))
    _display_html(_item("Total credits", transcript.total_credits))
    _display_html(_item("Courses", len(transcript.real_courses)))
    _display_html(_item("Trend", _statistics.trend(transcript.history)))

    if transcript.hypothetical_courses:
        _display_html(_item("What-if GPA", format_gpa(transcript.what_if_gpa)))


def _semesters(transcript: Transcript):
    _display_html("<h2>Semesters</h2>")
    _display_html(transcript.history.to_html(float_format=format_gpa))
    _plot.gpa_trend(transcript)

    _display_html("<h2>Grade Distribution</h2>")
    distribution = _statistics.grade_distribution(transcript.courses, transcript.scale)
    _display_html(distribution.T.to_html())
    _plot.grade_distribution(transcript)


def _earned(transcript: Transcript):
    _display_html("<h2>Achievements</h2>")
    earned = _achievements.evaluate(transcript)
    if not earned:
        _display_html("<p>None yet.</p>")
        return

    _display_html("<ul>")
    for achievement in earned:
        name = html.escape(achievement.name)
        description = html.escape(achievement.description)
        _display_html(f"<li><b>{name}</b>: {description}</li>")
    _display_html("</ul>")


def overview(transcript: Transcript):
    """Display a nicely-formatted overview of a transcript.

    Only available inside of a jupyter notebook. Can be accessed from the
    top-level, too, as ``gpalib.overview()``.

    """
    _summary(transcript)
    _semesters(transcript)
    _earned(transcript)
