import bokeh.io
import bokeh.models
import bokeh.plotting

from .core import Transcript
from .statistics import grade_distribution as _grade_distribution
from ._util import in_jupyter_notebook

# gpa_trend ----------------------------------------------------------------------------


def _semester_factors(transcript: Transcript) -> list:
    """Axis factors for the semesters; bokeh requires them to be distinct.

    A label shared by more than one semester is suffixed with the semester's id.

    """
    labels = [s.label for s in transcript.semesters]
    return [
        f"{s.label} ({s.id})" if labels.count(s.label) > 1 else s.label
        for s in transcript.semesters
    ]


def _gpa_trend_source(transcript: Transcript) -> bokeh.models.ColumnDataSource:
    history = transcript.history.reset_index()
    return bokeh.models.ColumnDataSource(
        {
            "semester": _semester_factors(transcript),
            "gpa": list(history["gpa"]),
            "cumulative_gpa": list(history["cumulative gpa"]),
            "credits": list(history["credits"]),
        }
    )


def _plot_gpa_trend_hover_tool(fig, renderers):
    fig.hover.tooltips = [
        ("semester", "@semester"),
        ("semester gpa", "@gpa{0.00}"),
        ("cumulative gpa", "@cumulative_gpa{0.00}"),
        ("credits", "@credits"),
    ]
    fig.hover.renderers = renderers


def gpa_trend(transcript: Transcript, show: bool = True):
    """Plot each semester's GPA alongside the cumulative GPA.

    Parameters
    ----------
    transcript : Transcript
    show : bool
        Whether to display the plot. Default: `True`.

    Returns
    -------
    bokeh.plotting.figure

    """
    if show and in_jupyter_notebook():
        bokeh.io.output_notebook()

    source = _gpa_trend_source(transcript)
    ceiling = max(transcript.scale.values())

    fig = bokeh.plotting.figure(
        title="GPA Trend",
        width=800,
        height=400,
        x_range=list(source.data["semester"]),
        y_range=[0, ceiling * 1.05],
        tools="hover,pan,box_zoom,save,reset,help",
        y_axis_label="GPA",
    )

    semester = fig.line("semester", "gpa", source=source, legend_label="Semester")
    fig.scatter("semester", "gpa", source=source, size=8)
    cumulative = fig.line(
        "semester",
        "cumulative_gpa",
        source=source,
        line_dash="dashed",
        color="black",
        legend_label="Cumulative",
    )

    _plot_gpa_trend_hover_tool(fig, [semester, cumulative])
    fig.legend.location = "bottom_right"
    fig.grid.visible = False

    if show:
        bokeh.plotting.show(fig)

    return fig


# grade_distribution -------------------------------------------------------------------


def grade_distribution(transcript: Transcript, show: bool = True):
    """Plot how often each grade on the transcript's scale was received.

    Parameters
    ----------
    transcript : Transcript
    show : bool
        Whether to display the plot. Default: `True`.

    Returns
    -------
    bokeh.plotting.figure

    """
    if show and in_jupyter_notebook():
        bokeh.io.output_notebook()

    distribution = _grade_distribution(transcript.courses, transcript.scale)
    source = bokeh.models.ColumnDataSource(
        {
            "grade": list(distribution.index),
            "count": list(distribution["count"]),
            "percentage": list(distribution["percentage"]),
        }
    )

    # give a little headroom above the tallest bar
    y_max = max(1, distribution["count"].max()) * 1.1

    fig = bokeh.plotting.figure(
        title="Grade Distribution",
        width=800,
        height=400,
        x_range=list(distribution.index),
        y_range=[0, y_max],
        tools="hover,save,reset",
        y_axis_label="Courses",
    )
    fig.vbar(x="grade", top="count", width=0.8, source=source, fill_alpha=0.7)
    fig.hover.tooltips = [
        ("grade", "@grade"),
        ("count", "@count"),
        ("percentage", "@percentage{0.0}%"),
    ]
    fig.grid.visible = False

    if show:
        bokeh.plotting.show(fig)

    return fig
