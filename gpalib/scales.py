"""Mapping grade labels to quality points."""

import collections
import collections.abc
import numbers
import typing

MAX_GRADE_POINT = 4.0
"""The highest quality-point value a grade can carry."""


# helper functions =====================================================================


def _check_points_are_in_range(points):
    for label, value in points.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f'Grade "{label}" must map to a number, not {value!r}.')
        if not 0 <= value <= MAX_GRADE_POINT:
            raise ValueError(
                f'Grade "{label}" maps to {value}, which is outside of '
                f"[0, {MAX_GRADE_POINT}]."
            )


# GradingScale =========================================================================


class GradingScale(collections.abc.Mapping):
    """A named mapping from grade labels to quality points.

    Behaves like a read-only ordered dictionary: iterating over a scale yields
    its grade labels in the order they were given, and looking up a label
    gives its quality-point value.

    Parameters
    ----------
    name : str
        The name of the scale, e.g., "4.0 Scale".
    points : Mapping[str, float]
        An ordered mapping from grade label to quality points. Each value must
        be between 0 and :attr:`MAX_GRADE_POINT`. The ordering is preserved,
        but is not checked to be monotonic.

    Raises
    ------
    ValueError
        If a quality-point value is out of range, or if the scale is empty.
    TypeError
        If a quality-point value is not a number.

    """

    def __init__(self, name: str, points: typing.Mapping[str, float]):
        if not points:
            raise ValueError("A grading scale must have at least one grade.")

        _check_points_are_in_range(points)

        self.name = name
        self._points = collections.OrderedDict(
            (label, float(value)) for label, value in points.items()
        )

    def __getitem__(self, label):
        return self._points[label]

    def __iter__(self):
        return iter(self._points)

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"GradingScale({self.name!r}, {dict(self._points)!r})"

    def __eq__(self, other):
        if not isinstance(other, GradingScale):
            return NotImplemented
        return self.name == other.name and list(self.items()) == list(other.items())

    def __hash__(self):
        return hash((self.name, tuple(self._points.items())))

    def grade_options(self) -> list[str]:
        """The grade labels, in order. Useful for populating a grade picker."""
        return list(self._points)


# common scales ========================================================================

FOUR_POINT_SCALE = GradingScale(
    "4.0 Scale",
    collections.OrderedDict(
        [
            ("A+", 4.0),
            ("A", 4.0),
            ("A-", 3.7),
            ("B+", 3.3),
            ("B", 3.0),
            ("B-", 2.7),
            ("C+", 2.3),
            ("C", 2.0),
            ("C-", 1.7),
            ("D+", 1.3),
            ("D", 1.0),
            ("D-", 0.7),
            ("F", 0.0),
        ]
    ),
)
"""The standard letter-grade scale."""

PERCENTAGE_SCALE = GradingScale(
    "Percentage to 4.0",
    collections.OrderedDict(
        [
            ("97-100", 4.0),
            ("93-96", 4.0),
            ("90-92", 3.7),
            ("87-89", 3.3),
            ("83-86", 3.0),
            ("80-82", 2.7),
            ("77-79", 2.3),
            ("73-76", 2.0),
            ("70-72", 1.7),
            ("67-69", 1.3),
            ("65-66", 1.0),
            ("Below 65", 0.0),
        ]
    ),
)
"""A scale whose labels are percentage buckets."""


# ScaleRegistry ========================================================================


class ScaleRegistry(collections.abc.Mapping):
    """A collection of grading scales, looked up by name.

    A registry is an ordinary object that is passed to whatever needs it;
    there is no global registry. Use :func:`default_registry` to get a new
    registry populated with the built-in scales.

    Example
    -------

    >>> registry = default_registry()
    >>> registry.register(GradingScale("Pass/Fail", {"P": 4.0, "NP": 0.0}))
    >>> registry["Pass/Fail"]["P"]
    4.0

    """

    def __init__(self, scales: typing.Iterable[GradingScale] = ()):
        self._scales = collections.OrderedDict()
        for scale in scales:
            self.register(scale)

    def __getitem__(self, name):
        try:
            return self._scales[name]
        except KeyError:
            raise KeyError(
                f'There is no grading scale named "{name}". '
                f"Known scales: {self.names}."
            ) from None

    def __iter__(self):
        return iter(self._scales)

    def __len__(self):
        return len(self._scales)

    def __repr__(self):
        return f"<{self.__class__.__name__} with scales {self.names}>"

    @property
    def names(self) -> list[str]:
        """The names of the registered scales, in registration order."""
        return list(self._scales)

    def register(self, scale: GradingScale):
        """Add a scale to the registry.

        Raises
        ------
        ValueError
            If a scale with the same name is already registered.
        TypeError
            If `scale` is not a :class:`GradingScale`.

        """
        if not isinstance(scale, GradingScale):
            raise TypeError("Only GradingScale objects can be registered.")

        if scale.name in self._scales:
            raise ValueError(f'A scale named "{scale.name}" is already registered.')

        self._scales[scale.name] = scale


def default_registry() -> ScaleRegistry:
    """A new registry containing :attr:`FOUR_POINT_SCALE` and :attr:`PERCENTAGE_SCALE`."""
    return ScaleRegistry([FOUR_POINT_SCALE, PERCENTAGE_SCALE])
