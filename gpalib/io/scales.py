"""Read and write grading scales.

A scale file is a simple CSV with no headers. The first column contains the
grade label, and the second contains its quality points as a decimal number.
The order of the rows matters! The name of the scale is not stored in the
file; by default it is taken from the file name.

"""

from collections import OrderedDict
import pathlib

from ..scales import GradingScale


def write(path: pathlib.Path, scale: GradingScale):
    """Writes a scale to disk."""
    path = pathlib.Path(path)
    with path.open("w") as fileobj:
        for label, points in scale.items():
            fileobj.write(f"{label},{points}\n")


def read(path: pathlib.Path, name=None) -> GradingScale:
    """Reads a scale from the file.

    Parameters
    ----------
    path : Union[pathlib.Path, str]
        The scale file.
    name : Optional[str]
        The name to give the scale. Default: the file name without its suffix.

    Raises
    ------
    ValueError
        If a line cannot be parsed, or a value is out of range.

    """
    path = pathlib.Path(path)
    with path.open() as fileobj:
        lines = [l for l in fileobj.read().splitlines() if l.strip()]

    def parse_line(l):
        label, points = l.rsplit(",", 1)
        return (label, float(points))

    if name is None:
        name = path.stem

    return GradingScale(name, OrderedDict(map(parse_line, lines)))
