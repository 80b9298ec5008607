import pytest

import gpalib
from gpalib.scales import FOUR_POINT_SCALE, PERCENTAGE_SCALE


def test_roundtrip(tmp_path):
    # given
    scale = FOUR_POINT_SCALE

    # when
    gpalib.io.scales.write(tmp_path / "scale.csv", scale)
    roundtripped_scale = gpalib.io.scales.read(tmp_path / "scale.csv", name=scale.name)

    # then
    assert roundtripped_scale == scale


def test_read_names_scale_after_file(tmp_path):
    # given
    gpalib.io.scales.write(tmp_path / "percentages.csv", PERCENTAGE_SCALE)

    # when
    scale = gpalib.io.scales.read(tmp_path / "percentages.csv")

    # then
    assert scale.name == "percentages"
    assert scale.grade_options() == PERCENTAGE_SCALE.grade_options()


def test_read_ignores_blank_lines(tmp_path):
    # given
    path = tmp_path / "pass_fail.csv"
    path.write_text("P,4.0\n\nNP,0\n")

    # when
    scale = gpalib.io.scales.read(path)

    # then
    assert dict(scale) == {"P": 4.0, "NP": 0.0}


def test_read_raises_on_out_of_range_points(tmp_path):
    # given
    path = tmp_path / "bad.csv"
    path.write_text("A,5.0\n")

    # when / then
    with pytest.raises(ValueError):
        gpalib.io.scales.read(path)
