"""Tests for the direction classifier."""

from __future__ import annotations

import math

import pytest

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.guidance.direction import (
    COMPASS_POINTS,
    azimuth_to_compass_point,
    calc_azimuth,
    classify,
    get_azimuth,
    get_direction,
)


@pytest.mark.parametrize(
    "azimuth, expected",
    [
        (0.0, "N"),
        (22.4, "N"),
        (22.5, "NE"),
        (45.0, "NE"),
        (90.0, "E"),
        (135.0, "SE"),
        (180.0, "S"),
        (225.0, "SW"),
        (270.0, "W"),
        (315.0, "NW"),
        (337.4, "NW"),
        (337.5, "N"),
        (359.9, "N"),
        (360.0, "N"),
    ],
)
def test_azimuth_to_compass_point(azimuth, expected):
    assert azimuth_to_compass_point(azimuth) == expected


def test_compass_is_total_over_full_circle():
    labels = {azimuth_to_compass_point(a / 10.0) for a in range(3600)}
    assert labels == set(COMPASS_POINTS)


def test_two_point_instruction_uses_own_second_point(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (1.0, 1.0)))
    other = make_instruction(coords=((-5.0, 0.0),))
    assert classify(instr, other, distance_calc=planar_calc) == ("NE", "45")


def test_single_point_uses_next_instruction(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0),))
    nxt = make_instruction(coords=((0.0, 3.0),))
    assert classify(instr, nxt, distance_calc=planar_calc) == ("E", "90")


def test_single_point_without_next_is_empty(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0),))
    assert classify(instr, None, distance_calc=planar_calc) == ("", "")
    assert get_direction(instr) == ""
    assert get_azimuth(instr) == ""
    assert math.isnan(calc_azimuth(instr))


def test_empty_instruction_raises(make_instruction):
    with pytest.raises(InvalidInstructionError):
        classify(make_instruction(coords=()))


def test_bearing_text_rounds_to_integer(make_instruction):
    class FixedBearing:
        def __init__(self, value):
            self.value = value

        def bearing(self, *args):
            return self.value

    instr = make_instruction(coords=((0.0, 0.0), (1.0, 1.0)))
    assert get_azimuth(instr, distance_calc=FixedBearing(44.5)) == "45"
    assert get_azimuth(instr, distance_calc=FixedBearing(44.49)) == "44"
    assert get_azimuth(instr, distance_calc=FixedBearing(359.7)) == "0"
    assert get_direction(instr, distance_calc=FixedBearing(359.7)) == "N"


def test_classify_is_pure(make_instruction):
    instr = make_instruction(coords=((52.5200, 13.4050), (52.5210, 13.4065)))
    first = classify(instr)
    assert first == classify(instr)
    assert first[0] == "NE"


def test_real_geometry_north(make_instruction):
    instr = make_instruction(coords=((52.5200, 13.4050), (52.5300, 13.4050)))
    assert classify(instr) == ("N", "0")
