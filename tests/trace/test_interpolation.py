"""Tests for per-instruction trace interpolation."""

from __future__ import annotations

import math

import pytest

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.guidance.instruction import TurnSign
from pyguidance.trace.interpolation import TraceSample, fill_trace


@pytest.fixture
def finish_at(make_instruction):
    def _finish(lat, lon=0.0, *ele):
        return make_instruction(sign=TurnSign.FINISH, coords=((lat, lon, *ele),))

    return _finish


def test_distance_proportional_timestamps(make_instruction, finish_at, planar_calc):
    # sub-segments of 10 and 20 units; the successor coincides with the last point
    instr = make_instruction(coords=((0.0, 0.0), (10.0, 0.0), (30.0, 0.0)), distance=30.0, time=30)
    samples, end = fill_trace(instr, 0, None, finish_at(30.0), True, distance_calc=planar_calc)

    assert [s.time for s in samples] == [0, 10, 30]
    assert end == 30


def test_scenario_without_next_instruction(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (10.0, 0.0), (30.0, 0.0)), distance=30.0, time=30)
    samples, end = fill_trace(instr, 0, distance_calc=planar_calc)

    assert [s.time for s in samples] == [0, 10, 30]
    assert end == 30
    # no successor: the last point is not measured
    assert len(planar_calc.calls) == 2


def test_time_follows_distance_not_point_count(make_instruction, finish_at, planar_calc):
    # dense points at the start, one long segment at the end
    coords = ((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0))
    instr = make_instruction(coords=coords, distance=100.0, time=1000)
    samples, _ = fill_trace(instr, 0, next_instruction=finish_at(100.0), distance_calc=planar_calc)

    assert [s.time for s in samples] == [0, 10, 20, 30]


def test_boundary_segment_reaches_next_instruction(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (10.0, 0.0)), distance=40.0, time=400)
    nxt = make_instruction(sign=TurnSign.LEFT, coords=((40.0, 0.0),))
    samples, end = fill_trace(instr, 1000, next_instruction=nxt, distance_calc=planar_calc)

    assert [s.time for s in samples] == [1000, 1100]
    assert end == 1400
    assert planar_calc.calls[-1] == ("2d", 10.0, 0.0, 40.0, 0.0)


def test_sample_count_equals_point_count(make_instruction, finish_at, planar_calc):
    for n in range(1, 6):
        coords = tuple((float(i), 0.0) for i in range(n))
        instr = make_instruction(coords=coords, distance=float(n), time=n * 100)
        samples, _ = fill_trace(instr, 0, next_instruction=finish_at(float(n)),
                                distance_calc=planar_calc)
        assert len(samples) == n
        assert [(s.lat, s.lon) for s in samples] == list(coords)


def test_unrounded_advance_sums_to_total_time(make_instruction, finish_at, planar_calc):
    coords = ((0.0, 0.0), (3.0, 4.0), (3.0, 10.0))
    nxt = finish_at(9.0, 10.0)
    distance = 5.0 + 6.0 + 6.0
    instr = make_instruction(coords=coords, distance=distance, time=1700)

    fill_trace(instr, 0, next_instruction=nxt, distance_calc=planar_calc)
    segment_lengths = [planar_calc.distance_2d(*call[1:]) for call in list(planar_calc.calls)]
    advance = sum(instr.time * d / instr.distance for d in segment_lengths)
    assert advance == pytest.approx(instr.time)


def test_rounding_drift_does_not_leak_into_end_time(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)), distance=3.0, time=10)
    samples, end = fill_trace(instr, 0, next_instruction=finish_at(3.0), distance_calc=planar_calc)

    assert [s.time for s in samples] == [0, 3, 6]
    assert end == 10


def test_rounds_half_up(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (1.0, 0.0)), distance=2.0, time=1)
    samples, _ = fill_trace(instr, 0, next_instruction=finish_at(2.0), distance_calc=planar_calc)
    assert [s.time for s in samples] == [0, 1]


def test_3d_uses_elevation(make_instruction, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0, 0.0), (0.0, 0.0, 10.0)), distance=20.0, time=200)
    nxt = make_instruction(sign=TurnSign.FINISH, coords=((0.0, 0.0, 20.0),))
    samples, end = fill_trace(instr, 0, next_instruction=nxt, distance_calc=planar_calc)

    assert [s.time for s in samples] == [0, 100]
    assert [s.ele for s in samples] == [0.0, 10.0]
    assert all(call[0] == "3d" for call in planar_calc.calls)
    assert end == 200


def test_2d_samples_have_nan_elevation(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0),), distance=1.0, time=5)
    samples, _ = fill_trace(instr, 0, next_instruction=finish_at(1.0), distance_calc=planar_calc)
    assert isinstance(samples[0], TraceSample)
    assert math.isnan(samples[0].ele)


def test_3d_instruction_followed_by_2d_instruction(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0, 50.0),), distance=5.0, time=50)
    samples, end = fill_trace(instr, 0, next_instruction=finish_at(5.0), distance_calc=planar_calc)
    assert planar_calc.calls == [("3d", 0.0, 0.0, 50.0, 5.0, 0.0, 50.0)]
    assert end == 50


def test_empty_instruction_raises(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=(), distance=1.0, time=1)
    with pytest.raises(InvalidInstructionError):
        fill_trace(instr, 0, next_instruction=finish_at(1.0), distance_calc=planar_calc)


def test_zero_distance_with_time_raises(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0),), distance=0.0, time=10)
    with pytest.raises(InvalidInstructionError, match="zero distance"):
        fill_trace(instr, 0, next_instruction=finish_at(0.0), distance_calc=planar_calc)


@pytest.mark.parametrize("distance", [math.nan, math.inf, -1.0])
def test_non_finite_or_negative_distance_raises(make_instruction, finish_at, planar_calc,
                                                distance):
    instr = make_instruction(coords=((0.0, 0.0), (1.0, 0.0)), distance=1.0, time=10)
    # slip past construction-time validation
    object.__setattr__(instr, "distance", distance)
    with pytest.raises(InvalidInstructionError, match="finite and non-negative"):
        fill_trace(instr, 0, next_instruction=finish_at(2.0), distance_calc=planar_calc)


def test_zero_distance_and_zero_time_stays_put(make_instruction, finish_at, planar_calc):
    instr = make_instruction(coords=((0.0, 0.0), (0.0, 0.0)), distance=0.0, time=0)
    samples, end = fill_trace(instr, 500, next_instruction=finish_at(0.0), distance_calc=planar_calc)
    assert [s.time for s in samples] == [500, 500]
    assert end == 500


def test_default_geometry_service(make_instruction, finish_at):
    # two sub-segments of equal geodesic length along a meridian
    instr = make_instruction(coords=((0.0, 0.0), (0.001, 0.0)), distance=221.1, time=2000)
    samples, end = fill_trace(instr, 0, next_instruction=finish_at(0.002))
    assert samples[1].time == pytest.approx(1000, abs=2)
    assert end == 2000
