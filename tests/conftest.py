"""Shared fixtures for the pyguidance test suite."""

from __future__ import annotations

import math

import pytest

from pyguidance.guidance.instruction import (
    InstructionAnnotation,
    InstructionBuilder,
    TurnSign,
)
from pyguidance.utilities.point_list import PointList


class PlanarCalc:
    """Geometry stub: coordinates are plain x/y units, distances are Euclidean.

    Lets tests pin sub-segment lengths exactly (a point at lat 10 is 10 units
    from a point at lat 0).
    """

    def __init__(self):
        self.calls = []

    def distance_2d(self, lat1, lon1, lat2, lon2):
        self.calls.append(("2d", lat1, lon1, lat2, lon2))
        return math.hypot(lat2 - lat1, lon2 - lon1)

    def distance_3d(self, lat1, lon1, ele1, lat2, lon2, ele2):
        self.calls.append(("3d", lat1, lon1, ele1, lat2, lon2, ele2))
        return math.sqrt((lat2 - lat1) ** 2 + (lon2 - lon1) ** 2 + (ele2 - ele1) ** 2)

    def bearing(self, lat1, lon1, lat2, lon2):
        return math.degrees(math.atan2(lon2 - lon1, lat2 - lat1)) % 360.0


@pytest.fixture
def planar_calc() -> PlanarCalc:
    return PlanarCalc()


@pytest.fixture
def make_instruction():
    """Factory for built instructions from a list of coordinate tuples."""

    def _make(sign=TurnSign.CONTINUE_ON_STREET, coords=((0.0, 0.0),), distance=0.0,
              time=0, name="", annotation=InstructionAnnotation.EMPTY, via_position=None):
        return (
            InstructionBuilder(sign, name, annotation,
                               points=PointList.from_coords(coords),
                               via_position=via_position)
            .set_distance(distance)
            .set_time(time)
            .build()
        )

    return _make


class RecordingTranslation:
    """Translation stub that renders calls as ``key(arg, ...)``."""

    def __init__(self):
        self.calls = []

    def tr(self, key, *args):
        self.calls.append((key, args))
        if not args:
            return key
        return f"{key}({', '.join(str(a) for a in args)})"


@pytest.fixture
def recording_tr() -> RecordingTranslation:
    return RecordingTranslation()
