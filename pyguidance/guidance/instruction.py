"""
Instruction data model for pyguidance.

An instruction is one maneuver step of a route: a turn sign, the name of the
street being entered, an opaque annotation, the geometry covered until the
next maneuver, and the distance and time totals for that geometry.

The last point of an instruction is not stored in its own point list; it is
the first point of the following instruction. Only the final instruction of a
route (the finish or a via point) carries the end position itself.

Instructions are immutable. Geometry is known first and totals are computed
afterwards, so construction goes through ``InstructionBuilder``: set the
distance and time, then ``build()``.
"""

import math
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Optional

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.utilities.point_list import PointList


class TurnSign(IntEnum):
    """Maneuver classification. Negative values turn left, positive right."""

    SHARP_LEFT = -3
    LEFT = -2
    SLIGHT_LEFT = -1
    CONTINUE_ON_STREET = 0
    SLIGHT_RIGHT = 1
    RIGHT = 2
    SHARP_RIGHT = 3
    FINISH = 4
    REACHED_VIA = 5


@dataclass(frozen=True)
class InstructionAnnotation:
    """Auxiliary metadata attached to an instruction, e.g. a warning."""

    importance: int = 0
    message: str = ""

    def is_empty(self) -> bool:
        return self.importance == 0 and not self.message


InstructionAnnotation.EMPTY = InstructionAnnotation()


@dataclass(frozen=True)
class Instruction:
    """
    A single, fully initialised route instruction.

    Attributes
    ----------
    sign : TurnSign
        Maneuver kind.
    name : str
        Street or path being entered; may be empty.
    annotation : InstructionAnnotation
        Passed through unchanged.
    points : PointList
        Geometry of this instruction, held by reference.
    distance : float
        Distance in metres covered by ``points`` up to the next instruction.
    time : int
        Duration covered by ``points``, in integer time units (milliseconds
        by convention).
    via_position : int, optional
        1-based index of the via point; only meaningful for ``REACHED_VIA``.
    """

    sign: TurnSign
    name: str
    annotation: InstructionAnnotation
    points: PointList = field(compare=False)
    distance: float
    time: int
    via_position: Optional[int] = None

    def __post_init__(self):
        _check_totals(self.distance, self.time)
        if self.sign == TurnSign.REACHED_VIA and self.via_position is None:
            raise InvalidInstructionError("a REACHED_VIA instruction needs a via_position")
        if self.via_position is not None and self.via_position < 1:
            raise ValueError("via_position is 1-based")

    @property
    def is_3d(self) -> bool:
        return self.points.is_3d

    @property
    def first_lat(self) -> float:
        """Latitude of the location where this instruction takes place."""
        return self.points.latitude(0)

    @property
    def first_lon(self) -> float:
        """Longitude of the location where this instruction takes place."""
        return self.points.longitude(0)

    @property
    def first_ele(self) -> float:
        return self.points.elevation(0)

    def check_one(self) -> None:
        """Raise ``InvalidInstructionError`` unless there is at least one point."""
        if len(self.points) < 1:
            raise InvalidInstructionError(f"Instruction must contain at least one point {self}")

    def with_totals(self, distance: float, time: int) -> "Instruction":
        """Return a copy with new distance and time totals."""
        _check_totals(distance, time)
        return replace(self, distance=float(distance), time=int(time))

    def __str__(self):
        return f"({int(self.sign)},{self.name},{self.distance},{self.time})"


class InstructionBuilder:
    """
    Collects an instruction's geometry first and its totals later.

    Examples
    --------
    >>> points = PointList.from_coords([(52.50, 13.40), (52.51, 13.40)])
    >>> instr = (InstructionBuilder(TurnSign.LEFT, "Oak Ave", points=points)
    ...          .set_distance(1112.0)
    ...          .set_time(80000)
    ...          .build())
    >>> str(instr)
    '(-2,Oak Ave,1112.0,80000)'
    """

    def __init__(self, sign: TurnSign, name: str = "",
                 annotation: InstructionAnnotation = InstructionAnnotation.EMPTY,
                 points: Optional[PointList] = None,
                 via_position: Optional[int] = None):
        self.sign = sign
        self.name = name or ""
        self.annotation = annotation
        self.points = points if points is not None else PointList()
        self.via_position = via_position
        self._distance: Optional[float] = None
        self._time: Optional[int] = None

    def set_distance(self, distance: float) -> "InstructionBuilder":
        self._distance = distance
        return self

    def set_time(self, time: int) -> "InstructionBuilder":
        self._time = time
        return self

    def build(self) -> Instruction:
        if self._distance is None or self._time is None:
            raise ValueError("distance and time must be set before building an instruction")
        _check_totals(self._distance, self._time)
        return Instruction(
            sign=self.sign,
            name=self.name,
            annotation=self.annotation,
            points=self.points,
            distance=float(self._distance),
            time=int(self._time),
            via_position=self.via_position,
        )


def _check_totals(distance: float, time: int) -> None:
    if not math.isfinite(distance) or not math.isfinite(time):
        raise ValueError(f"distance and time must be finite, got {distance} and {time}")
    if distance < 0 or time < 0:
        raise ValueError(f"distance and time must be non-negative, got {distance} and {time}")
