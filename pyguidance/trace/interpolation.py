"""
Trace interpolation module for pyguidance.

This module turns the geometry of one instruction into timestamped samples.
The instruction's total time is distributed over its sub-segments in proportion
to their length, not to the number of points, so the timestamps reflect the
actual travel speed rather than how densely the geometry was sampled.

The last sub-segment of an instruction ends at the first point of the next
instruction. That boundary point is emitted by the next instruction, never
twice.
"""

import math
from typing import List, NamedTuple, Optional, Tuple

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.guidance.instruction import Instruction
from pyguidance.utilities.geometry import default_calc


class TraceSample(NamedTuple):
    """A timestamped position of the output trace."""

    lat: float
    lon: float
    ele: float
    time: int


def fill_trace(instruction: Instruction,
               start_time: int,
               prev_instruction: Optional[Instruction] = None,
               next_instruction: Optional[Instruction] = None,
               is_first: bool = False,
               distance_calc=None) -> Tuple[List[TraceSample], int]:
    """
    Interpolate timestamps for every point of an instruction.

    Parameters
    ----------
    instruction : Instruction
        Instruction to sample. Must contain at least one point.
    start_time : int
        Absolute time of the instruction's first point.
    prev_instruction : Instruction, optional
        Preceding instruction. Accepted so every instruction of a route can be
        passed its neighbours uniformly; it does not affect the timestamps.
    next_instruction : Instruction, optional
        Following instruction. Its first point closes the last sub-segment.
        Without it the last point has no successor and the loop stops there.
    is_first : bool, default=False
        Whether this is the first instruction of the route. Does not affect
        the timestamps.
    distance_calc : GeodesicCalc, optional
        Geometry service; defaults to the shared WGS84 calculator.

    Returns
    -------
    tuple of (list of TraceSample, int)
        One sample per point of ``instruction`` and the start time for the
        next instruction, ``start_time + instruction.time``.

    Raises
    ------
    InvalidInstructionError
        If the instruction has no points, a distance that is negative or not
        finite, or a zero distance with a nonzero time (the time cannot be
        apportioned).

    Examples
    --------
    >>> samples, end = fill_trace(instr, 0, next_instruction=finish)
    >>> [s.time for s in samples], end
    ([0, 10, 30], 30)

    Notes
    -----
    **Algorithm:**
    1. Emit point ``i`` at the running time ``elapsed``
    2. Measure the distance ``d`` from point ``i`` to its successor (point
       ``i + 1``, or the first point of ``next_instruction``); 3D when the
       points carry elevation
    3. ``elapsed = round(elapsed + time * d / distance)``
    4. Return ``start_time + time`` rather than ``elapsed``

    **Rounding:**
    Rounding happens at every sub-segment, half up, so ``elapsed`` can drift
    from the exact value by a few units within an instruction. The drift does
    not carry over, because the returned end time is the exact total.
    """
    instruction.check_one()
    if not (math.isfinite(instruction.distance) and instruction.distance >= 0):
        raise InvalidInstructionError(
            f"Instruction distance must be finite and non-negative {instruction}")
    if instruction.distance == 0 and instruction.time != 0:
        raise InvalidInstructionError(
            f"Instruction has time {instruction.time} but zero distance {instruction}")
    if next_instruction is not None:
        next_instruction.check_one()

    calc = distance_calc or default_calc()
    points = instruction.points
    is_3d = points.is_3d
    size = len(points)
    total_time = instruction.time
    total_distance = instruction.distance

    samples = []
    elapsed = start_time
    lat = points.latitude(0)
    lon = points.longitude(0)
    ele = points.elevation(0) if is_3d else math.nan

    for i in range(size):
        samples.append(TraceSample(lat, lon, ele, elapsed))

        last = i + 1 == size
        if last:
            if next_instruction is None:
                break
            next_lat = next_instruction.first_lat
            next_lon = next_instruction.first_lon
            if not is_3d:
                next_ele = math.nan
            elif next_instruction.is_3d:
                next_ele = next_instruction.first_ele
            else:
                # flat successor: measure the last sub-segment at constant height
                next_ele = ele
        else:
            next_lat = points.latitude(i + 1)
            next_lon = points.longitude(i + 1)
            next_ele = points.elevation(i + 1) if is_3d else math.nan

        if total_distance > 0:
            if is_3d:
                d = calc.distance_3d(lat, lon, ele, next_lat, next_lon, next_ele)
            else:
                d = calc.distance_2d(lat, lon, next_lat, next_lon)
            elapsed = _round_half_up(elapsed + total_time * d / total_distance)

        lat, lon, ele = next_lat, next_lon, next_ele

    return samples, start_time + total_time


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
