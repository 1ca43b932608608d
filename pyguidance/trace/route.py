"""
Route-level trace construction and tabular output.

``create_trace`` folds ``fill_trace`` over an ordered list of instructions,
threading the exact end time of each instruction into the next, and closes the
trace with the route's final point. The DataFrame helpers lay the trace and
the maneuver list out as tables in the same ``lat``/``lon``/``time`` column
convention used across the library.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
import polars as pl

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.guidance.description import turn_description
from pyguidance.guidance.direction import classify
from pyguidance.guidance.instruction import Instruction
from pyguidance.trace.interpolation import TraceSample, fill_trace

logger = logging.getLogger(__name__)

_BACKENDS = ("pandas", "polars")


def iter_trace(instructions: Sequence[Instruction],
               start_time: int = 0,
               distance_calc=None) -> Iterator[Tuple[List[TraceSample], int]]:
    """
    Interpolate every instruction except the last, in route order.

    Yields ``(samples, end_time)`` per instruction. Each instruction starts at
    the previous one's exact ``end_time``. The last instruction has no
    successor to interpolate towards and is left to the caller.
    """
    time_offset = start_time
    for i in range(len(instructions) - 1):
        prev_instr = instructions[i - 1] if i > 0 else None
        samples, time_offset = fill_trace(
            instructions[i],
            time_offset,
            prev_instruction=prev_instr,
            next_instruction=instructions[i + 1],
            is_first=prev_instr is None,
            distance_calc=distance_calc,
        )
        yield samples, time_offset


def create_trace(instructions: Sequence[Instruction],
                 start_time: int = 0,
                 distance_calc=None) -> List[TraceSample]:
    """
    Build the timestamped trace of a whole route.

    Parameters
    ----------
    instructions : sequence of Instruction
        Ordered route instructions. The last one must be the finish (or a via
        point) and contain exactly one point.
    start_time : int, default=0
        Timestamp of the first sample.
    distance_calc : GeodesicCalc, optional
        Geometry service; defaults to the shared WGS84 calculator.

    Returns
    -------
    list of TraceSample
        Non-decreasing timestamps, one sample per route point. Empty for an
        empty route.

    Raises
    ------
    InvalidInstructionError
        If any instruction has no points or the last one does not have
        exactly one point.

    Examples
    --------
    >>> trace = create_trace(route)
    >>> df = trace_to_dataframe(trace, origin=pd.Timestamp("2024-05-01 08:00"))
    """
    if not instructions:
        return []

    last_instr = instructions[-1]
    if len(last_instr.points) != 1:
        raise InvalidInstructionError(
            f"Last instruction must have exactly one point but was {len(last_instr.points)}")

    trace: List[TraceSample] = []
    time_offset = start_time
    for samples, time_offset in iter_trace(instructions, start_time, distance_calc):
        trace.extend(samples)

    trace.append(TraceSample(last_instr.first_lat, last_instr.first_lon,
                             last_instr.first_ele, time_offset))
    logger.debug("Created trace of %d samples from %d instructions, end time %d",
                 len(trace), len(instructions), time_offset)
    return trace


def trace_to_dataframe(samples: Sequence[TraceSample],
                       backend: str = "pandas",
                       origin: Optional[pd.Timestamp] = None,
                       unit: str = "ms",
                       lat_col: str = "lat",
                       lon_col: str = "lon",
                       ele_col: str = "ele",
                       time_col: str = "time") -> Union[pd.DataFrame, pl.DataFrame]:
    """
    Lay out a trace as a DataFrame.

    Parameters
    ----------
    samples : sequence of TraceSample
        Output of ``create_trace`` or ``fill_trace``.
    backend : {'pandas', 'polars'}, default='pandas'
        DataFrame library of the result.
    origin : timestamp-like, optional
        Absolute time of offset 0. When given, the integer offsets become
        datetimes; otherwise they are kept as integers.
    unit : str, default='ms'
        Unit of the integer offsets, as understood by ``pd.to_timedelta``.
    lat_col, lon_col, ele_col, time_col : str
        Output column names.

    Returns
    -------
    pd.DataFrame or pl.DataFrame
        One row per sample. ``ele`` is NaN for 2D geometry.

    Raises
    ------
    ValueError
        If ``backend`` is not supported.
    """
    if backend not in _BACKENDS:
        raise ValueError(f"backend must be one of {_BACKENDS}, got '{backend}'")

    if samples:
        arr = np.asarray(samples, dtype=float)
        lats, lons, eles = arr[:, 0], arr[:, 1], arr[:, 2]
        times = np.asarray([s.time for s in samples], dtype=np.int64)
    else:
        lats = lons = eles = np.array([], dtype=float)
        times = np.array([], dtype=np.int64)

    if origin is not None:
        time_values = (pd.to_datetime(origin) + pd.to_timedelta(times, unit=unit)).to_numpy()
    else:
        time_values = times

    return _frame({time_col: time_values, lat_col: lats, lon_col: lons, ele_col: eles}, backend)


def instructions_to_records(instructions: Sequence[Instruction],
                            translation,
                            distance_calc=None) -> List[dict]:
    """
    Render the maneuver list of a route for display.

    Each record holds the translated ``text``, ``sign``, ``name``,
    ``distance``, ``time``, the ``interval`` of point indices the instruction
    covers in the route trace, the compass ``direction`` and ``azimuth``, and
    the annotation fields.
    """
    records = []
    point_index = 0
    for i, instr in enumerate(instructions):
        next_instr = instructions[i + 1] if i + 1 < len(instructions) else None
        direction, azimuth = classify(instr, next_instr, distance_calc)
        # the last point of an instruction is the first of the next one
        end_index = point_index + len(instr.points) - (0 if next_instr is not None else 1)
        records.append({
            "text": turn_description(instr, translation),
            "sign": int(instr.sign),
            "name": instr.name,
            "distance": instr.distance,
            "time": instr.time,
            "interval": (point_index, end_index),
            "direction": direction,
            "azimuth": azimuth,
            "annotation_text": instr.annotation.message,
            "annotation_importance": instr.annotation.importance,
        })
        point_index += len(instr.points)
    return records


def instructions_to_dataframe(instructions: Sequence[Instruction],
                              translation,
                              backend: str = "pandas",
                              distance_calc=None) -> Union[pd.DataFrame, pl.DataFrame]:
    """Maneuver table of ``instructions_to_records`` as a DataFrame."""
    if backend not in _BACKENDS:
        raise ValueError(f"backend must be one of {_BACKENDS}, got '{backend}'")
    records = instructions_to_records(instructions, translation, distance_calc)
    columns = {name: [] for name in _INSTRUCTION_COLUMNS}
    for record in records:
        record["interval_start"], record["interval_end"] = record.pop("interval")
        for name in _INSTRUCTION_COLUMNS:
            columns[name].append(record[name])
    return _frame(columns, backend)


_INSTRUCTION_COLUMNS = (
    "text", "sign", "name", "distance", "time", "interval_start", "interval_end",
    "direction", "azimuth", "annotation_text", "annotation_importance",
)


def _frame(columns: dict, backend: str) -> Union[pd.DataFrame, pl.DataFrame]:
    if backend == "polars":
        return pl.DataFrame(columns)
    return pd.DataFrame(columns)
