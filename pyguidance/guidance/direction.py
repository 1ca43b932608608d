"""
Direction classification for instructions.

The direction of an instruction is the bearing of its first track segment:
from its first point to its second point, or, for a single-point instruction,
to the first point of the following instruction. The bearing is reported both
as an 8-point compass label and as a rounded integer string.
"""

import math
from typing import Optional, Tuple

from pyguidance.guidance.instruction import Instruction
from pyguidance.utilities.geometry import default_calc

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

_SLICE = 360.0 / (2 * len(COMPASS_POINTS))


def azimuth_to_compass_point(azimuth: float) -> str:
    """
    Map a bearing in degrees to an 8-point compass label.

    Each label covers a 45 degree sector centred on its direction, so north is
    [337.5, 360) plus [0, 22.5). Values outside [0, 360) are wrapped first.

    Examples
    --------
    >>> azimuth_to_compass_point(0.0), azimuth_to_compass_point(22.5)
    ('N', 'NE')
    >>> azimuth_to_compass_point(350.0)
    'N'
    """
    azimuth = azimuth % 360.0
    index = int((azimuth + _SLICE) // (2 * _SLICE)) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def calc_azimuth(instruction: Instruction, next_instruction: Optional[Instruction] = None,
                 distance_calc=None) -> float:
    """
    Bearing of the first track segment of ``instruction`` in degrees.

    Returns ``nan`` when the direction is undefined, i.e. for a single-point
    instruction without a following instruction.

    Raises
    ------
    InvalidInstructionError
        If ``instruction`` has no points.
    """
    instruction.check_one()
    points = instruction.points
    if len(points) >= 2:
        next_lat = points.latitude(1)
        next_lon = points.longitude(1)
    elif next_instruction is not None:
        next_instruction.check_one()
        next_lat = next_instruction.first_lat
        next_lon = next_instruction.first_lon
    else:
        return math.nan

    calc = distance_calc or default_calc()
    return calc.bearing(instruction.first_lat, instruction.first_lon, next_lat, next_lon)


def get_direction(instruction: Instruction, next_instruction: Optional[Instruction] = None,
                  distance_calc=None) -> str:
    """Compass label of the first track segment, or ``""`` if undefined."""
    azimuth = calc_azimuth(instruction, next_instruction, distance_calc)
    if math.isnan(azimuth):
        return ""
    return azimuth_to_compass_point(azimuth)


def get_azimuth(instruction: Instruction, next_instruction: Optional[Instruction] = None,
                distance_calc=None) -> str:
    """Bearing of the first track segment rounded to whole degrees, or ``""``."""
    azimuth = calc_azimuth(instruction, next_instruction, distance_calc)
    if math.isnan(azimuth):
        return ""
    return _format_azimuth(azimuth)


def classify(instruction: Instruction, next_instruction: Optional[Instruction] = None,
             distance_calc=None) -> Tuple[str, str]:
    """
    Compass label and bearing text of an instruction.

    Parameters
    ----------
    instruction : Instruction
        Instruction to classify. Must have at least one point.
    next_instruction : Instruction, optional
        Following instruction, used when ``instruction`` has a single point.
    distance_calc : GeodesicCalc, optional
        Geometry service; defaults to the shared WGS84 calculator.

    Returns
    -------
    tuple of (str, str)
        E.g. ``("NE", "45")``, or ``("", "")`` when the direction is undefined.
    """
    azimuth = calc_azimuth(instruction, next_instruction, distance_calc)
    if math.isnan(azimuth):
        return "", ""
    return azimuth_to_compass_point(azimuth), _format_azimuth(azimuth)


def _format_azimuth(azimuth: float) -> str:
    # round half up; 359.5 and above wraps to 0
    return str(int(math.floor(azimuth + 0.5)) % 360)
