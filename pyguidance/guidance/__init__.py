"""
Guidance module for the pyguidance library.

This module provides the instruction data model and the policies that render
instructions for a person: the compass direction of a maneuver and its
localized turn description.
"""

from pyguidance.guidance.instruction import (
    TurnSign,
    InstructionAnnotation,
    Instruction,
    InstructionBuilder,
)
from pyguidance.guidance.direction import (
    COMPASS_POINTS,
    azimuth_to_compass_point,
    calc_azimuth,
    get_direction,
    get_azimuth,
    classify,
)
from pyguidance.guidance.description import turn_description

__all__ = [
    # Data model
    'TurnSign',
    'InstructionAnnotation',
    'Instruction',
    'InstructionBuilder',
    # Direction
    'COMPASS_POINTS',
    'azimuth_to_compass_point',
    'calc_azimuth',
    'get_direction',
    'get_azimuth',
    'classify',
    # Description
    'turn_description',
]
