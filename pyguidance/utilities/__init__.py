"""
Utilities module for the pyguidance library.

This module provides the services the guidance core consumes: geodesic
distances and bearings, the coordinate container for instruction geometry,
and message translation.
"""

from pyguidance.utilities.geometry import (
    GeodesicCalc,
    default_calc,
    distance_2d,
    distance_3d,
    bearing,
)
from pyguidance.utilities.point_list import PointList
from pyguidance.utilities.translation import (
    DEFAULT_EN,
    Translation,
    TranslationMap,
    default_translation,
)

__all__ = [
    # Geometry
    'GeodesicCalc',
    'default_calc',
    'distance_2d',
    'distance_3d',
    'bearing',
    # Coordinates
    'PointList',
    # Translation
    'DEFAULT_EN',
    'Translation',
    'TranslationMap',
    'default_translation',
]
