"""
Geodesic distance and bearing calculations for pyguidance.

This module is the geometry service the rest of the library consumes. Distances
are computed on an ellipsoid with pyproj's ``Geod`` (WGS84 by default), which is
accurate at all latitudes. The 3D distance combines the geodesic surface
distance with the elevation difference.

Any object exposing ``distance_2d``, ``distance_3d`` and ``bearing`` with the
signatures below can be passed wherever a ``distance_calc`` is accepted.
"""

import math

from pyproj import Geod

DEFAULT_ELLPS = "WGS84"


class GeodesicCalc:
    """
    Distances and bearings between geographic coordinates.

    Parameters
    ----------
    ellps : str, default='WGS84'
        Ellipsoid name understood by ``pyproj.Geod``.

    Examples
    --------
    >>> calc = GeodesicCalc()
    >>> round(calc.distance_2d(0.0, 0.0, 1.0, 0.0))
    110574
    >>> round(calc.bearing(0.0, 0.0, 0.0, 1.0))
    90
    """

    def __init__(self, ellps: str = DEFAULT_ELLPS):
        self.ellps = ellps
        self._geod = Geod(ellps=ellps)

    def distance_2d(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Geodesic distance in metres between two points."""
        # pyproj.Geod.inv expects lon, lat order
        _, _, s12 = self._geod.inv(lon1, lat1, lon2, lat2)
        return float(s12)

    def distance_3d(self, lat1: float, lon1: float, ele1: float,
                    lat2: float, lon2: float, ele2: float) -> float:
        """
        Distance in metres including the elevation difference.

        The surface distance and the height difference are treated as the legs
        of a right triangle, which is accurate for the short sub-segments of a
        route geometry.
        """
        d = self.distance_2d(lat1, lon1, lat2, lon2)
        d_ele = ele2 - ele1
        return math.sqrt(d * d + d_ele * d_ele)

    def bearing(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Forward azimuth from point 1 to point 2 in degrees [0, 360)."""
        az12, _, _ = self._geod.inv(lon1, lat1, lon2, lat2)
        bearing = float(az12) % 360.0
        # -0.0 % 360 and tiny negatives can land on 360.0
        if bearing >= 360.0:
            bearing -= 360.0
        return bearing

    def __repr__(self):
        return f"GeodesicCalc(ellps={self.ellps!r})"


# single instance reused by default
_DEFAULT_CALC = GeodesicCalc()


def default_calc() -> GeodesicCalc:
    """Return the shared WGS84 ``GeodesicCalc`` instance."""
    return _DEFAULT_CALC


def distance_2d(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Geodesic distance in metres on WGS84."""
    return _DEFAULT_CALC.distance_2d(lat1, lon1, lat2, lon2)


def distance_3d(lat1: float, lon1: float, ele1: float,
                lat2: float, lon2: float, ele2: float) -> float:
    """Geodesic distance in metres on WGS84, including the elevation difference."""
    return _DEFAULT_CALC.distance_3d(lat1, lon1, ele1, lat2, lon2, ele2)


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Forward azimuth in degrees [0, 360) on WGS84."""
    return _DEFAULT_CALC.bearing(lat1, lon1, lat2, lon2)
