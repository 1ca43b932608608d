"""
Ordered coordinate container for instruction geometry.

A ``PointList`` stores latitude, longitude and (optionally) elevation in numpy
arrays. Instructions hold a reference to a point list but never copy or modify
it, so one list can back several views of the same route.
"""

from typing import Iterable, Iterator, Optional, Tuple

import numpy as np


class PointList:
    """
    Ordered, random-access list of coordinates with optional elevation.

    Parameters
    ----------
    lats, lons : array-like, optional
        Latitudes and longitudes in WGS84 decimal degrees. Must have the same
        length.
    eles : array-like, optional
        Elevations in metres. When given the list is 3D and every point must
        carry an elevation.
    is_3d : bool, default=False
        Create an empty 3D list. Ignored when ``eles`` is given.

    Examples
    --------
    >>> pl = PointList.from_coords([(52.5, 13.4), (52.51, 13.41)])
    >>> len(pl), pl.is_3d
    (2, False)
    >>> pl.add(52.52, 13.42)
    >>> pl.latitude(2)
    52.52
    """

    def __init__(self, lats=None, lons=None, eles=None, is_3d: bool = False):
        lats = np.asarray([] if lats is None else lats, dtype=float)
        lons = np.asarray([] if lons is None else lons, dtype=float)
        if lats.shape != lons.shape or lats.ndim != 1:
            raise ValueError("lats and lons must be 1D arrays of the same length")

        if eles is not None:
            eles = np.asarray(eles, dtype=float)
            if eles.shape != lats.shape:
                raise ValueError("eles must have the same length as lats and lons")
            is_3d = True
        elif is_3d:
            if len(lats):
                raise ValueError("a 3D point list needs an elevation for every point")
            eles = np.asarray([], dtype=float)

        self._lats = lats
        self._lons = lons
        self._eles = eles

    @classmethod
    def from_coords(cls, coords: Iterable[Tuple[float, ...]]) -> "PointList":
        """
        Build a point list from ``(lat, lon)`` or ``(lat, lon, ele)`` tuples.

        All tuples must have the same arity.
        """
        coords = [tuple(c) for c in coords]
        if not coords:
            return cls()
        arity = {len(c) for c in coords}
        if arity == {2}:
            lats, lons = zip(*coords)
            return cls(lats, lons)
        if arity == {3}:
            lats, lons, eles = zip(*coords)
            return cls(lats, lons, eles)
        raise ValueError("coordinates must all be (lat, lon) or all be (lat, lon, ele)")

    @property
    def is_3d(self) -> bool:
        return self._eles is not None

    def size(self) -> int:
        return len(self._lats)

    def __len__(self):
        return len(self._lats)

    def is_empty(self) -> bool:
        return len(self._lats) == 0

    def latitude(self, index: int) -> float:
        return float(self._lats[index])

    def longitude(self, index: int) -> float:
        return float(self._lons[index])

    def elevation(self, index: int) -> float:
        """Elevation in metres, or ``nan`` for a 2D list."""
        if self._eles is None:
            # still raise IndexError for out-of-range access
            self._lats[index]
            return float("nan")
        return float(self._eles[index])

    def add(self, lat: float, lon: float, ele: Optional[float] = None) -> None:
        """
        Append one point. 3D lists require ``ele``; 2D lists reject it.

        Each call copies the underlying arrays, so building a long list point
        by point is quadratic. Use ``from_coords`` or the array constructor
        for bulk geometry.
        """
        if self.is_3d:
            if ele is None:
                raise ValueError("elevation required for a 3D point list")
            self._eles = np.append(self._eles, float(ele))
        elif ele is not None:
            raise ValueError("cannot add an elevation to a 2D point list")
        self._lats = np.append(self._lats, float(lat))
        self._lons = np.append(self._lons, float(lon))

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        if self.is_3d:
            return self.latitude(index), self.longitude(index), self.elevation(index)
        return self.latitude(index), self.longitude(index)

    def __iter__(self) -> Iterator[Tuple[float, ...]]:
        for i in range(len(self)):
            yield self[i]

    def to_numpy(self) -> np.ndarray:
        """Return an ``(n, 2)`` or ``(n, 3)`` array of lat, lon[, ele]."""
        cols = [self._lats, self._lons]
        if self.is_3d:
            cols.append(self._eles)
        return np.column_stack(cols) if len(self) else np.empty((0, len(cols)))

    def __eq__(self, other):
        if not isinstance(other, PointList):
            return NotImplemented
        return np.array_equal(self.to_numpy(), other.to_numpy()) and self.is_3d == other.is_3d

    __hash__ = None

    def __repr__(self):
        dims = "3D" if self.is_3d else "2D"
        return f"PointList({dims}, {list(self)})"
