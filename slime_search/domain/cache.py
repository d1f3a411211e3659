"""Precomputed coordinate values for a square scan region."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from slime_search.config.constants import MAX_COORDINATE
from slime_search.domain.coordinates import (
    Coordinate,
    coordinate_value,
    coordinate_values,
)


class CoordinateValueCache:
    """Coordinate values for ``x, z in range(-radius, radius, spacing)``.

    Scan order is z-major: z is the outer loop, x the inner one, and
    :attr:`values` is the flat sequence in that order. The coordinate value
    separates into an x half and a z half, so only those two vectors are
    stored; rows are rebuilt on demand with :meth:`row_values`.

    Lookups off the scan lattice fall back to the pure function, so the
    cache is a memo and never changes results. It holds no seed state and
    can be shared read-only between scans.
    """

    def __init__(self, radius: int, spacing: int = 1) -> None:
        if radius < 1:
            raise ValueError("radius must be >= 1")
        if radius > MAX_COORDINATE:
            raise ValueError(f"radius must be <= {MAX_COORDINATE}")
        if spacing < 1:
            raise ValueError("spacing must be >= 1")
        self.radius = radius
        self.spacing = spacing
        self.xs = np.arange(-radius, radius, spacing, dtype=np.int64)
        self.zs = self.xs.copy()
        self.row_length = len(self.xs)
        zero = np.zeros(1, dtype=np.int64)
        self._x_part = coordinate_values(self.xs, zero)
        self._z_part = coordinate_values(zero, self.zs)

    def __len__(self) -> int:
        return self.row_length * len(self.zs)

    @property
    def values(self) -> np.ndarray:
        """Flat int64 array of every cached value in scan order."""
        return (self._z_part[:, np.newaxis] + self._x_part[np.newaxis, :]).reshape(-1)

    def row_values(self, row: int) -> np.ndarray:
        """Return the values of scan row ``row`` (z = ``zs[row]``), x ascending."""
        return self._z_part[row] + self._x_part

    def index_of(self, x: int, z: int) -> int | None:
        """Return the flat index of (x, z), or None when it is not cached."""
        dx = x + self.radius
        dz = z + self.radius
        if dx < 0 or dz < 0 or dx % self.spacing or dz % self.spacing:
            return None
        col = dx // self.spacing
        row = dz // self.spacing
        if col >= self.row_length or row >= len(self.zs):
            return None
        return row * self.row_length + col

    def coordinate_at(self, index: int) -> Coordinate:
        """Return the coordinate stored at flat ``index``."""
        row, col = divmod(index, self.row_length)
        return Coordinate(int(self.xs[col]), int(self.zs[row]))

    def value_at(self, x: int, z: int) -> int:
        """Return the coordinate value of (x, z), computing it when off-lattice."""
        index = self.index_of(x, z)
        if index is None:
            return coordinate_value(x, z)
        row, col = divmod(index, self.row_length)
        return int(self._z_part[row] + self._x_part[col])

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Yield cached coordinates in scan order."""
        for z in self.zs:
            for x in self.xs:
                yield Coordinate(int(x), int(z))
