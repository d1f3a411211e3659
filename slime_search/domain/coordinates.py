"""Chunk coordinates and the seed-independent coordinate value function.

The coordinate value is the polynomial half of the slime-chunk test. Its
width semantics are fixed: the ``x*x``, ``x`` and ``z`` terms wrap as signed
32-bit integers (and the two x terms are summed in 32-bit), ``z*z`` wraps to
32 bits before being widened for its multiplier, and the final sum is a
signed 64-bit value. Both the scalar and the numpy implementations below
reproduce that bit for bit.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from slime_search.config.constants import (
    CHUNK_SIZE,
    X_MULTIPLIER,
    X_SQUARED_MULTIPLIER,
    Z_MULTIPLIER,
    Z_SQUARED_MULTIPLIER,
)

_INT32_OFFSET = 1 << 31
_UINT32_MASK = 0xFFFFFFFF


class Coordinate(NamedTuple):
    """Chunk position on the unbounded lattice, ordered by x then z."""

    x: int
    z: int

    def to_block(self) -> tuple[int, int]:
        """Return the block coordinates of the chunk's north-west corner."""
        return self.x * CHUNK_SIZE, self.z * CHUNK_SIZE


def _wrap_int32(value: int) -> int:
    return ((value + _INT32_OFFSET) & _UINT32_MASK) - _INT32_OFFSET


def _wrap_int32_array(values: np.ndarray) -> np.ndarray:
    return ((values + _INT32_OFFSET) & _UINT32_MASK) - _INT32_OFFSET


def x_component(x: int) -> int:
    """Return the 32-bit x half of the coordinate value."""
    x_squared_term = _wrap_int32(_wrap_int32(x * x) * X_SQUARED_MULTIPLIER)
    return _wrap_int32(x_squared_term + _wrap_int32(x * X_MULTIPLIER))


def z_component(z: int) -> int:
    """Return the widened z half of the coordinate value."""
    return _wrap_int32(z * z) * Z_SQUARED_MULTIPLIER + _wrap_int32(z * Z_MULTIPLIER)


def coordinate_value(x: int, z: int) -> int:
    """Return the seed-independent coordinate value of chunk (x, z)."""
    return x_component(x) + z_component(z)


def coordinate_values(xs: np.ndarray, zs: np.ndarray) -> np.ndarray:
    """Vectorised :func:`coordinate_value`; ``xs`` and ``zs`` broadcast together.

    Inputs must stay within ``MAX_COORDINATE`` so the intermediate products
    fit in int64 before wrapping.
    """
    x = np.asarray(xs, dtype=np.int64)
    z = np.asarray(zs, dtype=np.int64)
    x_squared_term = _wrap_int32_array(_wrap_int32_array(x * x) * X_SQUARED_MULTIPLIER)
    x_part = _wrap_int32_array(x_squared_term + _wrap_int32_array(x * X_MULTIPLIER))
    z_part = _wrap_int32_array(z * z) * Z_SQUARED_MULTIPLIER + _wrap_int32_array(z * Z_MULTIPLIER)
    return x_part + z_part


def neighbors4(coord: Coordinate) -> tuple[Coordinate, ...]:
    """Return the four edge-adjacent neighbours of ``coord``."""
    x, z = coord
    return (
        Coordinate(x + 1, z),
        Coordinate(x - 1, z),
        Coordinate(x, z + 1),
        Coordinate(x, z - 1),
    )
