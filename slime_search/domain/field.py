"""Marking fields: which chunks of the lattice are marked for one scan.

:class:`SeedField` is the real slime-chunk map of a world seed.
:class:`SetField` marks an explicit set of chunks, for synthetic maps.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from slime_search.domain.cache import CoordinateValueCache
from slime_search.domain.coordinates import Coordinate, coordinate_value
from slime_search.domain.marking import is_marked, marked_mask


class MarkingField:
    """Read-only boolean view of the chunk lattice."""

    def is_marked(self, x: int, z: int) -> bool:
        raise NotImplementedError

    def marked_columns(self, cache: CoordinateValueCache, row: int) -> np.ndarray:
        """Return ascending column indices of marked cells in scan row ``row``."""
        z = int(cache.zs[row])
        flags = [self.is_marked(int(x), z) for x in cache.xs]
        return np.flatnonzero(np.asarray(flags, dtype=bool))


class SeedField(MarkingField):
    """Slime-chunk map of ``seed``.

    Scan rows are marked in one vectorised pass over the cached values;
    single-cell lookups (flood fill) use the cache when the cell is on the
    scan lattice and the pure function otherwise.
    """

    def __init__(self, seed: int, cache: CoordinateValueCache | None = None) -> None:
        self.seed = seed
        self.cache = cache

    def is_marked(self, x: int, z: int) -> bool:
        if self.cache is not None:
            value = self.cache.value_at(x, z)
        else:
            value = coordinate_value(x, z)
        return is_marked(value, self.seed)

    def marked_columns(self, cache: CoordinateValueCache, row: int) -> np.ndarray:
        return np.flatnonzero(marked_mask(cache.row_values(row), self.seed))


class SetField(MarkingField):
    """Field whose marked chunks are exactly ``marked``."""

    def __init__(self, marked: Iterable[tuple[int, int]]) -> None:
        self.marked = frozenset(Coordinate(int(x), int(z)) for x, z in marked)

    def is_marked(self, x: int, z: int) -> bool:
        return (x, z) in self.marked

    @classmethod
    def from_bitmap(cls, bitmap: np.ndarray, x0: int = 0, z0: int = 0) -> SetField:
        """Build a field from a (z, x) boolean array anchored at chunk (x0, z0)."""
        rows, cols = np.nonzero(np.asarray(bitmap, dtype=bool))
        return cls((x0 + int(c), z0 + int(r)) for r, c in zip(rows, cols, strict=True))
