"""Cluster discovery via flood fill, cluster bitmaps and per-scan dedup.

A cluster is a maximal 4-connected set of marked chunks. Once discovered it
is frozen as a sorted coordinate tuple; that tuple is the cluster's
canonical signature, identical for any flood fill started inside the same
connected region.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from slime_search.domain.coordinates import Coordinate, neighbors4
from slime_search.domain.field import MarkingField


@dataclass(frozen=True)
class Cluster:
    """A discovered cluster: flood-fill origin plus sorted member chunks."""

    origin: Coordinate
    coordinates: tuple[Coordinate, ...]

    @classmethod
    def from_coordinates(cls, origin: tuple[int, int], members: set[Coordinate]) -> Cluster:
        if not members:
            raise ValueError("cluster must contain at least one coordinate")
        return cls(origin=Coordinate(*origin), coordinates=tuple(sorted(members)))

    @property
    def size(self) -> int:
        return len(self.coordinates)

    @property
    def signature(self) -> tuple[Coordinate, ...]:
        return self.coordinates

    def bounds(self) -> tuple[int, int, int, int]:
        """Return ``(min_x, min_z, max_x, max_z)`` of the bounding box."""
        xs = [c.x for c in self.coordinates]
        zs = [c.z for c in self.coordinates]
        return min(xs), min(zs), max(xs), max(zs)

    def to_bitmap(self) -> np.ndarray:
        """Return the (depth, width) bool grid over the bounding box.

        Rows are z offsets from ``min_z`` and columns are x offsets from
        ``min_x``.
        """
        min_x, min_z, max_x, max_z = self.bounds()
        bitmap = np.zeros((max_z - min_z + 1, max_x - min_x + 1), dtype=bool)
        for x, z in self.coordinates:
            bitmap[z - min_z, x - min_x] = True
        return bitmap


def flood_fill(
    origin: tuple[int, int],
    field: MarkingField,
    visited: set[Coordinate] | None = None,
) -> Cluster:
    """Collect the 4-connected marked region containing ``origin``.

    Neighbours are always one chunk away, independent of any scan spacing.
    ``visited`` is owned by this call; a fresh set is used when omitted.
    Raises ``ValueError`` when ``origin`` itself is unmarked.
    """
    start = Coordinate(*origin)
    if not field.is_marked(start.x, start.z):
        raise ValueError(f"origin {tuple(start)} is not marked")

    seen = set() if visited is None else visited
    seen.add(start)
    members: set[Coordinate] = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        for neighbor in neighbors4(current):
            if neighbor in seen:
                continue
            seen.add(neighbor)
            if not field.is_marked(neighbor.x, neighbor.z):
                continue
            members.add(neighbor)
            stack.append(neighbor)

    return Cluster.from_coordinates(start, members)


class ClusterRegistry:
    """Signatures of clusters registered during one scan."""

    def __init__(self) -> None:
        self._signatures: set[tuple[Coordinate, ...]] = set()

    def __len__(self) -> int:
        return len(self._signatures)

    def __contains__(self, cluster: object) -> bool:
        return isinstance(cluster, Cluster) and cluster.signature in self._signatures

    def register(self, cluster: Cluster) -> bool:
        """Insert ``cluster``; return False when its signature is already present."""
        if cluster.signature in self._signatures:
            return False
        self._signatures.add(cluster.signature)
        return True

    def reset(self) -> None:
        self._signatures.clear()
