"""Domain layer: coordinates, marking predicate, cache, fields and clusters."""

from slime_search.domain.cache import CoordinateValueCache
from slime_search.domain.cluster import Cluster, ClusterRegistry, flood_fill
from slime_search.domain.coordinates import (
    Coordinate,
    coordinate_value,
    coordinate_values,
    neighbors4,
)
from slime_search.domain.field import MarkingField, SeedField, SetField
from slime_search.domain.marking import is_marked, marked_mask

__all__ = [
    "Cluster",
    "ClusterRegistry",
    "Coordinate",
    "CoordinateValueCache",
    "MarkingField",
    "SeedField",
    "SetField",
    "coordinate_value",
    "coordinate_values",
    "flood_fill",
    "is_marked",
    "marked_mask",
    "neighbors4",
]
