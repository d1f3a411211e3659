"""Cluster scoring metrics."""

from slime_search.metrics.rectangle import (
    RectangleDimensions,
    RectanglePlacement,
    largest_rectangle,
    largest_rectangle_bounds,
    largest_rectangle_in_histogram,
)

__all__ = [
    "RectangleDimensions",
    "RectanglePlacement",
    "largest_rectangle",
    "largest_rectangle_bounds",
    "largest_rectangle_in_histogram",
]
