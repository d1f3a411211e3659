"""Visualization layer: console grids and matplotlib cluster images."""

from slime_search.viz.text import MARKED_GLYPH, UNMARKED_GLYPH, render_cluster, render_region

__all__ = [
    "MARKED_GLYPH",
    "UNMARKED_GLYPH",
    "render_cluster",
    "render_region",
]
