"""Console rendering of clusters and scan regions."""

from __future__ import annotations

from slime_search.domain.cluster import Cluster
from slime_search.domain.field import MarkingField

MARKED_GLYPH = "■"
UNMARKED_GLYPH = "□"


def _glyph(marked: bool) -> str:
    return MARKED_GLYPH if marked else UNMARKED_GLYPH


def render_cluster(cluster: Cluster) -> str:
    """Render the cluster's bounding box, one line per z, x increasing rightwards."""
    bitmap = cluster.to_bitmap()
    return "\n".join(" ".join(_glyph(bool(cell)) for cell in row) for row in bitmap)


def render_region(field: MarkingField, radius: int, spacing: int = 1) -> str:
    """Render the square region ``range(-radius, radius, spacing)`` with axis labels.

    The first line holds x labels; every following line starts with its z
    label.
    """
    axis = range(-radius, radius, spacing)
    width = max(len(str(v)) for v in axis)
    lines = [" " * width + " " + " ".join(f"{x:>{width}}" for x in axis)]
    for z in axis:
        cells = " ".join(f"{_glyph(field.is_marked(x, z)):>{width}}" for x in axis)
        lines.append(f"{z:>{width}} {cells}")
    return "\n".join(lines)
