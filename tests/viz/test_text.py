"""Tests for viz/text.py: console grids for clusters and regions."""

from __future__ import annotations

from slime_search.domain.cluster import Cluster
from slime_search.domain.coordinates import Coordinate
from slime_search.domain.field import SetField
from slime_search.viz.text import MARKED_GLYPH, UNMARKED_GLYPH, render_cluster, render_region


def test_render_cluster_rows_follow_z() -> None:
    members = {Coordinate(*c) for c in [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]}
    text = render_cluster(Cluster.from_coordinates((0, 0), members))
    assert text.splitlines() == ["■ □ □", "■ □ □", "■ ■ ■"]


def test_render_cluster_single_chunk() -> None:
    cluster = Cluster.from_coordinates((5, 5), {Coordinate(5, 5)})
    assert render_cluster(cluster) == MARKED_GLYPH


def test_render_region_labels_axes() -> None:
    text = render_region(SetField([(0, 0)]), radius=1)
    assert text.splitlines() == [
        "   -1  0",
        "-1  □  □",
        " 0  □  ■",
    ]


def test_render_region_respects_spacing() -> None:
    lines = render_region(SetField([(-4, 2)]), radius=4, spacing=2).splitlines()
    assert lines[0].split() == ["-4", "-2", "0", "2"]
    assert len(lines) == 5
    row = lines[4].split()
    assert row[0] == "2"
    assert row[1:] == [MARKED_GLYPH, UNMARKED_GLYPH, UNMARKED_GLYPH, UNMARKED_GLYPH]
