"""Tests for viz/image.py: PNG rendering of cluster bitmaps."""

from __future__ import annotations

from pathlib import Path

from slime_search.domain.cluster import Cluster
from slime_search.domain.coordinates import Coordinate
from slime_search.viz.image import render_cluster_image

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_render_cluster_image_writes_png(tmp_path: Path) -> None:
    members = {Coordinate(x, z) for x in range(-2, 3) for z in range(4, 7)}
    members.add(Coordinate(3, 4))
    out = tmp_path / "deep" / "cluster.png"
    render_cluster_image(Cluster.from_coordinates((-2, 4), members), out, title="seed 1")
    assert out.read_bytes()[:8] == PNG_MAGIC


def test_render_single_chunk_cluster(tmp_path: Path) -> None:
    out = tmp_path / "single.png"
    render_cluster_image(Cluster.from_coordinates((0, 0), {Coordinate(0, 0)}), out)
    assert out.exists()
