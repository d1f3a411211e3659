"""Matplotlib rendering of a cluster bitmap with its best rectangle outlined."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.colors import ListedColormap  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from slime_search.domain.cluster import Cluster  # noqa: E402
from slime_search.metrics.rectangle import largest_rectangle_bounds  # noqa: E402

EMPTY_CELL_COLOR = "#f2f2f2"
SLIME_CELL_COLOR = "#6abe30"
RECTANGLE_COLOR = "#d62728"
GRID_LINE_COLOR = "#cccccc"


def render_cluster_image(
    cluster: Cluster,
    output_path: Path,
    title: str | None = None,
    cell_inches: float = 0.25,
) -> None:
    """Save a PNG of ``cluster``'s bitmap; axes are labelled in chunk coordinates."""
    bitmap = cluster.to_bitmap()
    min_x, min_z, _, _ = cluster.bounds()
    depth, width = bitmap.shape
    placement = largest_rectangle_bounds(bitmap)

    fig, ax = plt.subplots(
        figsize=(max(2.0, width * cell_inches + 1), max(2.0, depth * cell_inches + 1))
    )
    cmap = ListedColormap([EMPTY_CELL_COLOR, SLIME_CELL_COLOR])
    extent = (min_x - 0.5, min_x + width - 0.5, min_z + depth - 0.5, min_z - 0.5)
    ax.imshow(bitmap.astype(int), cmap=cmap, vmin=0, vmax=1, extent=extent, aspect="equal")
    for x in range(width + 1):
        ax.axvline(min_x + x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    for z in range(depth + 1):
        ax.axhline(min_z + z - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    if placement.width and placement.height:
        ax.add_patch(
            Rectangle(
                (min_x + placement.left - 0.5, min_z + placement.top - 0.5),
                placement.width,
                placement.height,
                fill=False,
                edgecolor=RECTANGLE_COLOR,
                linewidth=2,
            )
        )
    ax.set_xlabel("chunk x")
    ax.set_ylabel("chunk z")
    heading = f"{cluster.size} chunks, best rectangle {placement.width}x{placement.height}"
    ax.set_title(heading if title is None else f"{title}: {heading}")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
