"""Configuration dataclasses and result containers for slime-chunk scans.

All frozen dataclasses that parameterise a scan, and the per-seed result
record the engine returns, live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from slime_search.config.constants import (
    MAX_COORDINATE,
    MIN_CLUSTER_SIZE,
    SCAN_RADIUS,
    SCAN_SPACING,
)

__all__ = [
    "MAX_COORDINATE",
    "ScanConfig",
    "ScanResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScanResult:
    """Top-level result for one scanned seed."""

    seed: int
    clusters_found: int
    clusters_registered: int
    reports_sent: int
    reports_failed: int
    cancelled: bool = False


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScanConfig:
    """Region, thresholds and acceptance toggles for one seed scan.

    ``radius`` is the half-width of the square region centred on chunk
    (0, 0); the scanned origins are ``range(-radius, radius, spacing)`` on
    both axes. ``min_rect_area`` defaults to ``min_size``.
    """

    radius: int = SCAN_RADIUS
    spacing: int = SCAN_SPACING
    min_size: int = MIN_CLUSTER_SIZE
    min_rect_area: int | None = None
    rectangles_only: bool = True
    allow_one_wides: bool = True
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.radius < 1:
            raise ValueError("radius must be >= 1")
        if self.radius > MAX_COORDINATE:
            raise ValueError(f"radius must be <= {MAX_COORDINATE}")
        if self.spacing < 1:
            raise ValueError("spacing must be >= 1")
        if self.min_size < 1:
            raise ValueError("min_size must be >= 1")
        if self.min_rect_area is not None and self.min_rect_area < 1:
            raise ValueError("min_rect_area must be >= 1")

    @property
    def rect_area_threshold(self) -> int:
        """Rectangle area a cluster must exceed in rectangles-only mode."""
        return self.min_size if self.min_rect_area is None else self.min_rect_area
