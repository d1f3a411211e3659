"""Configuration layer: constants and typed config dataclasses."""

from slime_search.config.constants import (
    CHUNK_SIZE,
    MAX_COORDINATE,
    MIN_CLUSTER_SIZE,
    SCAN_RADIUS,
    SCAN_SPACING,
)
from slime_search.config.types import ScanConfig, ScanResult

__all__ = [
    "CHUNK_SIZE",
    "MAX_COORDINATE",
    "MIN_CLUSTER_SIZE",
    "SCAN_RADIUS",
    "SCAN_SPACING",
    "ScanConfig",
    "ScanResult",
]
