"""Centralized domain constants for slime-chunk scanning.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

SCAN_RADIUS = 5_000
"""Default half-width of the square scan region, in chunks."""

SCAN_SPACING = 2
"""Default step between scanned origins, in chunks."""

MIN_CLUSTER_SIZE = 14
"""Default minimum cluster size (and rectangle-area threshold)."""

MAX_COORDINATE = 2**20
"""Largest absolute chunk coordinate the coordinate value function supports."""

CHUNK_SIZE = 16
"""Blocks per chunk edge; converts chunk coordinates to block coordinates."""

# Coordinate value polynomial multipliers.
X_SQUARED_MULTIPLIER = 0x4C1906
X_MULTIPLIER = 0x5AC0DB
Z_SQUARED_MULTIPLIER = 0x4307A7
Z_MULTIPLIER = 0x5F24F

SLIME_SCRAMBLE = 0x3AD8025F
"""Seed-mixing constant applied before the LCG scramble."""

LCG_MULTIPLIER = 0x5DEECE66D
"""48-bit linear congruential multiplier (also the initial scramble mask)."""

LCG_INCREMENT = 0xB
"""48-bit linear congruential increment."""

MASK_48 = (1 << 48) - 1
"""Mask keeping the low 48 bits of the generator state."""

LCG_OUTPUT_SHIFT = 17
"""Right shift that turns the 48-bit state into a 31-bit output."""

SLIME_CHANCE_DENOMINATOR = 10
"""A chunk is marked when the generator output is divisible by this."""

HTTP_TIMEOUT_SECONDS = 30
HTTP_MAX_RETRIES = 3
HTTP_RETRY_BACKOFF_SECONDS = 1.0
RETRYABLE_HTTP_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

REPORT_FLUSH_THRESHOLD = 256
"""Flush buffered report rows to Parquet once this in-memory row count is reached."""
