"""Parquet schema for cluster reports written by the Parquet sink."""

from __future__ import annotations

import pyarrow as pa

REPORT_SCHEMA_VERSION = 1

REPORT_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("seed", pa.int64()),
        ("origin_x", pa.int64()),
        ("origin_z", pa.int64()),
        ("area", pa.int64()),
        ("size", pa.int64()),
        ("rect_width", pa.int64()),
        ("rect_height", pa.int64()),
        ("chunks_x", pa.list_(pa.int64())),
        ("chunks_z", pa.list_(pa.int64())),
    ]
)
