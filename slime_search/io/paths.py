"""Path construction helpers for report output directories."""

from __future__ import annotations

from pathlib import Path


def reports_path(out_dir: Path) -> Path:
    """Return path to the cluster reports Parquet file."""
    return out_dir / "cluster_reports.parquet"


def images_dir(out_dir: Path) -> Path:
    """Return path to the rendered cluster image subdirectory."""
    return out_dir / "images"


def cluster_image_path(image_dir: Path, seed: int, x: int, z: int) -> Path:
    """Return the PNG path for the cluster found at chunk (x, z) under ``seed``."""
    return image_dir / f"seed{seed}_x{x}_z{z}.png"
