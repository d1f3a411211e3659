"""Simulation layer: the per-seed scan engine and seed sources."""

from slime_search.simulation.engine import (
    accept_cluster,
    build_report,
    run_seed_search,
    scan_seed,
)
from slime_search.simulation.seeds import parse_seed_list, random_seeds, sequential_seeds

__all__ = [
    "accept_cluster",
    "build_report",
    "parse_seed_list",
    "random_seeds",
    "run_seed_search",
    "scan_seed",
    "sequential_seeds",
]
