"""Seed sources for the search loop."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from random import Random

_MAX_SEED = (1 << 63) - 1


def random_seeds(rng: Random | None = None) -> Iterator[int]:
    """Yield signed 64-bit seeds forever: uniform magnitude, random sign."""
    rng = rng or Random()
    while True:
        magnitude = rng.randint(0, _MAX_SEED)
        yield magnitude if rng.random() < 0.5 else -magnitude


def sequential_seeds(start: int = 0) -> Iterator[int]:
    """Yield ``start, start + 1, ...`` forever."""
    return itertools.count(start)


def parse_seed_list(raw_seeds: str) -> tuple[int, ...]:
    """Parse a comma-delimited list of signed 64-bit seeds."""
    parts = [part.strip() for part in raw_seeds.split(",") if part.strip()]
    if not parts:
        raise ValueError("seeds must not be empty")

    seeds: list[int] = []
    for part in parts:
        try:
            seed = int(part)
        except ValueError as exc:
            raise ValueError(f"seeds must contain integers, got {part!r}") from exc
        if not -(_MAX_SEED + 1) <= seed <= _MAX_SEED:
            raise ValueError(f"seed {seed} does not fit in 64 bits")
        seeds.append(seed)
    return tuple(seeds)
