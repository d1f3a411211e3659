"""Slime-chunk marking predicate.

A chunk is marked when the first ``nextInt(10)``-style draw of a 48-bit
linear congruential generator seeded from ``coordinate_value + seed`` is
zero. All arithmetic is unsigned with explicit 48-bit masks.
"""

from __future__ import annotations

import numpy as np

from slime_search.config.constants import (
    LCG_INCREMENT,
    LCG_MULTIPLIER,
    LCG_OUTPUT_SHIFT,
    MASK_48,
    SLIME_CHANCE_DENOMINATOR,
    SLIME_SCRAMBLE,
)

_MASK_64 = (1 << 64) - 1


def is_marked(coordinate_value: int, seed: int) -> bool:
    """Return whether a chunk with ``coordinate_value`` is marked under ``seed``."""
    state = ((coordinate_value + seed) ^ SLIME_SCRAMBLE ^ LCG_MULTIPLIER) & MASK_48
    state = (state * LCG_MULTIPLIER + LCG_INCREMENT) & MASK_48
    return (state >> LCG_OUTPUT_SHIFT) % SLIME_CHANCE_DENOMINATOR == 0


def marked_mask(values: np.ndarray, seed: int) -> np.ndarray:
    """Vectorised :func:`is_marked` over an int64 array of coordinate values.

    uint64 overflow in the add and multiply is intended: only the low 48 bits
    survive the masks, and those are exact modulo 2**64.
    """
    state = np.asarray(values, dtype=np.int64).astype(np.uint64)
    with np.errstate(over="ignore"):
        state = state + np.uint64(seed & _MASK_64)
        state = (state ^ np.uint64(SLIME_SCRAMBLE ^ LCG_MULTIPLIER)) & np.uint64(MASK_48)
        state = (state * np.uint64(LCG_MULTIPLIER) + np.uint64(LCG_INCREMENT)) & np.uint64(
            MASK_48
        )
    output = state >> np.uint64(LCG_OUTPUT_SHIFT)
    return output % np.uint64(SLIME_CHANCE_DENOMINATOR) == 0
