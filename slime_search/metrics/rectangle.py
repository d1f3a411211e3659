"""Largest solid axis-aligned rectangle inside a cluster bitmap.

Each bitmap row turns the columns into a histogram: bar ``j`` counts the
consecutive true cells ending at the current row in column ``j``. The
largest rectangle whose bottom edge lies on that row is the largest
rectangle under the histogram, found with a monotonic stack of
``(height, start)`` pairs in O(columns). Running that for every row gives
O(rows x columns) overall.

Ties keep the first maximum found, scanning rows top to bottom and, within a
row, in stack-pop order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np


class RectangleDimensions(NamedTuple):
    """Rectangle size in chunks: width along x (columns), height along z (rows)."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


class RectanglePlacement(NamedTuple):
    """Rectangle position in bitmap cells: top-left corner plus dimensions."""

    left: int
    top: int
    width: int
    height: int


def _scan_histogram(heights: Sequence[int]) -> tuple[int, int, int]:
    """Return ``(width, height, left)`` of the histogram's largest rectangle."""
    best_area = 0
    best = (0, 0, 0)
    stack: list[tuple[int, int]] = []

    def consider(bar_height: int, start: int, end: int) -> None:
        nonlocal best_area, best
        area = bar_height * (end - start)
        if area > best_area:
            best_area = area
            best = (end - start, bar_height, start)

    for i, h in enumerate(heights):
        if not stack or h > stack[-1][0]:
            stack.append((h, i))
        elif h < stack[-1][0]:
            start = i
            while stack and h < stack[-1][0]:
                bar_height, start = stack.pop()
                consider(bar_height, start, i)
            stack.append((h, start))

    end = len(heights)
    while stack:
        bar_height, start = stack.pop()
        consider(bar_height, start, end)
    return best


def largest_rectangle_in_histogram(heights: Sequence[int]) -> RectangleDimensions:
    """Largest rectangle under a bar chart, as ``(width, height)``."""
    width, height, _ = _scan_histogram([int(h) for h in heights])
    return RectangleDimensions(width, height)


def largest_rectangle_bounds(bitmap: np.ndarray | Sequence[Sequence[bool]]) -> RectanglePlacement:
    """Locate the largest all-true rectangle in ``bitmap``.

    Returns ``RectanglePlacement(0, 0, 0, 0)`` when no cell is true.
    """
    grid = np.asarray(bitmap, dtype=bool)
    if grid.ndim != 2 or grid.size == 0:
        return RectanglePlacement(0, 0, 0, 0)

    heights = [0] * grid.shape[1]
    best_area = 0
    best = RectanglePlacement(0, 0, 0, 0)
    for row_index, row in enumerate(grid.tolist()):
        for col, filled in enumerate(row):
            heights[col] = heights[col] + 1 if filled else 0
        width, height, left = _scan_histogram(heights)
        if width * height > best_area:
            best_area = width * height
            best = RectanglePlacement(left, row_index + 1 - height, width, height)
    return best


def largest_rectangle(bitmap: np.ndarray | Sequence[Sequence[bool]]) -> RectangleDimensions:
    """Dimensions of the largest all-true axis-aligned rectangle in ``bitmap``.

    Returns ``(0, 0)`` when no cell is true.
    """
    placement = largest_rectangle_bounds(bitmap)
    return RectangleDimensions(placement.width, placement.height)
