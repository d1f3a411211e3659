"""Tests for slime_search.metrics.rectangle."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from slime_search.metrics.rectangle import (
    RectangleDimensions,
    RectanglePlacement,
    largest_rectangle,
    largest_rectangle_bounds,
    largest_rectangle_in_histogram,
)


def _brute_force_area(grid: np.ndarray) -> int:
    rows, cols = grid.shape
    best = 0
    for top in range(rows):
        for bottom in range(top, rows):
            for left in range(cols):
                for right in range(left, cols):
                    if grid[top : bottom + 1, left : right + 1].all():
                        best = max(best, (bottom - top + 1) * (right - left + 1))
    return best


def _plus(size: int, arm: int) -> np.ndarray:
    grid = np.zeros((size, size), dtype=bool)
    lo = (size - arm) // 2
    grid[lo : lo + arm, :] = True
    grid[:, lo : lo + arm] = True
    return grid


class TestHistogram:
    def test_classic_example(self) -> None:
        assert largest_rectangle_in_histogram([2, 1, 5, 6, 2, 3]) == (2, 5)

    def test_empty(self) -> None:
        assert largest_rectangle_in_histogram([]) == (0, 0)
        assert largest_rectangle_in_histogram([0, 0, 0]) == (0, 0)

    def test_first_maximum_kept_on_tie(self) -> None:
        # The 1x3 bar is found first; the later 3x1 slab has equal area.
        assert largest_rectangle_in_histogram([3, 0, 1, 1, 1]) == (1, 3)

    def test_flush_uses_histogram_length(self) -> None:
        assert largest_rectangle_in_histogram([1, 2, 3, 4]) == (2, 3)


class TestLargestRectangle:
    @pytest.mark.parametrize("width,height", [(1, 1), (3, 3), (5, 2), (1, 7)])
    def test_full_box(self, width: int, height: int) -> None:
        bitmap = np.ones((height, width), dtype=bool)
        dims = largest_rectangle(bitmap)
        assert dims == RectangleDimensions(width, height)
        assert dims.area == width * height

    def test_empty_bitmap(self) -> None:
        assert largest_rectangle(np.zeros((4, 6), dtype=bool)) == (0, 0)
        assert largest_rectangle(np.zeros((0, 0), dtype=bool)) == (0, 0)

    def test_width_follows_columns(self) -> None:
        assert largest_rectangle([[True, True, True], [True, True, True]]) == (3, 2)

    def test_thin_plus_prefers_first_row(self) -> None:
        # The horizontal bar (row 2) is reached before the vertical bar completes.
        assert largest_rectangle(_plus(5, 1)) == (5, 1)

    @pytest.mark.parametrize("size,arm", [(5, 1), (7, 3), (9, 3), (6, 2)])
    def test_plus_matches_brute_force(self, size: int, arm: int) -> None:
        grid = _plus(size, arm)
        assert largest_rectangle(grid).area == _brute_force_area(grid)

    @pytest.mark.parametrize("seed", range(8))
    def test_random_grids_match_brute_force(self, seed: int) -> None:
        rng = Random(seed)
        rows, cols = rng.randint(1, 7), rng.randint(1, 7)
        grid = np.array([[rng.random() < 0.7 for _ in range(cols)] for _ in range(rows)])
        assert largest_rectangle(grid).area == _brute_force_area(grid)


class TestLargestRectangleBounds:
    def test_locates_rectangle(self) -> None:
        grid = np.zeros((5, 6), dtype=bool)
        grid[1:4, 2:6] = True
        assert largest_rectangle_bounds(grid) == RectanglePlacement(2, 1, 4, 3)

    @pytest.mark.parametrize("seed", range(5))
    def test_placement_is_all_true(self, seed: int) -> None:
        rng = Random(100 + seed)
        grid = np.array([[rng.random() < 0.75 for _ in range(6)] for _ in range(6)])
        left, top, width, height = largest_rectangle_bounds(grid)
        if width:
            assert grid[top : top + height, left : left + width].all()
        assert (width, height) == largest_rectangle(grid)
