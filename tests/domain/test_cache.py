"""Tests for slime_search.domain.cache."""

from __future__ import annotations

import pytest

from slime_search.domain.cache import CoordinateValueCache
from slime_search.domain.coordinates import Coordinate, coordinate_value


class TestCoordinateValueCache:
    def test_length_covers_half_open_region(self) -> None:
        assert len(CoordinateValueCache(4, 1)) == 64
        assert len(CoordinateValueCache(4, 2)) == 16
        assert len(CoordinateValueCache(5, 3)) == 16

    def test_scan_order_is_z_major(self) -> None:
        cache = CoordinateValueCache(2, 1)
        coords = list(cache.iter_coordinates())
        assert coords[:5] == [(-2, -2), (-1, -2), (0, -2), (1, -2), (-2, -1)]
        assert coords[-1] == (1, 1)

    def test_values_match_pure_function_in_scan_order(self) -> None:
        cache = CoordinateValueCache(6, 2)
        expected = [coordinate_value(c.x, c.z) for c in cache.iter_coordinates()]
        assert cache.values.tolist() == expected

    def test_row_values(self) -> None:
        cache = CoordinateValueCache(3, 1)
        assert cache.row_values(1).tolist() == [coordinate_value(x, -2) for x in range(-3, 3)]

    def test_index_round_trips_through_coordinate_at(self) -> None:
        cache = CoordinateValueCache(5, 3)
        for index, coord in enumerate(cache.iter_coordinates()):
            assert cache.index_of(coord.x, coord.z) == index
            assert cache.coordinate_at(index) == coord

    @pytest.mark.parametrize("x,z", [(-4, -5), (5, -5), (-5, 7), (-6, -5), (0, 0)])
    def test_index_of_off_lattice_is_none(self, x: int, z: int) -> None:
        cache = CoordinateValueCache(5, 3)
        assert cache.index_of(x, z) is None

    def test_value_at_falls_back_to_pure_function(self) -> None:
        cache = CoordinateValueCache(4, 2)
        assert cache.value_at(-4, 2) == coordinate_value(-4, 2)
        assert cache.value_at(-3, 2) == coordinate_value(-3, 2)
        assert cache.value_at(100, -100) == coordinate_value(100, -100)

    def test_coordinate_at_returns_coordinate(self) -> None:
        assert isinstance(CoordinateValueCache(2, 1).coordinate_at(0), Coordinate)

    @pytest.mark.parametrize("radius,spacing", [(0, 1), (2**20 + 1, 1), (4, 0)])
    def test_rejects_invalid_region(self, radius: int, spacing: int) -> None:
        with pytest.raises(ValueError):
            CoordinateValueCache(radius, spacing)
