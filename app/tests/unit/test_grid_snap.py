"""Tests for grid snapping (models/grid.py)."""

import pytest
from models.grid import COMPONENT_HEIGHT, COMPONENT_WIDTH, GRID_SIZE, snap, snap_point


class TestSnap:
    def test_zero(self):
        assert snap(0) == 0

    def test_exact_multiples_unchanged(self):
        assert snap(60) == 60
        assert snap(120) == 120

    def test_rounds_up_when_closer_to_higher_grid(self):
        assert snap(35) == 60
        assert snap(90) == 120

    def test_rounds_down_when_closer_to_lower_grid(self):
        assert snap(25) == 0
        assert snap(80) == 60

    def test_negative_values(self):
        assert snap(-10) == 0
        assert snap(-35) == -60

    def test_midpoints_round_toward_positive_infinity(self):
        assert snap(30) == 60
        assert snap(-30) == 0
        assert snap(150) == 180
        assert snap(-90) == -60

    @pytest.mark.parametrize("value", [-1000.5, -61, -29.9, 0.1, 17, 44.4, 299.99, 12345])
    def test_idempotent_and_on_grid(self, value):
        snapped = snap(value)
        assert snapped % GRID_SIZE == 0
        assert snap(snapped) == snapped

    @pytest.mark.parametrize("k", [-3, -1, 0, 1, 4])
    def test_half_open_interval_maps_to_k(self, k):
        low = k * GRID_SIZE - GRID_SIZE / 2
        high = k * GRID_SIZE + GRID_SIZE / 2
        assert snap(low) == k * GRID_SIZE
        assert snap(k * GRID_SIZE) == k * GRID_SIZE
        assert snap(high - 0.001) == k * GRID_SIZE
        assert snap(high) == (k + 1) * GRID_SIZE

    def test_returns_int(self):
        assert isinstance(snap(59.7), int)

    def test_custom_grid_size(self):
        assert snap(14, grid_size=10) == 10
        assert snap(15, grid_size=10) == 20


class TestSnapPoint:
    def test_snaps_both_coordinates(self):
        assert snap_point(35, 80) == (60, 60)


class TestComponentBox:
    def test_box_is_two_grid_units_wide_and_one_tall(self):
        assert COMPONENT_WIDTH == 2 * GRID_SIZE
        assert COMPONENT_HEIGHT == GRID_SIZE
