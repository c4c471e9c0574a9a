"""Tests for formulas module."""

import numpy as np
import pytest

from helpers import formulas


class TestMajority:
    def test_even_legislature(self):
        assert formulas.majority_threshold(100) == 51

    def test_odd_legislature(self):
        assert formulas.majority_threshold(101) == 51

    def test_tiny(self):
        assert formulas.majority_threshold(1) == 1
        assert formulas.majority_threshold(2) == 2


class TestWeightedMedian:
    def test_symmetric(self):
        assert formulas.weighted_median([-1, 0, 1], [5, 5, 5]) == 0

    def test_matches_expanded_sample(self):
        values, weights = [3.0, -2.0, 7.0, 0.5], [4, 1, 6, 3]
        expected = np.median(np.repeat(values, weights))
        assert formulas.weighted_median(values, weights) == pytest.approx(expected)

    def test_even_sample_averages_middle(self):
        assert formulas.weighted_median([1, 2], [1, 1]) == 1.5

    def test_zero_weights_ignored(self):
        assert formulas.weighted_median([100, 1, 2], [0, 1, 2]) == 2

    def test_heavy_party_dominates(self):
        assert formulas.weighted_median([-9, 4, 9], [10, 60, 30]) == 4

    def test_empty(self):
        with pytest.raises(ValueError):
            formulas.weighted_median([], [])

    def test_all_zero_weights(self):
        with pytest.raises(ValueError):
            formulas.weighted_median([1, 2], [0, 0])


class TestGridAxis:
    def test_includes_stop_on_lattice(self):
        assert formulas.grid_axis(-1, 1, 0.5).tolist() == [-1.0, -0.5, 0.0, 0.5, 1.0]

    def test_stops_below_off_lattice_stop(self):
        assert formulas.grid_axis(0, 1, 0.3).tolist() == [0.0, 0.3, 0.6, 0.9]

    def test_tenth_step(self):
        axis = formulas.grid_axis(-10, 10, 0.1)
        assert len(axis) == 201
        assert axis[0] == -10.0
        assert axis[-1] == 10.0
        assert axis[37] == -6.3

    def test_single_point(self):
        assert formulas.grid_axis(2, 2, 0.1).tolist() == [2.0]


class TestSnap:
    def test_snap_down(self):
        assert formulas.snap_down(-7.03, 0.1) == -7.1
        assert formulas.snap_down(-7.0, 0.1) == -7.0

    def test_snap_up(self):
        assert formulas.snap_up(7.03, 0.1) == 7.1
        assert formulas.snap_up(8.0, 0.25) == 8.0


class TestDistance:
    def test_pythagorean(self):
        assert formulas.distance(0, 0, 3, 4) == 5.0

    def test_arrays(self):
        result = formulas.distance(np.array([0.0, 1.0]), 0.0, 0.0, 0.0)
        assert result.tolist() == [0.0, 1.0]


class TestShare:
    def test_quarter(self):
        assert formulas.share(1, 4) == 25.0

    def test_empty(self):
        assert formulas.share(0, 0) == 0.0
