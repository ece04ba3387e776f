"""Tests for age statistics."""
import pytest

from src.app.core.services.statistics import compute_age_statistics, round_half_up
from src.shared.exceptions import NoRecordsFound


class TestComputeAgeStatistics:
    """Tests for compute_age_statistics."""

    def test_two_ages(self):
        statistics = compute_age_statistics([20, 30])

        assert statistics.mean_age == 25.00
        assert statistics.std_dev == 5.00

    def test_single_age_has_zero_deviation(self):
        statistics = compute_age_statistics([42])

        assert statistics.mean_age == 42.0
        assert statistics.std_dev == 0.0

    def test_uses_population_deviation(self):
        # Sample deviation would be 1.29; population deviation is sqrt(1.25)
        statistics = compute_age_statistics([1, 2, 3, 4])

        assert statistics.mean_age == 2.5
        assert statistics.std_dev == 1.12

    def test_results_are_rounded_to_two_places(self):
        statistics = compute_age_statistics([10, 11, 11])

        assert statistics.mean_age == 10.67
        assert statistics.std_dev == 0.47

    def test_identical_ages(self):
        statistics = compute_age_statistics([0, 0, 0])

        assert statistics.mean_age == 0.0
        assert statistics.std_dev == 0.0

    def test_empty_sequence_raises_no_records(self):
        with pytest.raises(NoRecordsFound):
            compute_age_statistics([])


class TestRoundHalfUp:
    """Tests for the 2-decimal rounding helper."""

    def test_halves_round_away_from_zero(self):
        # Binary floats would round 2.675 down to 2.67
        assert round_half_up(2.675) == 2.68
        assert round_half_up(0.125) == 0.13

    def test_below_half_rounds_down(self):
        assert round_half_up(1.004) == 1.0
