"""Tests for calendar projection helpers."""
from datetime import date

import pytest

from src.app.core.services.projection import add_years, project_date, whole_years_between


class TestProjectDate:
    """Tests for project_date."""

    def test_default_is_eighty_years(self):
        assert project_date(date(2000, 1, 1)) == date(2080, 1, 1)

    def test_custom_offset(self):
        assert project_date(date(1990, 7, 4), years=75) == date(2065, 7, 4)

    def test_leap_day_onto_leap_year(self):
        assert project_date(date(2000, 2, 29)) == date(2080, 2, 29)

    def test_leap_day_onto_non_leap_year_rolls_to_march(self):
        # 2100 is not a leap year
        assert project_date(date(2020, 2, 29)) == date(2100, 3, 1)

    def test_negative_offset_is_rejected(self):
        with pytest.raises(ValueError, match="years must be non-negative"):
            project_date(date(2000, 1, 1), years=-1)


class TestAddYears:
    """Tests for add_years."""

    def test_backwards(self):
        assert add_years(date(2024, 6, 15), -30) == date(1994, 6, 15)

    def test_leap_day_backwards_onto_non_leap_year(self):
        assert add_years(date(2024, 2, 29), -1) == date(2023, 3, 1)


class TestWholeYearsBetween:
    """Tests for whole_years_between."""

    def test_exact_anniversary(self):
        assert whole_years_between(date(1994, 6, 15), date(2024, 6, 15)) == 30

    def test_day_before_anniversary(self):
        assert whole_years_between(date(1994, 6, 16), date(2024, 6, 15)) == 29

    def test_same_day(self):
        assert whole_years_between(date(2024, 6, 15), date(2024, 6, 15)) == 0

    def test_leap_day_birthday_not_reached_on_february_28(self):
        assert whole_years_between(date(2000, 2, 29), date(2001, 2, 28)) == 0
        assert whole_years_between(date(2000, 2, 29), date(2001, 3, 1)) == 1

    def test_future_start_is_negative(self):
        assert whole_years_between(date(2024, 6, 16), date(2024, 6, 15)) == -1
