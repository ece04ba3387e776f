"""Dates shared by the test suite."""
from datetime import date, datetime, UTC

from src.app.core.services.projection import add_years

# Every test runs with "today" = 2024-06-15, noon UTC
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
TODAY = NOW.date()


def years_ago(years: int) -> date:
    """Date exactly `years` calendar years before TODAY."""
    return add_years(TODAY, -years)


def iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")
