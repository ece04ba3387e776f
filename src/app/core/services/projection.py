"""Calendar projection of a birth date to an expected date of death."""
from datetime import date

DEFAULT_LIFE_EXPECTANCY_YEARS = 80


def add_years(start: date, years: int) -> date:
    """
    Advance a date by a whole number of calendar years.

    A February 29 that lands on a non-leap year overflows to March 1.
    """
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        return date(start.year + years, 3, 1)


def whole_years_between(start: date, end: date) -> int:
    """Number of full years elapsed from start to end (negative if end precedes start)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def project_date(birth_date: date, years: int = DEFAULT_LIFE_EXPECTANCY_YEARS) -> date:
    """Return the projected date of death for a birth date."""
    if years < 0:
        raise ValueError("years must be non-negative")
    return add_years(birth_date, years)
