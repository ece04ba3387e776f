"""Tests for clock implementations."""
from datetime import datetime, UTC

from src.app.core.services.clock import FixedClock, SystemClock


def test_fixed_clock_returns_its_instant():
    instant = datetime(2024, 6, 15, 23, 30, tzinfo=UTC)
    clock = FixedClock(instant)

    assert clock.now() == instant


def test_fixed_clock_assumes_utc_for_naive_instants():
    clock = FixedClock(datetime(2024, 6, 15, 12, 0))

    assert clock.now().tzinfo is UTC


def test_system_clock_uses_configured_timezone():
    clock = SystemClock(timezone="America/Bogota")

    now = clock.now()

    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == -5 * 3600
