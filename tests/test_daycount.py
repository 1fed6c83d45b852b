"""Tests for day-count conventions."""

from datetime import date, datetime, timezone

import pytest

from pricing_core.daycount import (
    Actual360,
    Actual365Fixed,
    DayCounter,
    Thirty360,
    get_day_counter,
)


def test_actual_365_fixed_leap_year() -> None:
    """2024 is a leap year: 366 actual days over 365."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert abs(Actual365Fixed().day_count_fraction(start, end) - 366 / 365) < 1e-15


def test_actual_360() -> None:
    """182 actual days over 360."""
    assert abs(Actual360().day_count_fraction(date(2024, 1, 1), date(2024, 7, 1)) - 182 / 360) < 1e-15


def test_actual_counts_intraday_time() -> None:
    """Half a day counts as half a day."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert abs(Actual365Fixed().day_count_fraction(start, end) - 0.5 / 365) < 1e-15


def test_reversed_dates_are_negative() -> None:
    """Fractions are signed."""
    assert Actual360().day_count_fraction(date(2024, 2, 1), date(2024, 1, 1)) < 0


def test_thirty_360_month_end_rules() -> None:
    """31st treated as 30th when the start is a month end."""
    assert Thirty360().day_count_fraction(date(2024, 1, 31), date(2024, 3, 31)) == 60 / 360
    assert Thirty360().day_count_fraction(date(2024, 1, 15), date(2025, 1, 15)) == 1.0


def test_naive_and_aware_inputs_mix() -> None:
    """Naive datetimes are taken as UTC."""
    aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
    naive = datetime(2024, 1, 11)
    assert abs(Actual360().day_count_fraction(aware, naive) - 10 / 360) < 1e-15


def test_lookup() -> None:
    """Lookup by name, default from configuration."""
    assert isinstance(get_day_counter("ACT/360"), Actual360)
    assert isinstance(get_day_counter(), Actual365Fixed)
    assert isinstance(get_day_counter("30/360"), DayCounter)
    with pytest.raises(KeyError, match="Unknown day-count convention"):
        get_day_counter("ACT/ACT")
