"""
Day-count conventions: rules converting a date pair into a year fraction.

Only the interface (``DayCounter``) matters to the rest of the library; the
conventions here are the minimal set used by curves and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol, runtime_checkable

from pricing_core.dates import to_utc

_SECONDS_PER_DAY = 86_400.0


@runtime_checkable
class DayCounter(Protocol):
    """Protocol for day-count conventions."""

    name: str

    def day_count_fraction(self, start: date | datetime, end: date | datetime) -> float:
        """Year fraction between ``start`` and ``end`` (negative if end < start)."""
        ...


def _actual_days(start: date | datetime, end: date | datetime) -> float:
    delta = to_utc(end) - to_utc(start)
    return delta.total_seconds() / _SECONDS_PER_DAY


@dataclass(frozen=True)
class Actual360:
    """Actual/360: actual elapsed days over a 360-day year."""

    name: str = "ACT/360"

    def day_count_fraction(self, start: date | datetime, end: date | datetime) -> float:
        return _actual_days(start, end) / 360.0


@dataclass(frozen=True)
class Actual365Fixed:
    """Actual/365 (Fixed): actual elapsed days over a 365-day year."""

    name: str = "ACT/365F"

    def day_count_fraction(self, start: date | datetime, end: date | datetime) -> float:
        return _actual_days(start, end) / 365.0


@dataclass(frozen=True)
class Thirty360:
    """30/360 US (bond basis). Intraday time is ignored."""

    name: str = "30/360"

    def day_count_fraction(self, start: date | datetime, end: date | datetime) -> float:
        d1, d2 = to_utc(start), to_utc(end)
        day1 = min(d1.day, 30)
        day2 = d2.day
        if day2 == 31 and day1 == 30:
            day2 = 30
        days = 360 * (d2.year - d1.year) + 30 * (d2.month - d1.month) + (day2 - day1)
        return days / 360.0


DAY_COUNTERS: dict[str, DayCounter] = {
    "ACT/360": Actual360(),
    "ACT/365F": Actual365Fixed(),
    "30/360": Thirty360(),
}


def get_day_counter(name: str | None = None) -> DayCounter:
    """Look up a convention by name; None returns the configured default."""
    if name is None:
        from pricing_core.config import get_config

        name = get_config().curves.default_day_counter
    try:
        return DAY_COUNTERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown day-count convention '{name}'. Available: {sorted(DAY_COUNTERS)}"
        ) from None
