"""
Date/time helpers and schedule frequencies.

All curve and instrument dates are timezone-aware UTC ``datetime`` values;
``to_utc`` normalises naive datetimes and bare dates so that comparisons never
mix naive and aware values.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from enum import Enum


MAX_DATE = datetime(9999, 12, 31, tzinfo=timezone.utc)


class Frequency(Enum):
    """Commonly used frequencies, valued in periods per year."""

    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365

    @property
    def periods_per_year(self) -> int:
        return self.value

    def __str__(self) -> str:
        return _FREQUENCY_LABELS[self]


_FREQUENCY_LABELS = {
    Frequency.ONCE: "Once",
    Frequency.ANNUAL: "Annual",
    Frequency.SEMIANNUAL: "SemiAnnual",
    Frequency.EVERY_FOURTH_MONTH: "EveryFourthMonth",
    Frequency.QUARTERLY: "Quarterly",
    Frequency.BIMONTHLY: "Bimonthly",
    Frequency.MONTHLY: "Monthly",
    Frequency.EVERY_FOURTH_WEEK: "EveryFourthWeek",
    Frequency.BIWEEKLY: "Biweekly",
    Frequency.WEEKLY: "Weekly",
    Frequency.DAILY: "Daily",
}


def to_utc(value: date | datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime (naive values are taken as UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def utc_now() -> datetime:
    """Current time in UTC; the default reference date for curves."""
    return datetime.now(timezone.utc)
