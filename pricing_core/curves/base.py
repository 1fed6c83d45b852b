"""
Term-structure base classes.

Every curve carries a ``reference_date``, a ``day_counter`` and a
``max_date``; queries are valid on the closed interval
``[reference_date, max_date]``. Concrete curves are frozen dataclasses that
provide those three attributes and the abstract query hooks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime

from pricing_core.config import get_config
from pricing_core.daycount import DayCounter
from pricing_core.dates import to_utc
from pricing_core.errors import InvalidDateTime, T2LessThanT1
from pricing_core.floats import CompoundFactor, DiscountFactor, Volatility
from pricing_core.interpolation import InterpolationResult
from pricing_core.money import Money
from pricing_core.rates import (
    Compounding,
    InterestRate,
    effective_year_fraction,
    implied_rate_from_compound_factor,
)


def default_max_date() -> datetime:
    """Configured upper bound for curves without a natural last date."""
    return get_config().curves.max_date


class TermStructure(ABC):
    """Reference date, day counter and date-validity checks shared by all curves."""

    reference_date: datetime
    day_counter: DayCounter
    max_date: datetime

    def is_date_valid(self, when: date | datetime) -> bool:
        when = to_utc(when)
        return self.reference_date <= when <= self.max_date

    def validate_date(self, when: date | datetime) -> datetime:
        """Return ``when`` as UTC, raising InvalidDateTime outside the curve's range."""
        when = to_utc(when)
        if not self.reference_date <= when <= self.max_date:
            raise InvalidDateTime(
                f"{when.isoformat()} lies outside "
                f"[{self.reference_date.isoformat()}, {self.max_date.isoformat()}]",
                date=when,
                context={"curve": type(self).__name__},
            )
        return when

    def year_fraction(self, when: date | datetime) -> float:
        """Day-count fraction from the reference date to ``when``."""
        return self.day_counter.day_count_fraction(self.reference_date, to_utc(when))


class YieldTermStructure(TermStructure):
    """
    Discounting curve.

    Subclasses implement ``_discount_factor`` for an already validated date and
    expose the ``compounding`` used to quote zero and forward rates.
    """

    compounding: Compounding

    @abstractmethod
    def _discount_factor(self, when: datetime) -> DiscountFactor:
        ...

    @abstractmethod
    def bumped(self, bump: float) -> YieldTermStructure:
        """Return a new curve with a parallel additive rate shift."""
        ...

    def discount_factor(self, when: date | datetime) -> DiscountFactor:
        """Discount factor from the reference date to ``when``."""
        return self._discount_factor(self.validate_date(when))

    def zero_rate(self, when: date | datetime) -> InterestRate:
        """Zero rate to ``when``, implied from the discount factor."""
        when = self.validate_date(when)
        df = self._discount_factor(when)
        return implied_rate_from_compound_factor(
            CompoundFactor(1.0 / df.value),
            effective_year_fraction(self.year_fraction(when)),
            self.day_counter,
            self.compounding,
        )

    def forward_rate(self, start: date | datetime, end: date | datetime) -> InterestRate:
        """Forward rate between ``start`` and ``end`` implied by the two discount factors."""
        start = self.validate_date(start)
        end = self.validate_date(end)
        if end < start:
            raise T2LessThanT1(
                f"forward end {end.isoformat()} precedes start {start.isoformat()}",
                context={"start": start, "end": end},
            )
        df1 = self._discount_factor(start)
        df2 = self._discount_factor(end)
        tau = self.year_fraction(end) - self.year_fraction(start)
        return implied_rate_from_compound_factor(
            CompoundFactor(df1.value / df2.value),
            effective_year_fraction(tau),
            self.day_counter,
            self.compounding,
        )


class BlackVolatilityTermStructure(TermStructure):
    """Lognormal volatility by maturity; the smile is flat in strike."""

    @abstractmethod
    def black_volatility(
        self, maturity: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        ...

    @abstractmethod
    def black_forward_volatility(
        self, start: date | datetime, end: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        ...

    @abstractmethod
    def bumped(self, bump: float) -> BlackVolatilityTermStructure:
        """Return a new curve with every volatility shifted by ``bump``."""
        ...
