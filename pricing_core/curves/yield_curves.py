"""
Yield curves.

- ``FlatForwardCurve``: one ``InterestRate`` drives every maturity.
- ``InterpolatedZeroCurve``: zero rates sampled at pillar dates, linear in the
  zero rate between pillars and flat before the first one. Built directly
  from pillars or through ``ZeroCurveBuilder``.

Both are immutable; ``bumped`` returns a new curve with a parallel additive
shift, the building block for rho-style sensitivities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from pricing_core.curves.base import YieldTermStructure, default_max_date
from pricing_core.dates import to_utc
from pricing_core.daycount import DayCounter, get_day_counter
from pricing_core.errors import CurveConstructionError
from pricing_core.floats import DiscountFactor, Finite
from pricing_core.interpolation import LinearInterpolator, unwrap
from pricing_core.logging import get_logger, log_curve_built
from pricing_core.rates import Compounding, InterestRate, effective_year_fraction

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlatForwardCurve(YieldTermStructure):
    """Flat forward curve: constant rate from the reference date to ``max_date``."""

    reference_date: datetime
    rate: InterestRate
    max_date: datetime = field(default_factory=default_max_date)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference_date", to_utc(self.reference_date))
        object.__setattr__(self, "max_date", to_utc(self.max_date))
        if self.max_date < self.reference_date:
            raise CurveConstructionError(
                "max_date must not precede reference_date",
                context={"reference_date": self.reference_date, "max_date": self.max_date},
            )
        log_curve_built(logger, "FlatForwardCurve", self.reference_date, 1,
                        context={"rate": str(self.rate)})

    @property
    def day_counter(self) -> DayCounter:
        return self.rate.day_counter

    @property
    def compounding(self) -> Compounding:
        return self.rate.compounding

    def _discount_factor(self, when: datetime) -> DiscountFactor:
        return self.rate.discount_factor(effective_year_fraction(self.year_fraction(when)))

    def bumped(self, bump: float) -> FlatForwardCurve:
        return FlatForwardCurve(
            reference_date=self.reference_date,
            rate=self.rate.bumped(bump),
            max_date=self.max_date,
        )


@dataclass(frozen=True)
class InterpolatedZeroCurve(YieldTermStructure):
    """
    Zero-rate curve interpolated linearly between pillar dates.

    - ``pillars`` are ``(date, zero_rate)`` pairs; they are sorted on
      construction, must be unique and must not precede ``reference_date``.
    - Rates are quoted with ``compounding`` (continuous by default) and
      ``day_counter`` (the configured default when omitted).
    - Before the first pillar the first rate applies; the curve ends at the
      last pillar.
    """

    reference_date: datetime
    pillars: tuple[tuple[datetime, Finite], ...]
    day_counter: DayCounter = field(default_factory=get_day_counter)
    compounding: Compounding = field(default_factory=Compounding.continuous)
    max_date: datetime = field(init=False)
    _rates: LinearInterpolator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        reference_date = to_utc(self.reference_date)
        object.__setattr__(self, "reference_date", reference_date)
        self._validate()

        pillars = tuple(sorted((to_utc(d), Finite(r)) for d, r in self.pillars))
        object.__setattr__(self, "pillars", pillars)
        object.__setattr__(self, "max_date", pillars[-1][0])
        object.__setattr__(
            self, "_rates", LinearInterpolator(pillars, index_to_float=datetime.timestamp)
        )
        log_curve_built(logger, "InterpolatedZeroCurve", reference_date, len(pillars),
                        context={"compounding": str(self.compounding)})

    def _validate(self) -> None:
        if not self.pillars:
            raise CurveConstructionError("curve needs at least one pillar")
        seen = set()
        for when, rate in self.pillars:
            when = to_utc(when)
            if when in seen:
                raise CurveConstructionError(
                    f"duplicate pillar date {when.isoformat()}", context={"date": when}
                )
            seen.add(when)
            if when < self.reference_date:
                raise CurveConstructionError(
                    f"pillar {when.isoformat()} precedes reference date",
                    context={"date": when, "reference_date": self.reference_date},
                )
            if Finite.new(rate) is None:
                raise CurveConstructionError(
                    f"zero rate at {when.isoformat()} must be finite, got {rate!r}",
                    context={"date": when, "rate": rate},
                )

    def zero_rate_at(self, when: date | datetime) -> float:
        """Raw interpolated zero rate at ``when`` (flat before the first pillar)."""
        when = self.validate_date(when)
        first_date, first_rate = self.pillars[0]
        if when <= first_date:
            return first_rate.value
        return unwrap(self._rates.interpolate(when)).value

    def _discount_factor(self, when: datetime) -> DiscountFactor:
        rate = InterestRate(Finite(self.zero_rate_at(when)), self.day_counter, self.compounding)
        return rate.discount_factor(effective_year_fraction(self.year_fraction(when)))

    def bumped(self, bump: float) -> InterpolatedZeroCurve:
        return InterpolatedZeroCurve(
            reference_date=self.reference_date,
            pillars=tuple((d, r + bump) for d, r in self.pillars),
            day_counter=self.day_counter,
            compounding=self.compounding,
        )


class ZeroCurveBuilder:
    """Collects pillar rates (upserting by date) and builds an InterpolatedZeroCurve."""

    def __init__(
        self,
        reference_date: date | datetime,
        day_counter: Optional[DayCounter] = None,
        compounding: Optional[Compounding] = None,
    ) -> None:
        self.reference_date = to_utc(reference_date)
        self.day_counter = day_counter or get_day_counter()
        self.compounding = compounding or Compounding.continuous()
        self._points: LinearInterpolator[datetime, float] = LinearInterpolator(
            index_to_float=datetime.timestamp
        )

    def add_rate(self, when: date | datetime, rate: float) -> Optional[float]:
        """Set the zero rate at ``when``; return the rate it replaced, if any."""
        return self._points.add_point(to_utc(when), rate)

    def add_rates(self, rates: Iterable[tuple[date | datetime, float]]) -> list[Optional[float]]:
        return [self.add_rate(when, rate) for when, rate in rates]

    def remove_rate(self, when: date | datetime) -> Optional[float]:
        return self._points.remove_point(to_utc(when))

    def remove_rates(self, dates: Iterable[date | datetime]) -> list[Optional[float]]:
        return [self.remove_rate(when) for when in dates]

    def __len__(self) -> int:
        return len(self._points)

    def build(self) -> InterpolatedZeroCurve:
        return InterpolatedZeroCurve(
            reference_date=self.reference_date,
            pillars=tuple(self._points.points()),
            day_counter=self.day_counter,
            compounding=self.compounding,
        )
