"""
Black (lognormal) volatility curves.

``BlackVolatilityCurve`` interpolates volatilities linearly in maturity;
``ConstantVolatilityCurve`` returns one volatility everywhere. Strikes are
accepted by every query but ignored: the smile is assumed flat.

Lookups return interpolation results rather than raising, so callers decide
how to handle a maturity outside the sampled range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from pricing_core.curves.base import BlackVolatilityTermStructure, default_max_date
from pricing_core.dates import to_utc, utc_now
from pricing_core.daycount import DayCounter, get_day_counter
from pricing_core.errors import (
    ArithmeticDomainViolation,
    CurveConstructionError,
    NegativeVolatilityError,
    T2LessThanT1,
)
from pricing_core.floats import Finite, Volatility
from pricing_core.interpolation import (
    ExistingValue,
    InterpolatedValue,
    InterpolationResult,
    LinearInterpolator,
)
from pricing_core.logging import get_logger, log_curve_built
from pricing_core.money import Money

logger = get_logger(__name__)


def _checked_volatility(value: float, when: Optional[datetime] = None) -> Volatility:
    if value == 0:
        # -0.0 is a zero volatility, not a negative one
        value = 0.0
    vol = Volatility.new(value)
    if vol is None:
        where = f" at {when.isoformat()}" if when is not None else ""
        if isinstance(value, (int, float)) and math.isfinite(value):
            raise NegativeVolatilityError(
                f"volatility{where} must be non-negative, got {value!r}",
                context={"date": when, "volatility": value},
            )
        raise CurveConstructionError(
            f"volatility{where} must be a finite number, got {value!r}",
            context={"date": when, "volatility": value},
        )
    return vol


@dataclass(frozen=True)
class BlackVolatilityCurve(BlackVolatilityTermStructure):
    """
    Volatility samples by maturity, linearly interpolated.

    ``points`` are ``(date, volatility)`` pairs; they are sorted on
    construction, must have unique dates on or after ``reference_date`` and
    non-negative finite volatilities. The curve ends at the last sample.
    """

    reference_date: datetime
    points: tuple[tuple[datetime, Volatility], ...]
    day_counter: DayCounter = field(default_factory=get_day_counter)
    max_date: datetime = field(init=False)
    _vols: LinearInterpolator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        reference_date = to_utc(self.reference_date)
        object.__setattr__(self, "reference_date", reference_date)
        if not self.points:
            raise CurveConstructionError("volatility curve needs at least one point")

        points = []
        seen = set()
        for when, vol in self.points:
            when = to_utc(when)
            if when in seen:
                raise CurveConstructionError(
                    f"duplicate volatility date {when.isoformat()}", context={"date": when}
                )
            if when < reference_date:
                raise CurveConstructionError(
                    f"volatility date {when.isoformat()} precedes reference date",
                    context={"date": when, "reference_date": reference_date},
                )
            seen.add(when)
            points.append((when, _checked_volatility(float(vol), when)))

        points.sort()
        object.__setattr__(self, "points", tuple(points))
        object.__setattr__(self, "max_date", points[-1][0])
        # Volatility arithmetic would reject intermediate negative differences.
        object.__setattr__(
            self,
            "_vols",
            LinearInterpolator(
                ((when, Finite(vol.value)) for when, vol in points),
                index_to_float=datetime.timestamp,
            ),
        )
        log_curve_built(logger, "BlackVolatilityCurve", reference_date, len(points))

    def black_volatility(
        self, maturity: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        """Volatility at ``maturity``; ``strike`` is ignored."""
        result = self._vols.interpolate(to_utc(maturity))
        if isinstance(result, ExistingValue):
            return ExistingValue(Volatility(result.value.value))
        if isinstance(result, InterpolatedValue):
            return InterpolatedValue(Volatility(result.value.value))
        return result

    def black_variance(self, maturity: date | datetime, strike: Money | float) -> InterpolationResult[float]:
        """Total variance sigma^2 * t to ``maturity``."""
        result = self.black_volatility(maturity, strike)
        if not isinstance(result, (ExistingValue, InterpolatedValue)):
            return result
        tau = self.year_fraction(maturity)
        return type(result)(result.value.value ** 2 * tau)

    def black_forward_volatility(
        self, start: date | datetime, end: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        """
        Forward volatility between ``start`` and ``end`` from total variance:

            sigma_f^2 = (sigma_2^2 * t_2 - sigma_1^2 * t_1) / (t_2 - t_1)
        """
        start, end = to_utc(start), to_utc(end)
        if end < start:
            raise T2LessThanT1(
                f"forward end {end.isoformat()} precedes start {start.isoformat()}",
                context={"start": start, "end": end},
            )
        first = self.black_variance(start, strike)
        second = self.black_variance(end, strike)
        for result in (first, second):
            if not isinstance(result, (ExistingValue, InterpolatedValue)):
                return result

        t1, t2 = self.year_fraction(start), self.year_fraction(end)
        if t2 == t1:
            return self.black_volatility(end, strike)
        forward_variance = (second.value - first.value) / (t2 - t1)
        if forward_variance < 0:
            raise ArithmeticDomainViolation(
                f"negative forward variance {forward_variance!r} between "
                f"{start.isoformat()} and {end.isoformat()}",
                operation="forward_variance",
                context={"start": start, "end": end},
            )
        return InterpolatedValue(Volatility(math.sqrt(forward_variance)))

    def bumped(self, bump: float) -> BlackVolatilityCurve:
        return BlackVolatilityCurve(
            reference_date=self.reference_date,
            points=tuple((when, vol.value + bump) for when, vol in self.points),
            day_counter=self.day_counter,
        )


@dataclass(frozen=True)
class ConstantVolatilityCurve(BlackVolatilityTermStructure):
    """One volatility for every maturity and strike; validated once at construction."""

    volatility: Volatility
    reference_date: datetime = field(default_factory=utc_now)
    day_counter: DayCounter = field(default_factory=get_day_counter)
    max_date: datetime = field(default_factory=default_max_date)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference_date", to_utc(self.reference_date))
        object.__setattr__(self, "max_date", to_utc(self.max_date))
        if self.volatility is None:
            raise CurveConstructionError("no volatility provided")
        object.__setattr__(self, "volatility", _checked_volatility(float(self.volatility)))
        log_curve_built(logger, "ConstantVolatilityCurve", self.reference_date, 1,
                        context={"volatility": self.volatility.value})

    def black_volatility(
        self, maturity: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        return ExistingValue(self.volatility)

    def black_forward_volatility(
        self, start: date | datetime, end: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        return ExistingValue(self.volatility)

    def bumped(self, bump: float) -> ConstantVolatilityCurve:
        return ConstantVolatilityCurve(
            volatility=self.volatility.value + bump,
            reference_date=self.reference_date,
            day_counter=self.day_counter,
            max_date=self.max_date,
        )


class BlackVolatilityCurveBuilder:
    """Collects ``(date, volatility)`` samples (upserting by date) and builds a BlackVolatilityCurve."""

    def __init__(
        self,
        reference_date: date | datetime,
        day_counter: Optional[DayCounter] = None,
    ) -> None:
        self.reference_date = to_utc(reference_date)
        self.day_counter = day_counter or get_day_counter()
        self._points: LinearInterpolator[datetime, float] = LinearInterpolator(
            index_to_float=datetime.timestamp
        )

    def add_point(self, when: date | datetime, volatility: float) -> Optional[float]:
        """Set the volatility at ``when``; return the value it replaced, if any."""
        return self._points.add_point(to_utc(when), volatility)

    def add_points(
        self, points: Iterable[tuple[date | datetime, float]]
    ) -> list[Optional[float]]:
        return [self.add_point(when, vol) for when, vol in points]

    def remove_point(self, when: date | datetime) -> Optional[float]:
        return self._points.remove_point(to_utc(when))

    def remove_points(self, dates: Iterable[date | datetime]) -> list[Optional[float]]:
        return [self.remove_point(when) for when in dates]

    def __len__(self) -> int:
        return len(self._points)

    def build(self) -> BlackVolatilityCurve:
        return BlackVolatilityCurve(
            reference_date=self.reference_date,
            points=tuple(self._points.points()),
            day_counter=self.day_counter,
        )
