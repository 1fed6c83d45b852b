"""
Interest rates, compounding conventions and rate/compound-factor conversion.

Given a rate r, compounding and a year fraction t:

- Simple:                 CF = 1 + r*t
- Compounding(n):         CF = (1 + r/n)^(n*t)
- Continuous:             CF = exp(r*t)

and DF = 1/CF. ``implied_rate_from_compound_factor`` is the exact inverse of
each formula, so compounding and then implying the rate returns the input rate
up to floating-point error.

A zero year fraction would make the inverse undefined; every conversion goes
through ``effective_year_fraction``, which substitutes the configured minimum
fraction (``NumericsParams.min_year_fraction``) instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pricing_core.config import get_config
from pricing_core.dates import Frequency
from pricing_core.daycount import DayCounter
from pricing_core.errors import DomainConstructionError
from pricing_core.floats import CompoundFactor, DiscountFactor, Finite
from pricing_core.logging import get_logger

logger = get_logger(__name__)


class CompoundingKind(Enum):
    SIMPLE = "Simple"
    COMPOUNDED = "Compounding"
    CONTINUOUS = "Continuous"


@dataclass(frozen=True)
class Compounding:
    """
    Compounding convention tag.

    Use the constructors ``simple``, ``compounded`` and ``continuous`` rather
    than building the record directly.
    """

    kind: CompoundingKind
    frequency: Optional[Frequency] = None

    def __post_init__(self) -> None:
        if self.kind is CompoundingKind.CONTINUOUS:
            if self.frequency is not None:
                raise DomainConstructionError(self.frequency, "Compounding", "(continuous has no frequency)")
            return
        if self.frequency is None:
            raise DomainConstructionError(None, "Compounding", f"({self.kind.value} needs a frequency)")
        if self.kind is CompoundingKind.COMPOUNDED and self.frequency is Frequency.ONCE:
            raise DomainConstructionError(
                self.frequency, "Compounding", "(compounding frequency must be periodic)"
            )

    @classmethod
    def simple(cls, frequency: Frequency = Frequency.ANNUAL) -> Compounding:
        return cls(CompoundingKind.SIMPLE, frequency)

    @classmethod
    def compounded(cls, frequency: Frequency) -> Compounding:
        return cls(CompoundingKind.COMPOUNDED, frequency)

    @classmethod
    def continuous(cls) -> Compounding:
        return cls(CompoundingKind.CONTINUOUS)

    def __str__(self) -> str:
        if self.frequency is None:
            return self.kind.value
        return f"{self.kind.value}({self.frequency})"


def effective_year_fraction(year_fraction: float) -> float:
    """Return ``year_fraction``, or the configured minimum if it is exactly zero."""
    if year_fraction == 0:
        minimum = get_config().numerics.min_year_fraction
        logger.debug("zero_year_fraction_substituted", substitute=minimum)
        return minimum
    return year_fraction


def _compound_factor(rate: float, compounding: Compounding, t: float) -> float:
    if compounding.kind is CompoundingKind.SIMPLE:
        return 1.0 + rate * t
    if compounding.kind is CompoundingKind.CONTINUOUS:
        try:
            return math.exp(rate * t)
        except OverflowError:
            return math.inf
    n = compounding.frequency.periods_per_year
    base = 1.0 + rate / n
    if base <= 0:
        # Fractional powers of a non-positive base are not real.
        return math.nan
    try:
        return base ** (n * t)
    except OverflowError:
        return math.inf


@dataclass(frozen=True, eq=False)
class InterestRate:
    """A rate together with its day-count convention and compounding."""

    rate: Finite
    day_counter: DayCounter
    compounding: Compounding

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Finite):
            object.__setattr__(self, "rate", Finite(self.rate))

    def compound_factor(self, year_fraction: float) -> CompoundFactor:
        """Growth of one unit over ``year_fraction`` years."""
        return CompoundFactor(_compound_factor(self.rate.value, self.compounding, year_fraction))

    def discount_factor(self, year_fraction: float) -> DiscountFactor:
        """
        Present value of one unit paid after ``year_fraction`` years.

        Raises DomainConstructionError when the result leaves (0, 1], e.g. for
        a negative rate.
        """
        cf = _compound_factor(self.rate.value, self.compounding, year_fraction)
        if not cf > 0:
            raise DomainConstructionError(cf, "CompoundFactor", CompoundFactor.domain)
        return DiscountFactor(1.0 / cf)

    def compound_factor_between(self, start: Any, end: Any) -> CompoundFactor:
        """Compound factor over the day-count fraction from ``start`` to ``end``."""
        return self.compound_factor(self.day_counter.day_count_fraction(start, end))

    def bumped(self, bump: float) -> InterestRate:
        """Return a new rate shifted additively by ``bump`` (1bp = 0.0001)."""
        return InterestRate(Finite(self.rate + bump), self.day_counter, self.compounding)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterestRate):
            return NotImplemented
        return self.rate == other.rate and self.compounding == other.compounding

    def __hash__(self) -> int:
        return hash((self.rate.value, self.compounding))

    def __str__(self) -> str:
        return f"{self.rate.value:.6%} {self.compounding}"


def implied_rate_from_compound_factor(
    compound_factor: CompoundFactor | float,
    year_fraction: float,
    day_counter: DayCounter,
    compounding: Compounding,
) -> InterestRate:
    """
    The rate that grows one unit into ``compound_factor`` over ``year_fraction``.

    Inverse of ``InterestRate.compound_factor``:

    - Simple:        r = (CF - 1) / t
    - Compounding:   r = n * (CF^(1/(n*t)) - 1)
    - Continuous:    r = ln(CF) / t
    """
    cf = float(compound_factor)
    if not cf > 0 or not math.isfinite(cf):
        raise DomainConstructionError(compound_factor, "CompoundFactor", CompoundFactor.domain)
    t = effective_year_fraction(year_fraction)

    if compounding.kind is CompoundingKind.SIMPLE:
        rate = (cf - 1.0) / t
    elif compounding.kind is CompoundingKind.CONTINUOUS:
        rate = math.log(cf) / t
    else:
        n = compounding.frequency.periods_per_year
        rate = n * (cf ** (1.0 / (n * t)) - 1.0)

    return InterestRate(Finite(rate), day_counter, compounding)
