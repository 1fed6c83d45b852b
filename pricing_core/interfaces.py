"""
Protocol-based interfaces for the extension points of the pricing core.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance, so
new curves, pricers and risk measures plug in without touching core code.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from pricing_core.daycount import DayCounter
    from pricing_core.floats import DiscountFactor, Volatility
    from pricing_core.interpolation import InterpolationResult
    from pricing_core.money import Money
    from pricing_core.rates import InterestRate


@runtime_checkable
class YieldCurve(Protocol):
    """Protocol for discounting curves.

    Anything with discount/zero/forward queries and a parallel bump can be
    used by the pricer and the rho measure.
    """

    reference_date: datetime

    def discount_factor(self, when: date | datetime) -> DiscountFactor:
        """Discount factor from the reference date to ``when``."""
        ...

    def zero_rate(self, when: date | datetime) -> InterestRate:
        ...

    def forward_rate(self, start: date | datetime, end: date | datetime) -> InterestRate:
        ...

    def bumped(self, bump: float) -> YieldCurve:
        """Return new curve with parallel additive rate shift."""
        ...


@runtime_checkable
class VolatilityCurve(Protocol):
    """Protocol for Black volatility term structures."""

    reference_date: datetime
    day_counter: DayCounter

    def black_volatility(
        self, maturity: date | datetime, strike: Money | float
    ) -> InterpolationResult[Volatility]:
        ...

    def bumped(self, bump: float) -> VolatilityCurve:
        ...


@runtime_checkable
class Instrument(Protocol):
    """Marker protocol for all priceable instruments.

    Instruments are data-only; pricing logic lives in Pricer implementations.
    """

    pass


class Pricer(Protocol):
    """Protocol for instrument pricing implementations."""

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument."""
        ...

    def price(self, instrument: Instrument) -> Money:
        """Present value in the spot currency."""
        ...

    def price_vec(self, instruments: Sequence[Instrument]) -> list[Money]:
        ...


class RiskMeasure(Protocol):
    """Protocol for risk measure implementations.

    Risk measures are composable objects that compute sensitivities
    (delta, rho, vega) via bump-and-reprice.
    """

    @property
    def name(self) -> str:
        """Human-readable name (e.g., 'Delta', 'Rho_1bp')."""
        ...

    def compute(self, instrument: Instrument, pricer: Pricer) -> float:
        """Compute the risk measure value."""
        ...
