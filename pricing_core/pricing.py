"""
Pricing entrypoint.

Most users of the library should only need
``price(option, spot, volatility_curve, yield_curve)``. It builds an
``AnalyticBlackScholesMerton`` pricer for the given market inputs; construct
the pricer directly to reuse it across options or to bump inputs for risk.
"""

from __future__ import annotations

from typing import Sequence

from pricing_core.interfaces import VolatilityCurve, YieldCurve
from pricing_core.money import Money
from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption


def price(
    option: VanillaOption,
    spot: Money,
    volatility_curve: VolatilityCurve,
    yield_curve: YieldCurve,
) -> Money:
    """Return the present value of ``option`` in the spot currency."""
    return AnalyticBlackScholesMerton(spot, volatility_curve, yield_curve).price(option)


def price_many(
    options: Sequence[VanillaOption],
    spot: Money,
    volatility_curve: VolatilityCurve,
    yield_curve: YieldCurve,
) -> list[Money]:
    """Price several options against the same market inputs, preserving order."""
    return AnalyticBlackScholesMerton(spot, volatility_curve, yield_curve).price_vec(options)
