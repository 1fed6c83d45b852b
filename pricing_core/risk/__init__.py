"""
Risk measures implemented via "bump and reprice".

Use the Delta, Rho and Vega classes for composability; the delta, rho and vega
functions are thin wrappers around them.
"""

from __future__ import annotations

from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption
from pricing_core.risk.base import BaseRiskMeasure
from pricing_core.risk.delta import Delta
from pricing_core.risk.rho import Rho
from pricing_core.risk.vega import Vega


def delta(
    option: VanillaOption,
    pricer: AnalyticBlackScholesMerton,
    bump_pct: float = 0.01,
) -> float:
    """
    Delta: (PV(bumped) - PV(base)) / (spot_bumped - spot).
    Spot is bumped by factor (1 + bump_pct).
    """
    return Delta(bump_pct=bump_pct).compute(option, pricer)


def rho(
    option: VanillaOption,
    pricer: AnalyticBlackScholesMerton,
    bump_bp: float = 1.0,
) -> float:
    """
    Rho: change in PV when the yield curve is bumped by bump_bp basis points (parallel).
    Returns PV(bumped) - PV(base).
    """
    return Rho(bump_bp=bump_bp).compute(option, pricer)


def vega(
    option: VanillaOption,
    pricer: AnalyticBlackScholesMerton,
    bump: float = 0.01,
) -> float:
    """
    Vega: change in PV when every volatility is shifted by ``bump`` (absolute).
    Returns PV(bumped) - PV(base).
    """
    return Vega(bump=bump).compute(option, pricer)


__all__ = [
    "BaseRiskMeasure",
    "Delta",
    "Rho",
    "Vega",
    "delta",
    "rho",
    "vega",
]
