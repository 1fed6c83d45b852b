"""Vega risk measure (volatility bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption
from pricing_core.risk.base import BaseRiskMeasure


@dataclass
class Vega(BaseRiskMeasure):
    """Vega: PV change for an additive shift of every curve volatility."""

    bump: float = 0.01

    @property
    def name(self) -> str:
        return f"Vega_{self.bump:g}"

    def compute(self, option: VanillaOption, pricer: AnalyticBlackScholesMerton) -> float:
        """PV(bumped) - PV(base) for a parallel volatility shift."""
        bumped_pricer = pricer.with_volatility_curve(pricer.volatility_curve.bumped(self.bump))
        return (bumped_pricer.price(option) - pricer.price(option)).value
